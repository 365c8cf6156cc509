"""
File logging for PaperDrill.

The console handler comes from bootstrap; this module only adds a rotating
file under ``LOG_DIR``, either human-readable or one JSON object per line.
"""

import json
import logging
import logging.handlers
import os

LOG_FILE_NAME = 'paperdrill.log'
MAX_BYTES = 10 * 1024 * 1024
BACKUP_COUNT = 5

TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'time': self.formatTime(record, '%Y-%m-%dT%H:%M:%S'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            payload['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def build_file_handler(log_dir: str, level: int, json_format: bool = False) -> logging.Handler:
    os.makedirs(log_dir, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, LOG_FILE_NAME),
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding='utf-8',
    )
    handler.setLevel(level)
    handler.setFormatter(JsonLineFormatter() if json_format else logging.Formatter(TEXT_FORMAT))
    return handler


def setup_logging(app) -> logging.Handler:
    """
    Attach the rotating file handler to ``app.logger``.

    Module loggers under ``paperdrill_app.*`` propagate to the app logger,
    so store backends end up in the same file. Calling this twice replaces
    the earlier file handler.
    """
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    handler = build_file_handler(app.config['LOG_DIR'], level, app.config.get('LOG_JSON', False))

    app.logger.handlers = [h for h in app.logger.handlers
                           if not isinstance(h, logging.handlers.RotatingFileHandler)]
    app.logger.addHandler(handler)
    logging.getLogger('werkzeug').setLevel(logging.WARNING)

    app.logger.info(f"File logging enabled: {handler.baseFilename}")
    return handler
