# seed_articles.py
# Purpose: load articles from a JSON export into the configured record store.
# Usage: python seed_articles.py articles.json (from the project root).

import json
import sys

from paperdrill_app import create_app
from paperdrill_app.store import get_store
from paperdrill_app.store.seed import import_articles


def seed(path):
    app = create_app()
    with app.app_context():
        with open(path, 'r', encoding='utf-8') as handle:
            items = json.load(handle)
        if isinstance(items, dict):
            items = items.get('articles', [])
        written = import_articles(get_store(), items)
        print(f"Imported {len(written)} article(s) into {app.config['STORE_BACKEND']} store.")


if __name__ == '__main__':
    if len(sys.argv) != 2:
        print("Usage: python seed_articles.py ARTICLES.json")
        sys.exit(1)
    seed(sys.argv[1])
