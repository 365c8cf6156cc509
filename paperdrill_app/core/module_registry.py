"""Declarative registry of the feature modules mounted on the app.

Every feature package exposes a page blueprint and a JSON API blueprint.
A ``ModuleDefinition`` names the package and where each blueprint mounts;
API blueprints are exempt from CSRF since they only accept JSON bodies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class BlueprintMount:
    attribute: str
    url_prefix: Optional[str] = None
    api: bool = False


@dataclass(frozen=True)
class ModuleDefinition:
    """A feature package and the blueprints it contributes."""

    import_path: str
    mounts: Tuple[BlueprintMount, ...]
    version: str = "1.0"

    def load(self):
        return import_string(self.import_path)

    def is_enabled(self, package) -> bool:
        metadata = getattr(package, "module_metadata", None) or {}
        return bool(metadata.get("enabled", True))

    def blueprints(self, package) -> Iterable[Tuple[Blueprint, BlueprintMount]]:
        for mount in self.mounts:
            blueprint = getattr(package, mount.attribute, None)
            if not isinstance(blueprint, Blueprint):
                raise TypeError(
                    "Expected '%s.%s' to be a Flask Blueprint, got %r"
                    % (self.import_path, mount.attribute, type(blueprint))
                )
            yield blueprint, mount


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    from .extensions import csrf_protect

    for module in modules:
        package = module.load()
        if not module.is_enabled(package):
            app.logger.info("Module %s is disabled, skipping", module.import_path)
            continue
        for blueprint, mount in module.blueprints(package):
            if mount.api:
                csrf_protect.exempt(blueprint)
            app.register_blueprint(blueprint, url_prefix=mount.url_prefix)
            app.logger.debug(
                "Registered %s (module %s v%s) at %s",
                blueprint.name,
                module.import_path,
                module.version,
                mount.url_prefix or "/",
            )


def register_default_modules(app: Flask) -> None:
    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Sequence[ModuleDefinition] = (
    ModuleDefinition(
        "paperdrill_app.modules.auth",
        (BlueprintMount("auth_bp"), BlueprintMount("auth_api_bp", "/api", api=True)),
    ),
    ModuleDefinition(
        "paperdrill_app.modules.catalog",
        (BlueprintMount("catalog_bp"), BlueprintMount("catalog_api_bp", "/api", api=True)),
    ),
    ModuleDefinition(
        "paperdrill_app.modules.exercise",
        (BlueprintMount("exercise_bp", "/exercise"), BlueprintMount("exercise_api_bp", "/api/exercise", api=True)),
    ),
    ModuleDefinition(
        "paperdrill_app.modules.reflection",
        (BlueprintMount("reflection_bp", "/exercise"), BlueprintMount("reflection_api_bp", "/api", api=True)),
    ),
)
