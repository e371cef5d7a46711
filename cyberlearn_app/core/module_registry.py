"""Blueprint registration driven by each feature module's ``module_metadata``.

A feature package exposes its blueprint (directly or from its ``routes``
subpackage) and a ``module_metadata`` dict; the factory only lists packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from flask import Blueprint, Flask
from werkzeug.utils import import_string

DEFAULT_METADATA: Dict[str, Any] = {
    'name': None,
    'category': 'System',
    'url_prefix': None,
    'enabled': True,
}


@dataclass(frozen=True)
class ModuleEntry:
    package: str
    blueprint_attr: str
    routes_module: Optional[str] = 'routes'

    def resolve(self) -> Tuple[Blueprint, Dict[str, Any]]:
        """Import the package and return (blueprint, merged metadata)."""
        package = import_string(self.package)
        metadata = dict(DEFAULT_METADATA, **getattr(package, 'module_metadata', {}))
        metadata['name'] = metadata['name'] or self.package.rsplit('.', 1)[-1]

        source = import_string(f'{self.package}.{self.routes_module}') if self.routes_module else package
        blueprint = getattr(source, self.blueprint_attr, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                f"{source.__name__}.{self.blueprint_attr} must be a Flask Blueprint, got {type(blueprint)!r}"
            )
        return blueprint, metadata


def register_modules(app: Flask, entries: Iterable[ModuleEntry]) -> None:
    for entry in entries:
        blueprint, metadata = entry.resolve()
        if not metadata['enabled']:
            app.logger.info("Module %s is disabled, skipping", metadata['name'])
            continue
        app.register_blueprint(blueprint, url_prefix=metadata['url_prefix'])
        app.logger.debug(
            "Registered %s module %s at %s", metadata['category'], metadata['name'], metadata['url_prefix'] or '/'
        )


DEFAULT_MODULES: Tuple[ModuleEntry, ...] = (
    ModuleEntry('cyberlearn_app.modules.content', 'content_bp'),
    ModuleEntry('cyberlearn_app.modules.auth', 'auth_bp'),
    ModuleEntry('cyberlearn_app.modules.system', 'system_bp', routes_module=None),
)


def register_default_modules(app: Flask) -> None:
    register_modules(app, DEFAULT_MODULES)
