import pytest
from flask import Blueprint

import cyberlearn_app.modules.content as content_module
from cyberlearn_app import create_app, db
from cyberlearn_app.core.module_registry import DEFAULT_MODULES, ModuleEntry

from conftest import TestConfig


def test_default_modules_resolve():
    resolved = {entry.package: entry.resolve() for entry in DEFAULT_MODULES}

    blueprint, metadata = resolved['cyberlearn_app.modules.content']
    assert isinstance(blueprint, Blueprint)
    assert metadata['url_prefix'] == '/api'

    _, metadata = resolved['cyberlearn_app.modules.system']
    assert metadata['url_prefix'] is None
    assert metadata['enabled'] is True


def test_wrong_attribute_is_rejected():
    with pytest.raises(TypeError):
        ModuleEntry('cyberlearn_app.modules.content', 'module_metadata').resolve()


def test_disabled_module_is_not_registered(monkeypatch):
    monkeypatch.setitem(content_module.module_metadata, 'enabled', False)
    app = create_app(TestConfig)
    with app.app_context():
        assert 'content' not in app.blueprints
        assert app.test_client().get('/api/content').status_code == 404
        db.session.remove()
        db.drop_all()
