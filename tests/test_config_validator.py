# tests/test_config_validator.py

import pytest

from core.config import settings
from core.config_validator import validate_config_on_startup, validate_required_config
from core.permissions import RESOURCE_LABELS
from models.enums import Resource


def test_required_config_present():
    assert validate_required_config() == []


def test_missing_session_secret_is_reported(monkeypatch):
    monkeypatch.setattr(settings, "SESSION_SECRET_KEY", None)

    assert validate_required_config() == ["SESSION_SECRET_KEY"]
    with pytest.raises(RuntimeError):
        validate_config_on_startup()


def test_unlabelled_resource_fails_startup(monkeypatch):
    monkeypatch.delitem(RESOURCE_LABELS, Resource.users)

    with pytest.raises(RuntimeError, match="resource 'users' has no label"):
        validate_config_on_startup()
