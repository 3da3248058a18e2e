# tests/test_logging.py
import logging

import structlog

from iomad_admin.core import logging as app_logging
from iomad_admin.core.config import settings
from iomad_admin.core.security import Identity


def test_log_level_follows_debug_unless_overridden(monkeypatch):
    monkeypatch.setattr(settings, "LOG_LEVEL", None)
    monkeypatch.setattr(settings, "DEBUG", True)
    assert app_logging.resolve_log_level() == logging.DEBUG

    monkeypatch.setattr(settings, "DEBUG", False)
    assert app_logging.resolve_log_level() == logging.INFO

    monkeypatch.setattr(settings, "LOG_LEVEL", "warning")
    assert app_logging.resolve_log_level() == logging.WARNING


def test_bind_identity_sets_and_clears_request_context():
    app_logging.bind_identity(Identity("u1", "c1"))
    assert structlog.contextvars.get_contextvars() == {"user_id": "u1", "company_id": "c1"}

    app_logging.bind_identity(None)
    assert structlog.contextvars.get_contextvars() == {}
