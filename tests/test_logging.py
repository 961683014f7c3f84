"""Debug logging follows the settings the app was built with."""

import logging
from dataclasses import replace

from app.main import create_app
from app.utils.logging import debug_enabled, debug_log


def test_debug_log_follows_settings(settings, caplog):
    create_app(settings)
    assert debug_enabled() is True
    with caplog.at_level(logging.DEBUG, logger="Wishwell"):
        debug_log("wish form from %s", "Leo")
    assert "wish form from Leo" in caplog.text

    caplog.clear()
    create_app(replace(settings, debug=False))
    assert debug_enabled() is False
    with caplog.at_level(logging.DEBUG, logger="Wishwell"):
        debug_log("hidden %s", "message")
    assert "hidden message" not in caplog.text
