import json
import logging

from app.config import settings
from app.infrastructure.logging import add_app_context, configure_logging, get_logger


def test_add_app_context_fills_missing_keys_only():
    """
    Validate the app context processor.

    1. Run the processor on an event without app keys.
    2. Validate app name and version are added.
    3. Run it on an event that already names an app.
    4. Validate the existing value is kept.
    """
    enriched = add_app_context(None, "info", {"event": "ping"})
    assert enriched["app"] == settings.app_name
    assert enriched["version"] == settings.app_version
    assert add_app_context(None, "info", {"event": "ping", "app": "other"})["app"] == "other"


def test_json_logs_render_event_and_exception(caplog):
    """
    Validate JSON rendering keeps the exception text.

    1. Configure JSON logging.
    2. Log an error with an exception through a fresh logger.
    3. Parse the captured record.
    4. Validate event, logger name and exception text.
    5. Restore console logging.
    """
    configure_logging(level="INFO", json_logs=True)
    try:
        caplog.set_level(logging.INFO)
        get_logger("tests.json").error("lookup_failed", exc_info=RuntimeError("kept for operators"))
        payload = json.loads(caplog.records[-1].getMessage())
        assert payload["event"] == "lookup_failed"
        assert payload["logger"] == "tests.json"
        assert "kept for operators" in payload["exception"]
    finally:
        configure_logging(level="INFO", json_logs=False)
