import logging

from core.error_handler import StructuredLogger, set_correlation_id


def test_structured_logger_redacts_sensitive_keys():
    logger = StructuredLogger("tests")

    # use non-sensitive placeholder values to avoid secret-detection false positives
    data = {
        "api_key": "placeholder_key",  # pragma: allowlist secret
        "prompt": "what is my password",
        "model": "gemini-2.5-flash",
    }
    sanitized = logger._sanitize_data(data)

    assert sanitized["api_key"] == "[REDACTED]"
    assert sanitized["prompt"] == "[REDACTED]"
    assert sanitized["model"] == "gemini-2.5-flash"


def test_structured_logger_redacts_nested_values():
    logger = StructuredLogger("tests")

    sanitized = logger._sanitize_data(
        {"request": {"Authorization": "Bearer x", "chars": 5}, "items": [{"token": "t"}]}
    )

    assert sanitized["request"] == {"Authorization": "[REDACTED]", "chars": 5}
    assert sanitized["items"] == [{"token": "[REDACTED]"}]


def test_structured_logger_includes_correlation_id(caplog):
    logger = StructuredLogger("tests")
    set_correlation_id("corr-1")

    with caplog.at_level(logging.INFO, logger="tests"):
        logger.info("hello", chars=3, prompt="hidden text")

    set_correlation_id(None)
    assert "[corr-1] hello" in caplog.text
    assert "chars=3" in caplog.text
    assert "hidden text" not in caplog.text


def test_setup_logging_uses_json_in_production(monkeypatch):
    from unittest.mock import patch

    from pythonjsonlogger.json import JsonFormatter

    from core.error_handler import setup_logging

    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    with patch("core.error_handler.get_settings") as mock_settings:
        mock_settings.return_value.ENVIRONMENT = "production"
        setup_logging()
        # second call is a no-op
        setup_logging()

    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_production_logging_accepts_record_attribute_names(caplog):
    from unittest.mock import patch

    logger = StructuredLogger("tests")
    set_correlation_id("corr-2")

    with patch("core.error_handler.get_settings") as mock_settings:
        mock_settings.return_value.ENVIRONMENT = "production"
        with caplog.at_level(logging.INFO, logger="tests"):
            logger.info("hello", name="shadow", args="x", msg="y", api_key="k")

    set_correlation_id(None)
    record = caplog.records[-1]
    assert record.getMessage() == "hello"
    assert record.name == "tests"
    assert record.structured_data == {
        "correlation_id": "corr-2",
        "name": "shadow",
        "args": "x",
        "msg": "y",
        "api_key": "[REDACTED]",
    }
