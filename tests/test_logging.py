import json
import logging

from app.core.config import Settings
from app.core.logging import (
    DevelopmentFormatter,
    StructuredFormatter,
    get_logger,
    setup_logging,
)


def make_record(**extra):
    record = logging.LogRecord(
        name="usercrud.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Updated user %s",
        args=("abc",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_get_logger_namespaces_name():
    assert get_logger("app.services").name == "usercrud.app.services"


def test_structured_formatter_emits_json_with_context():
    output = StructuredFormatter().format(make_record(user_id="abc", method="PATCH"))

    data = json.loads(output)
    assert data["message"] == "Updated user abc"
    assert data["level"] == "INFO"
    assert data["user_id"] == "abc"
    assert data["method"] == "PATCH"
    assert "path" not in data


def test_development_formatter_is_readable():
    output = DevelopmentFormatter().format(make_record(user_id="abc"))

    assert "usercrud.test: Updated user abc" in output
    assert "[user_id=abc]" in output


def test_development_formatter_prints_every_context_field():
    output = DevelopmentFormatter().format(
        make_record(method="GET", path="/user", process_time=6.5)
    )

    assert "[method=GET, path=/user, process_time=6.5]" in output
    assert "user_id" not in output


def test_setup_logging_picks_formatter_by_environment():
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    try:
        setup_logging(Settings(ENVIRONMENT="production", LOG_LEVEL="WARNING"))
        assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        assert root.level == logging.WARNING

        setup_logging(Settings(ENVIRONMENT="development"))
        assert isinstance(root.handlers[0].formatter, DevelopmentFormatter)
        assert logging.getLogger("pymongo").level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
