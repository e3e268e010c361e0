import json
import logging

from core.logging import get_context, get_logger, log_context
from core.logging.formatter import ConsoleFormatter, JSONFormatter
from core.logging.levels import LogLevel, register_levels, to_level


def _record(logger_name="nuzlolcke.test", **extra):
    record = logging.LogRecord(logger_name, logging.INFO, __file__, 10, "hello %s", ("world",), None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_to_level():
    assert to_level("trace") == LogLevel.TRACE
    assert to_level("SUCCESS") == LogLevel.SUCCESS
    assert to_level("warning") == logging.WARNING
    assert to_level("nonsense") == logging.INFO
    assert to_level(15) == 15


def test_register_levels_names_custom_levels():
    register_levels()
    assert logging.getLevelName(int(LogLevel.TRACE)) == "TRACE"
    assert logging.getLevelName(int(LogLevel.SUCCESS)) == "SUCCESS"


def test_log_context_is_scoped():
    with log_context(match_id="NA1_1"):
        with log_context(puuid="p"):
            assert get_context() == {"match_id": "NA1_1", "puuid": "p"}
        assert get_context() == {"match_id": "NA1_1"}
    assert get_context() == {}


def test_json_formatter_includes_context():
    line = JSONFormatter().format(_record(service="loss-filter", context={"match_id": "NA1_1"}))
    payload = json.loads(line)
    assert payload["message"] == "hello world"
    assert payload["service"] == "loss-filter"
    assert payload["context"] == {"match_id": "NA1_1"}


def test_console_formatter_without_color():
    line = ConsoleFormatter(color=False).format(_record(service="cli", context={"puuid": "p"}))
    assert "hello world" in line
    assert "puuid=p" in line
    assert "\033[" not in line


def test_structured_logger_snapshots_context(caplog):
    log = get_logger("nuzlolcke.test", service="unit")
    with caplog.at_level(logging.INFO, logger="nuzlolcke.test"):
        with log_context(match_id="NA1_9"):
            log.info(lambda: "lazy message")
        log.debug("suppressed")
    [record] = caplog.records
    assert record.getMessage() == "lazy message"
    assert record.service == "unit"
    assert record.context == {"match_id": "NA1_9"}
