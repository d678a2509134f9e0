import json
import logging
import sys

from schemagraph import build_registry
from schemagraph.logging_config import JsonFormatter, configure_logging

from tests.helpers.definitions import type_def


def test_assembly_summary_written_as_jsonl(tmp_path):
    log_file = tmp_path / "logs" / "schemagraph.jsonl"
    configure_logging(level="info", jsonl=True, log_file=log_file)

    build_registry([type_def("user", "User"), type_def("account", "User")])
    for handler in logging.getLogger().handlers:
        handler.flush()

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    summary = [r for r in records if r["logger"] == "schemagraph.assembly.writer"]
    assert summary[-1]["level"] == "INFO"
    assert summary[-1]["message"] == "Assembled 1 types, 0 directives with 1 errors"


def test_debug_level_enables_rule_logging(tmp_path):
    log_file = tmp_path / "schemagraph.log"
    configure_logging(level="DEBUG", log_file=log_file)

    build_registry([type_def("user", "User")])
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Rule field_imports_exist" in text
    assert "Realized 'user' via BuildArtifact" in text


def test_json_formatter_includes_exception():
    formatter = JsonFormatter()
    try:
        raise ValueError("broken builder")
    except ValueError:
        record = logging.getLogger("schemagraph.test").makeRecord(
            "schemagraph.test", logging.ERROR, __file__, 1, "failed %s", ("user",), sys.exc_info()
        )

    payload = json.loads(formatter.format(record))

    assert payload["message"] == "failed user"
    assert payload["level"] == "ERROR"
    assert "ValueError: broken builder" in payload["exc_info"]
