from __future__ import annotations

import logging
from pathlib import Path

from rackcoach.logging_setup import REQUEST_ID_VAR, _RequestIdFilter, default_log_path


def test_default_log_path(monkeypatch, tmp_path: Path) -> None:
    assert default_log_path().endswith("rackcoach.log")
    monkeypatch.setenv("RACKCOACH_LOG_PATH", str(tmp_path / "x.log"))
    assert default_log_path() == str(tmp_path / "x.log")


def test_request_id_filter_stamps_records() -> None:
    record = logging.LogRecord("rackcoach.test", logging.INFO, __file__, 1, "msg", None, None)
    token = REQUEST_ID_VAR.set("abc123")
    try:
        assert _RequestIdFilter().filter(record)
    finally:
        REQUEST_ID_VAR.reset(token)
    assert record.request_id == "abc123"
