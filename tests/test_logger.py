# tests/test_logger.py

import json
import logging
from shield_core.logger import get_logger


def test_logger_env_level(monkeypatch):
    monkeypatch.setenv("SHIELD_LOG_LEVEL", "debug")
    log = get_logger("shield.test.env")
    assert log.level == logging.DEBUG


def test_logger_json_file(tmp_path):
    path = tmp_path / "logs" / "shield.log"
    log = get_logger("shield.test.file", level=logging.INFO, to_file=str(path))
    log.info("hello")
    for h in log.handlers:
        h.flush()
    line = path.read_text().strip().splitlines()[-1]
    rec = json.loads(line)
    assert rec["msg"] == "hello"
    assert rec["level"] == "INFO"
    assert rec["name"] == "shield.test.file"


def test_logger_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("SHIELD_LOG_LEVEL", "verbose")
    log = get_logger("shield.test.badlevel")
    assert log.level == logging.INFO
