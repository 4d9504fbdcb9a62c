"""tests/unit/test_config.py"""

from __future__ import annotations

import logging

import pytest

from popseries.common.config import load_config
from popseries.common.logging import setup_logging


def test_paths_resolve_against_project_root(cfg, project_root) -> None:
    assert cfg.project_root == project_root.resolve()
    assert cfg.paths["reports_dir"] == (project_root / "artifacts" / "reports").resolve()
    assert cfg.engine["default_rate"] == 0.99876


def test_ensure_directories_creates_once(cfg) -> None:
    created = cfg.ensure_directories()
    assert len(created) == 2
    assert cfg.paths["reports_dir"].is_dir()
    assert cfg.ensure_directories() == []


def test_missing_sections_default_to_empty(project_root) -> None:
    path = project_root / "configs" / "config.yaml"
    path.write_text("", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.paths == {}
    assert cfg.engine == {}
    assert cfg.seed == {}


def test_missing_config_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "configs" / "nope.yaml")


def test_setup_logging_writes_log_file(project_root, write_config) -> None:
    cfg = load_config(write_config(project_root, logging={"level": "debug", "file": "logs/test.log"}))

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(cfg)
        logging.getLogger("popseries.test").debug("hello log file")
        for h in root.handlers:
            h.flush()

        assert root.level == logging.DEBUG
        log_file = project_root / "logs" / "test.log"
        assert log_file.exists()
        assert "hello log file" in log_file.read_text(encoding="utf-8")
    finally:
        for h in root.handlers[:]:
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
