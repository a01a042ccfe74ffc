"""Tests for the package surface: re-exports, metadata and logging setup.

Run:
    pytest tests/test_package.py -v
"""

from __future__ import annotations

import logging

import empfindung
from empfindung import deltae


def test_version_matches_metadata() -> None:
    summary = empfindung.metadata_summary()
    assert summary["version"] == empfindung.__version__
    assert summary["title"] == "empfindung"
    assert set(summary) == {"title", "version", "license", "description", "copyright"}


def test_formulas_reexported() -> None:
    assert empfindung.ciede2000 is deltae.ciede2000
    assert empfindung.cie1976([0, 0, 0], [0, 0, 0]) == 0


def test_all_names_resolve() -> None:
    for name in empfindung.__all__:
        assert hasattr(empfindung, name), name


def test_library_logger_has_null_handler() -> None:
    handlers = logging.getLogger("empfindung").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
