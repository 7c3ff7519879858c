import logging

import pytest

import sparsetext
from sparsetext import SparseMatrix, _runtime


def test_default_kernel():
    assert sparsetext.get_matmul_kernel() == "indexed"


def test_set_kernel():
    sparsetext.set_matmul_kernel("SCAN")
    assert sparsetext.get_matmul_kernel() == "scan"


def test_set_unknown_kernel():
    with pytest.raises(ValueError):
        sparsetext.set_matmul_kernel("blocked")


def test_env_kernel_is_honored(monkeypatch):
    monkeypatch.setenv("SPARSETEXT_MATMUL_KERNEL", "scan")
    assert sparsetext.get_matmul_kernel() == "scan"


def test_bad_env_kernel_falls_back(monkeypatch):
    monkeypatch.setenv("SPARSETEXT_MATMUL_KERNEL", "gpu")
    assert sparsetext.get_matmul_kernel() == "indexed"


def test_multiply_uses_runtime_kernel(monkeypatch):
    calls = []
    original = SparseMatrix._multiply_scan

    def spy(self, other):
        calls.append("scan")
        return original(self, other)

    monkeypatch.setattr(SparseMatrix, "_multiply_scan", spy)
    sparsetext.set_matmul_kernel("scan")
    A = SparseMatrix(1, 1)
    A.set_element(0, 0, 3)
    assert (A @ A).get_element(0, 0) == 9
    assert calls == ["scan"]


def test_configure_logging_levels(monkeypatch):
    logger = _runtime.configure_logging("debug")
    assert logger is logging.getLogger("sparsetext")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    _runtime.configure_logging("info")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO

    monkeypatch.setenv("SPARSETEXT_LOG_LEVEL", "ERROR")
    assert _runtime.configure_logging().level == logging.ERROR

    monkeypatch.setenv("SPARSETEXT_LOG_LEVEL", "chatty")
    assert _runtime.configure_logging().level == logging.WARNING


def test_operations_log_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="sparsetext")
    A = SparseMatrix(1, 1)
    A.set_element(0, 0, 2)
    A @ A
    assert any("multiply" in r.getMessage() for r in caplog.records)
