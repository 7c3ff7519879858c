import logging
import os
from pathlib import Path

import pytest

from sparsetext import _runtime

DATA = Path(__file__).parent / "data"

_ENV = ("SPARSETEXT_MATMUL_KERNEL", "SPARSETEXT_LOG_LEVEL")


@pytest.fixture(autouse=True)
def reset_runtime(monkeypatch):
    monkeypatch.setattr(_runtime, "_current_kernel", "indexed")
    saved = {name: os.environ.pop(name, None) for name in _ENV}
    logger = logging.getLogger("sparsetext")
    level = logger.level
    yield
    for name, value in saved.items():
        if value is None:
            os.environ.pop(name, None)
        else:
            os.environ[name] = value
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def data_dir():
    return DATA
