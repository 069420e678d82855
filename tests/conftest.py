"""Root test configuration: keep tests independent of the developer's environment"""

import logging

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop STREAMMD_* variables and reset the streammd logger level after each test."""
    for name in ("OUTPUT_FORMAT", "OUTPUT_DIR", "CHUNK_SIZE", "COALESCE_RUNS", "LOG_LEVEL"):
        monkeypatch.delenv(f"STREAMMD_{name}", raising=False)
    yield
    logging.getLogger("streammd").setLevel(logging.NOTSET)
