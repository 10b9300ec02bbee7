"""
Shared test configuration and fixtures
"""
import os
import sys
import random
import pytest
from typing import Generator

# Settings are read at import time, so ENV must be set before dummygen loads
os.environ.setdefault("ENV", "test")

# Make the project root importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient


# ===========================================
# FastAPI client
# ===========================================

@pytest.fixture(scope="module")
def app():
    """FastAPI application instance"""
    from dummygen.main import app as fastapi_app
    return fastapi_app


@pytest.fixture(scope="module")
def client(app) -> Generator:
    """Test client"""
    with TestClient(app) as test_client:
        yield test_client


# ===========================================
# Generation fixtures
# ===========================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible values"""
    return random.Random(1234)


@pytest.fixture
def test_settings():
    """Fresh settings object for the test environment"""
    from dummygen.core.settings import TestConfig
    return TestConfig()


# ===========================================
# Utilities
# ===========================================

@pytest.fixture
def capture_logs():
    """Collect log records emitted during a test"""
    import logging

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

        def get_messages(self):
            return [r.getMessage() for r in self.records]

    handler = LogCapture()
    handler.setLevel(logging.DEBUG)
    logger = logging.getLogger()
    previous_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous_level)
