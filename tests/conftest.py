# tests/conftest.py
from __future__ import annotations

import logging
import os
import random
from pathlib import Path

import pytest

from listify.core import log as listify_log
from tests.utils import DEFAULT_NOW, make_document, make_results_page

_ENV_VARS = (
    "LISTIFY_TIMEFRAME_DAYS",
    "LISTIFY_LOG_LEVEL",
    "LISTIFY_LOG_FILE",
    "LISTIFY_ONLINE",
    "SCRAPE_PROXY_URL",
    "SCRAPE_PROXY_USER",
    "SCRAPE_PROXY_PASS",
    "REQUEST_TIMEOUT_MS",
)


# -------- Global deterministic seed --------
@pytest.fixture(autouse=True, scope="session")
def _seed_session():
    random.seed(1337)
    os.environ.setdefault("PYTHONHASHSEED", "0")
    yield


# -------- Isolation --------
@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep host environment settings out of config-sensitive tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_listify_logging():
    """Drop handlers added by setup_logging so later tests start clean."""
    yield
    logger = logging.getLogger(listify_log.ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    listify_log._configured = False


# -------- Domain fixtures --------
@pytest.fixture
def now():
    return DEFAULT_NOW


@pytest.fixture
def results_page():
    """Factory: results_page(make_item(...), make_card(...)) → HTML string."""
    return make_results_page


@pytest.fixture
def document_factory(tmp_path: Path):
    """
    Callable factory to write an HTML document in tmp_path.

    Usage:
        path = document_factory("<html>...</html>")
    """

    def _factory(html: str, filename: str = "results.html") -> Path:
        return make_document(tmp_path, html=html, filename=filename)

    return _factory


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")
