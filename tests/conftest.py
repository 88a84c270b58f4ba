"""Pytest configuration: test environment and fake catalog connections.

An optional .tbu_env file at the repository root is loaded FIRST with
override=True so a developer can pin TBU_* settings for the test run.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_TBU_ENV_FILE = Path(__file__).parent.parent / ".tbu_env"
if _TBU_ENV_FILE.exists():
    load_dotenv(_TBU_ENV_FILE, override=True)

from typing import Any, Callable, Dict, List, Mapping
from unittest.mock import MagicMock

import pytest

from table_backend_utils.config import get_settings

CatalogRows = List[Mapping[str, Any]]


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop the cached Settings so monkeypatched TBU_* variables take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_catalog_connection(responses: Dict[str, CatalogRows]) -> MagicMock:
    """Build a mock connection answering fetch_all by SQL fragment.

    The first fragment contained in the SQL decides the rows; unmatched
    queries return no rows. Every statement is recorded on the mock.
    """
    connection = MagicMock()

    def fetch_all(sql: str) -> List[Dict[str, Any]]:
        for fragment, rows in responses.items():
            if fragment in sql:
                return [dict(row) for row in rows]
        return []

    connection.fetch_all.side_effect = fetch_all
    return connection


@pytest.fixture
def catalog_connection() -> Callable[[Dict[str, CatalogRows]], MagicMock]:
    """Factory fixture for mock connections with canned catalog rows."""
    return make_catalog_connection
