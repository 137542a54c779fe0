"""Shared fixtures: fresh settings per test and captured loguru records."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List

import pytest
from loguru import logger

from tryresult.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("TRYRESULT_LOG_FAULTS", "TRYRESULT_FAULT_LOG_LEVEL", "TRYRESULT_LOG_TRACEBACKS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_records() -> Iterator[List[Dict[str, Any]]]:
    records: List[Dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)
