from __future__ import annotations

from typing import Iterator

import pytest
from loguru import logger

from memstats import configure_logging, new_registry
from memstats.config import get_settings


@pytest.fixture()
def sink_ids() -> Iterator[list[int]]:
    added: list[int] = []
    yield added
    for sink_id in added:
        logger.remove(sink_id)
    logger.disable("memstats")
    get_settings.cache_clear()


def _exercise_registry() -> None:
    registry = new_registry()
    registry.counter("a", "b")
    registry.add_gauge("g", fn=lambda: 1.0).remove()
    registry.clear()


def test_registry_is_silent_by_default(sink_ids: list[int]) -> None:
    messages: list[str] = []
    sink_ids.append(logger.add(messages.append, level="DEBUG"))
    _exercise_registry()
    assert messages == []


def test_registry_logs_once_enabled(sink_ids: list[int]) -> None:
    messages: list[str] = []
    sink_ids.append(configure_logging("DEBUG", sink=messages.append))
    _exercise_registry()

    joined = "".join(messages)
    assert "Registered counter a/b" in joined
    assert "Removed gauge g" in joined
    assert "Cleared in-memory stats" in joined


def test_log_level_read_from_environment(monkeypatch, sink_ids: list[int]) -> None:
    monkeypatch.setenv("MEMSTATS_LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    messages: list[str] = []
    sink_ids.append(configure_logging(sink=messages.append))
    _exercise_registry()
    assert any("Registered counter a/b" in message for message in messages)


def test_default_level_drops_debug_records(monkeypatch, sink_ids: list[int]) -> None:
    monkeypatch.delenv("MEMSTATS_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    messages: list[str] = []
    sink_ids.append(configure_logging(sink=messages.append))
    _exercise_registry()
    assert messages == []


def test_configure_logging_keeps_other_sinks(sink_ids: list[int]) -> None:
    host: list[str] = []
    sink_ids.append(logger.add(host.append, level="INFO", format="{message}"))
    sink_ids.append(configure_logging("INFO", sink=lambda message: None))
    logger.info("host message")
    assert any("host message" in message for message in host)
