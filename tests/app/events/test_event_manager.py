"""Testes do EventManager: ordem, duplicatas, falhas e mutação de payload."""

from __future__ import annotations

import logging

import pytest

from app.events import (
    CONFIG_BEFORE,
    ConfigAfterPayload,
    ConfigBeforePayload,
    Event,
    EventManager,
    FireResult,
)
from config.store import ConfigStore
from utils.errors import EventListenerError


def _before_payload(*files: str) -> ConfigBeforePayload:
    return ConfigBeforePayload(files=list(files), config=ConfigStore())


class TestRegistration:
    def test_listeners_run_in_registration_order_including_duplicates(self) -> None:
        manager = EventManager()
        calls: list[str] = []

        def first(payload: dict) -> None:
            calls.append("first")

        def second(payload: dict) -> None:
            calls.append("second")

        manager.on("custom", first)
        manager.on("custom", second)
        manager.on("custom", first)

        result = manager.fire("custom", {})

        assert calls == ["first", "second", "first"]
        assert result == FireResult(event_name="custom", success=True, invoked=3)

    def test_string_name_and_descriptor_share_listeners(self) -> None:
        manager = EventManager()
        seen: list[list[str]] = []
        manager.on("config.before", lambda payload: seen.append(payload.files))

        manager.fire(CONFIG_BEFORE, _before_payload("a.yaml"))

        assert seen == [["a.yaml"]]
        assert manager.has_listeners(CONFIG_BEFORE)

    def test_off_removes_listener_or_all(self) -> None:
        manager = EventManager()

        def listener(payload: dict) -> None:
            return None

        manager.on("x", listener)
        manager.on("x", listener)
        manager.on("x", print)

        assert manager.off("x", listener) == 2
        assert manager.listeners("x") == [print]
        assert manager.off("x") == 1
        assert not manager.has_listeners("x")

    def test_rejects_non_callable_and_empty_name(self) -> None:
        manager = EventManager()
        with pytest.raises(TypeError):
            manager.on("x", "not callable")  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            manager.on("", print)

    def test_late_registration_logs_warning(self, caplog) -> None:
        manager = EventManager()
        manager.seal()
        with caplog.at_level(logging.WARNING, logger="app.events.manager"):
            manager.on("x", print)
        assert manager.has_listeners("x")
        assert any(r.message == "event_listener_registered_late" for r in caplog.records)


class TestFiring:
    def test_unknown_event_is_noop(self) -> None:
        result = EventManager().must_fire("nobody.listens", {"k": 1})
        assert result.success
        assert result.invoked == 0

    def test_fire_stops_at_first_failure_and_reports_it(self) -> None:
        manager = EventManager()
        calls: list[str] = []

        def ok(payload: dict) -> None:
            calls.append("ok")

        def broken(payload: dict) -> None:
            raise RuntimeError("listener exploded")

        def never(payload: dict) -> None:
            calls.append("never")

        for listener in (ok, broken, never):
            manager.on("evt", listener)

        result = manager.fire("evt", {})

        assert calls == ["ok"]
        assert result.success is False
        assert result.invoked == 2
        assert isinstance(result.error, RuntimeError)
        assert result.listener_name is not None and result.listener_name.endswith("broken")

    def test_must_fire_raises_with_cause(self) -> None:
        manager = EventManager()
        original = ValueError("bad config")

        def broken(payload: dict) -> None:
            raise original

        manager.on("evt", broken)

        with pytest.raises(EventListenerError) as exc_info:
            manager.must_fire("evt", {})

        assert exc_info.value.event_name == "evt"
        assert exc_info.value.__cause__ is original

    def test_payload_type_is_checked_for_descriptors(self) -> None:
        manager = EventManager()
        with pytest.raises(TypeError, match="ConfigBeforePayload"):
            manager.fire(CONFIG_BEFORE, ConfigAfterPayload(config=ConfigStore()))

    def test_payload_mutation_is_visible_to_later_listeners_and_firer(self) -> None:
        manager = EventManager()
        observed: list[list[str]] = []
        manager.on(CONFIG_BEFORE, lambda payload: payload.files.remove("drop.yaml"))
        manager.on(CONFIG_BEFORE, lambda payload: observed.append(list(payload.files)))

        payload = _before_payload("keep.yaml", "drop.yaml")
        manager.fire(CONFIG_BEFORE, payload)

        assert observed == [["keep.yaml"]]
        assert payload.files == ["keep.yaml"]

    def test_listener_registered_during_fire_runs_next_time(self) -> None:
        manager = EventManager()
        calls: list[str] = []

        def late(payload: dict) -> None:
            calls.append("late")

        def registrar(payload: dict) -> None:
            calls.append("registrar")
            manager.on("evt", late)

        manager.on("evt", registrar)
        manager.fire("evt", {})
        assert calls == ["registrar"]

        manager.off("evt", registrar)
        manager.fire("evt", {})
        assert calls == ["registrar", "late"]


def test_event_descriptor_requires_name() -> None:
    with pytest.raises(ValueError):
        Event("  ", dict)
    assert str(Event("custom.evt", dict)) == "custom.evt"
