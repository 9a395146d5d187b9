"""Lazy tri-state cache tests."""

from __future__ import annotations

from mbtnd.buttons.tristate import FeatureStatus
from mbtnd.buttons.tristate import CallStatus
from mbtnd.buttons.tristate import FeatureState
from mbtnd.buttons.tristate import CallState

from tests.fakes import FakeSource


def test_feature_is_resolved_once() -> None:
    source = FakeSource(True)
    feature = FeatureState(source)
    assert feature.status is FeatureStatus.UNKNOWN

    assert feature.is_enabled() is True
    assert feature.is_enabled() is True
    assert feature.status is FeatureStatus.ENABLED
    assert source.calls == 1


def test_feature_reload_reads_source_again() -> None:
    source = FakeSource(True)
    feature = FeatureState(source)
    feature.is_enabled()

    source.value = False
    assert feature.is_enabled() is True
    assert feature.reload() is False
    assert feature.status is FeatureStatus.DISABLED
    assert source.calls == 2


def test_feature_notifies_on_every_resolution() -> None:
    seen: list[bool] = []
    source = FakeSource(False)
    feature = FeatureState(source, seen.append)
    feature.is_enabled()
    feature.is_enabled()
    source.value = True
    feature.reload()
    assert seen == [False, True]


def test_call_state_is_not_repolled() -> None:
    source = FakeSource(True)
    call = CallState(source)
    assert call.is_in_call() is True
    source.value = False
    assert call.is_in_call() is True
    assert source.calls == 1


def test_call_state_pushed_value_wins() -> None:
    source = FakeSource(True)
    call = CallState(source)
    call.set(False)
    assert call.status is CallStatus.IDLE
    assert call.is_in_call() is False
    assert source.calls == 0

    call.invalidate()
    assert call.is_resolved() is False
    assert call.is_in_call() is True
