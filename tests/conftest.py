"""Pytest fixtures and shared setup."""

from __future__ import annotations

import pytest

from mbtnd.buttons.tristate import FeatureState
from mbtnd.buttons.tristate import CallState
from mbtnd.buttons.classifier import EventClassifier

from tests.fakes import FakeSource


@pytest.fixture
def enabled() -> FakeSource:
    return FakeSource(True)


@pytest.fixture
def in_call() -> FakeSource:
    return FakeSource(False)


@pytest.fixture
def classifier(enabled: FakeSource, in_call: FakeSource) -> EventClassifier:
    return EventClassifier(FeatureState(enabled), CallState(in_call))
