from __future__ import annotations

import pytest

from bunpitsu.modules.analyzer.components.handle import AnalyzerHandle
from helpers import BrokenAnalyzer, FakeAnalyzer


@pytest.fixture()
def fake_analyzer() -> FakeAnalyzer:
    return FakeAnalyzer()


@pytest.fixture()
def handle(fake_analyzer: FakeAnalyzer) -> AnalyzerHandle:
    return AnalyzerHandle("fake", lambda: fake_analyzer)


@pytest.fixture()
def broken_handle() -> AnalyzerHandle:
    return AnalyzerHandle("broken", BrokenAnalyzer)
