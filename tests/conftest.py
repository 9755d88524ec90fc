"""Shared test fixtures for termskin."""

from __future__ import annotations

import pytest

from termskin.skin import Skin


class RecordingListener:
    """Listener that records every notification it receives."""

    def __init__(self) -> None:
        self.calls: list[Skin] = []
        self.seen_fg_colors: list[str] = []

    def skin_changed(self, skin: Skin) -> None:
        self.calls.append(skin)
        self.seen_fg_colors.append(str(skin.body.fg_color))


class FailingListener:
    """Listener that always raises."""

    def __init__(self) -> None:
        self.calls = 0

    def skin_changed(self, skin: Skin) -> None:
        self.calls += 1
        raise RuntimeError("listener exploded")


@pytest.fixture
def skin() -> Skin:
    """A skin holding the built-in defaults."""
    return Skin()


@pytest.fixture
def recorder() -> RecordingListener:
    """A fresh recording listener."""
    return RecordingListener()


@pytest.fixture
def sample_skin_yaml() -> str:
    """A partial skin document touching several groups."""
    return """k9s:
  body:
    fgColor: "#e0e0e0"
    bgColor: "-"
  frame:
    border:
      focusColor: red
    crumbs:
      activeColor: gold
  views:
    xray:
      showIcons: false
    charts:
      defaultDialColors:
        - "#00ff00"
        - "#ff0000"
        - "#00ff00"
      resourceColors:
        cpu:
          - lime
          - orange
    logs:
      fgColor: wheat
"""


@pytest.fixture
def make_recorder() -> type[RecordingListener]:
    """Factory for additional recording listeners."""
    return RecordingListener


@pytest.fixture
def failing_listener() -> FailingListener:
    """A listener that raises on every notification."""
    return FailingListener()
