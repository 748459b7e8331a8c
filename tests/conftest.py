"""Shared fixtures for quickfetch tests."""

import pytest

from quickfetch.edid import EDID_HEADER, EDID_SIZE
from quickfetch.models import Snapshot


def build_edid(horizontal: int, vertical: int) -> bytes:
    """Minimal EDID block whose first timing descriptor encodes the resolution."""
    data = bytearray(EDID_SIZE)
    data[:8] = EDID_HEADER
    data[56] = horizontal & 0xFF
    data[58] = (horizontal >> 4) & 0xF0
    data[59] = vertical & 0xFF
    data[61] = (vertical >> 4) & 0xF0
    return bytes(data)


@pytest.fixture
def make_edid():
    """Factory fixture building EDID blocks."""
    return build_edid


class StubRunner:
    """Command runner returning canned output and recording calls."""

    def __init__(self, outputs: dict[str, str | None] | None = None) -> None:
        self.outputs = outputs or {}
        self.calls: list[tuple[str, list[str]]] = []

    def __call__(self, command: str, args: list[str]) -> str | None:
        self.calls.append((command, list(args)))
        return self.outputs.get(command)


@pytest.fixture
def runner():
    """A runner for which every command is missing."""
    return StubRunner()


@pytest.fixture
def make_snapshot():
    """Factory fixture building a Snapshot with overridable fields."""

    def factory(**overrides) -> Snapshot:
        fields = dict(
            hostname="box",
            os_name="Arch Linux x86_64",
            kernel_release="6.9.1-arch1-1",
            uptime_seconds=3600,
            shell_label="zsh 5.9",
            terminal_label="xterm-256color",
            desktop_environment="GNOME",
            window_manager="Mutter",
            theme_name="Adwaita",
            icon_theme_name="Papirus",
            resolution_label="2560x1440",
            cpu_label="AMD Ryzen 7 7800X3D (16) @ 5.050GHz",
            memory_used_bytes=4 * 1024**3,
            memory_total_bytes=32 * 1024**3,
        )
        fields.update(overrides)
        return Snapshot(**fields)

    return factory


@pytest.fixture
def make_runner():
    """Factory fixture building a StubRunner with canned outputs."""
    return StubRunner
