"""Data models for quickfetch."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Snapshot:
    """Immutable snapshot of the machine, built once per run."""

    hostname: str
    os_name: str
    kernel_release: str
    uptime_seconds: int
    shell_label: str
    terminal_label: str
    desktop_environment: str
    window_manager: str
    theme_name: str
    icon_theme_name: str
    resolution_label: str
    cpu_label: str
    memory_used_bytes: int
    memory_total_bytes: int


@dataclass(slots=True, frozen=True)
class ArtEntry:
    """A colorized logo ready for the compositor."""

    name: str
    is_wildcard: bool  # name is matched as a prefix
    ascii_art: str  # ANSI SGR sequences embedded, ends with a reset
    max_visible_line_length: int


@dataclass(slots=True, frozen=True)
class MemoryStats:
    """Used and total memory, in bytes."""

    used_bytes: int
    total_bytes: int


@dataclass(slots=True, frozen=True)
class LogoDefinition:
    """Raw catalog entry: art with ${c1}..${c6} color placeholders."""

    name: str
    is_wildcard: bool
    colors: tuple[int | str, ...]  # terminal color numbers, or "fg"
    art: str
