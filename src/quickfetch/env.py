"""Process-wide, read-only cache of the environment variables quickfetch reads."""

import os
import threading
from collections.abc import Iterator, Mapping

ENV_WHITELIST = (
    "XDG_CURRENT_DESKTOP",
    "XDG_SESSION_TYPE",
    "SHELL",
    "TERM",
    "WAYLAND_DISPLAY",
    "DISPLAY",
    "DESKTOP_SESSION",
    "GTK_THEME",
    "ICON_THEME",
    "USER",
    "HOME",
)


class EnvCache(Mapping[str, str]):
    """Immutable snapshot of the whitelisted variables that were set."""

    def __init__(self, source: Mapping[str, str]) -> None:
        self._values = {name: source[name] for name in ENV_WHITELIST if name in source}

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def value(self, name: str, default: str = "") -> str:
        """Variable value, or `default` when unset or empty."""
        return self._values.get(name) or default


_cache: EnvCache | None = None
_cache_lock = threading.Lock()


def get_env_cache() -> EnvCache:
    """Return the process-wide cache, building it from os.environ on first use."""
    global _cache
    if _cache is None:
        with _cache_lock:
            if _cache is None:
                _cache = EnvCache(os.environ)
    return _cache
