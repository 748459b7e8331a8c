"""Helpers shared by the detection workers."""

import logging
import subprocess
from collections.abc import Callable, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

# (command, args) -> trimmed stdout, or None
Runner = Callable[[str, list[str]], str | None]


def run_command(command: str, args: list[str]) -> str | None:
    """
    Run a command and return its trimmed stdout.

    Returns None when the command is missing, exits non-zero, or prints
    nothing.
    """
    try:
        result = subprocess.run(
            [command, *args],
            capture_output=True,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as e:
        logger.debug("Cannot run %s: %s", command, e)
        return None

    if result.returncode != 0:
        logger.debug("%s exited with %d", command, result.returncode)
        return None
    output = result.stdout.strip()
    return output or None


def expand_path(path: str, env: Mapping[str, str]) -> Path:
    """Expand a leading "~/" using HOME from `env`."""
    home = env.get("HOME")
    if path.startswith("~/") and home:
        return Path(home) / path[2:]
    return Path(path)


def search_file_for_key(path: Path, key: str) -> str | None:
    """Value of the first `key = value` line in a small config file."""
    try:
        content = path.read_text(errors="replace")
    except OSError:
        return None

    for line in content.splitlines():
        line = line.strip()
        if not line.startswith(key) or "=" not in line:
            continue
        name, _, value = line.partition("=")
        if name.strip() != key:
            continue
        value = value.strip().strip("\"'")
        if value:
            return value
    return None
