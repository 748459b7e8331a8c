"""Single-pass field extraction for small pseudo-files (/proc/meminfo, os-release, ...)."""

from collections.abc import Sequence
from pathlib import Path

from quickfetch.models import MemoryStats

READ_SIZE = 4096

MEMINFO_LABELS = (
    b"MemTotal:",
    b"MemFree:",
    b"Buffers:",
    b"Cached:",
    b"SReclaimable:",
    b"Shmem:",
)

CORE_MARKER = "-Core"

_BLANKS = b" \t"
_QUOTES = "\"'"


def read_head(path: Path | str, size: int = READ_SIZE) -> bytes:
    """Read at most `size` bytes from the start of a file. Raises OSError."""
    with open(path, "rb") as f:
        return f.read(size)


def _parse_number(buffer: bytes, pos: int) -> tuple[int, int] | None:
    """Parse a decimal integer at `pos`, skipping leading blanks.

    Returns (value, position after the last digit), or None without digits.
    """
    end = len(buffer)
    while pos < end and buffer[pos] in _BLANKS:
        pos += 1
    start = pos
    value = 0
    while pos < end and 48 <= buffer[pos] <= 57:
        value = value * 10 + buffer[pos] - 48
        pos += 1
    if pos == start:
        return None
    return value, pos


def _at_line_start(buffer: bytes, pos: int) -> bool:
    return pos == 0 or buffer[pos - 1] == 10


def scan_fields(buffer: bytes, labels: Sequence[bytes]) -> list[int]:
    """
    Extract one integer per label in a single pass over `buffer`.

    A label only matches at the start of a line, so b"Cached:" never matches
    the tail of b"SwapCached:". The scan stops as soon as every label has
    been found. Labels that never match keep the value 0.

    Args:
        buffer: Raw newline-delimited `Key: value` / `Key=value` text.
        labels: Byte labels including their separator, e.g. b"MemTotal:".

    Returns:
        Values in the same order as `labels`.
    """
    values = [0] * len(labels)
    found = [False] * len(labels)
    remaining = len(labels)
    end = len(buffer)
    pos = 0

    while pos < end and remaining:
        if _at_line_start(buffer, pos):
            for index, label in enumerate(labels):
                if found[index] or not buffer.startswith(label, pos):
                    continue
                parsed = _parse_number(buffer, pos + len(label))
                if parsed is not None:
                    values[index], pos = parsed
                    found[index] = True
                    remaining -= 1
                break

        newline = buffer.find(b"\n", pos)
        if newline < 0:
            break
        pos = newline + 1

    return values


def scan_value(buffer: bytes, label: bytes) -> bytes | None:
    """Return the rest of the first line starting with `label`, or None."""
    end = len(buffer)
    pos = 0
    while pos < end:
        newline = buffer.find(b"\n", pos)
        line_end = end if newline < 0 else newline
        if buffer.startswith(label, pos, line_end):
            return buffer[pos + len(label) : line_end]
        if newline < 0:
            break
        pos = newline + 1
    return None


def parse_meminfo(buffer: bytes) -> MemoryStats | None:
    """
    Compute used/total memory from a /proc/meminfo buffer.

    used = total - free - buffers - cached - sreclaimable + shmem, with the
    subtraction clamped at zero before shmem is added back. Returns None when
    MemTotal is missing so the caller can fall back to another source.
    """
    total, free, buffers, cached, reclaimable, shmem = scan_fields(buffer, MEMINFO_LABELS)
    if total == 0:
        return None
    used = max(total - free - buffers - cached - reclaimable, 0) + shmem
    return MemoryStats(used_bytes=used * 1024, total_bytes=total * 1024)


def parse_cpu_model(buffer: bytes) -> str:
    """Return the first `model name` value from a /proc/cpuinfo buffer."""
    raw = scan_value(buffer, b"model name")
    if raw is None:
        return ""
    _, sep, model = raw.partition(b":")
    if not sep:
        return ""
    return model.decode("utf-8", errors="replace").strip()


def strip_core_suffix(model: str) -> str:
    """
    Drop a trailing core-count marker from a CPU model string.

    "AMD Ryzen 7 7800X3D 8-Core Processor" -> "AMD Ryzen 7 7800X3D"
    "Vendor X64-Core Thing"                -> "Vendor X64"
    """
    model = model.strip()
    marker = model.find(CORE_MARKER)
    if marker < 0:
        return model

    prefix = model[:marker]
    last_space = prefix.rfind(" ")
    if last_space < 0:
        return prefix

    count = prefix[last_space + 1 :]
    if count and count.isascii() and count.isdigit():
        return model[:last_space]
    return prefix


def parse_os_release(buffer: bytes) -> str | None:
    """
    Return the distribution name from an os-release buffer.

    Prefers a non-empty NAME=, falls back to a capitalised ID= with " Linux"
    appended.
    """
    name = scan_value(buffer, b"NAME=")
    if name is not None:
        name = name.decode("utf-8", errors="replace").strip().strip(_QUOTES)
        if name:
            return name

    distro_id = scan_value(buffer, b"ID=")
    if distro_id is not None:
        distro_id = distro_id.decode("utf-8", errors="replace").strip().strip(_QUOTES)
        if not distro_id:
            return "Linux"
        return distro_id[0].upper() + distro_id[1:] + " Linux"

    return None
