"""Two-column terminal rendering: colored logo on the left, system info on the right."""

from collections.abc import Iterator

from quickfetch.models import ArtEntry, Snapshot

ESC = "\x1b"
SGR_END = "m"
RESET = "\x1b[0m"
RESETS = (RESET, "\x1b[m")
BOLD = "\x1b[1m"
GAP = 2


def format_uptime(seconds: int) -> str:
    """Format uptime as "N mins", "Hh Mm" or "Dd Hh Mm"."""
    mins = seconds // 60
    if mins < 60:
        return f"{mins} mins"
    hours, mins = divmod(mins, 60)
    if hours < 24:
        return f"{hours}h {mins}m"
    days, hours = divmod(hours, 24)
    return f"{days}d {hours}h {mins}m"


def format_memory(size: int) -> str:
    """Format bytes as whole MiB."""
    return f"{size >> 20} MiB"


def visible_length(line: str) -> int:
    """Number of characters in `line` outside escape sequences."""
    length = 0
    in_escape = False
    for char in line:
        if in_escape:
            if char == SGR_END:
                in_escape = False
        elif char == ESC:
            in_escape = True
        else:
            length += 1
    return length


def _sequences(line: str) -> Iterator[str]:
    start = line.find(ESC)
    while start >= 0:
        end = line.find(SGR_END, start)
        if end < 0:
            return
        yield line[start : end + 1]
        start = line.find(ESC, end + 1)


def active_color(line: str, current: str = "") -> str:
    """
    Color in effect after `line` is printed.

    Starts from `current` (the color carried over from earlier lines); each
    sequence replaces it and a reset clears it.
    """
    for sequence in _sequences(line):
        current = "" if sequence in RESETS else sequence
    return current


def primary_color(art: str) -> str:
    """First color used by a logo, bold when it has none."""
    for sequence in _sequences(art):
        if sequence not in RESETS:
            return sequence
    return BOLD


def info_fields(snapshot: Snapshot) -> list[tuple[str, str]]:
    """Labeled values in display order."""
    return [
        ("OS", snapshot.os_name),
        ("Kernel", snapshot.kernel_release),
        ("Uptime", format_uptime(snapshot.uptime_seconds)),
        ("Shell", snapshot.shell_label),
        ("Resolution", snapshot.resolution_label),
        ("DE", snapshot.desktop_environment),
        ("WM", snapshot.window_manager),
        ("Theme", snapshot.theme_name),
        ("Icons", snapshot.icon_theme_name),
        ("Terminal", snapshot.terminal_label),
        ("CPU", snapshot.cpu_label),
        (
            "Memory",
            f"{format_memory(snapshot.memory_used_bytes)} / "
            f"{format_memory(snapshot.memory_total_bytes)}",
        ),
    ]


def build_info_lines(snapshot: Snapshot, user: str) -> list[str]:
    """Plain info column: "user@host", a divider, then "Label: value" lines."""
    header = f"{user}@{snapshot.hostname}"
    lines = [header, "-" * len(header)]
    lines.extend(f"{label}: {value}" for label, value in info_fields(snapshot))
    return lines


def _style_info(row: int, text: str, accent: str) -> str:
    if row == 0:
        user, sep, host = text.partition("@")
        if sep:
            return f"{accent}{user}{RESET}@{accent}{host}{RESET}"
        return text
    if row == 1:
        return text
    label, sep, value = text.partition(": ")
    if not sep:
        return text
    return f"{accent}{label}{RESET}: {value}"


def render(snapshot: Snapshot, art: ArtEntry, user: str, gap: int = GAP) -> list[str]:
    """
    Lay out the logo and the info column side by side.

    Every info line starts at column `art.max_visible_line_length + gap`.
    Info text is printed after a reset so the logo palette never leaks into
    it; when more logo lines follow, the logo's active color is re-emitted
    at the end of the row so the next logo line keeps its color.

    Returns:
        One string per terminal row, without trailing newlines.
    """
    art_lines = art.ascii_art.split("\n") if art.ascii_art else []
    info_lines = build_info_lines(snapshot, user)
    accent = primary_color(art.ascii_art)
    column = art.max_visible_line_length + gap

    rows: list[str] = []
    color = ""
    for index in range(max(len(art_lines), len(info_lines))):
        art_line = art_lines[index] if index < len(art_lines) else ""
        color = active_color(art_line, color)

        if index >= len(info_lines):
            rows.append(art_line)
            continue

        padding = " " * max(column - visible_length(art_line), 0)
        row = f"{art_line}{padding}{RESET}{_style_info(index, info_lines[index], accent)}"
        if index + 1 < len(art_lines) and color:
            row += color
        rows.append(row)

    return rows
