"""GTK theme and icon theme detection.

Both detectors try, in order: an environment variable, the desktop
environment's own settings tool, then well-known config files.
"""

from collections.abc import Mapping
from pathlib import Path

from quickfetch.utils import Runner, expand_path, run_command, search_file_for_key

UNKNOWN = "Unknown"

THEME_CONFIG_PATHS = (
    "~/.gtkrc-2.0",
    "~/.config/gtk-3.0/settings.ini",
    "~/.config/gtk-4.0/settings.ini",
    "/etc/gtk-3.0/settings.ini",
    "/etc/gtk-4.0/settings.ini",
)

ICON_CONFIG_PATHS = (
    "~/.config/gtk-3.0/settings.ini",
    "~/.config/gtk-4.0/settings.ini",
    "/etc/gtk-3.0/settings.ini",
    "/etc/gtk-4.0/settings.ini",
    "~/.icons/default/index.theme",
    "/usr/share/icons/default/index.theme",
)

GNOME_LIKE = ("gnome", "budgie", "cinnamon", "unity")


def query_gsettings(runner: Runner, schema: str, key: str) -> str | None:
    value = runner("gsettings", ["get", schema, key])
    if value is None:
        return None
    return value.strip("'") or None


def query_kde_config(runner: Runner, group: str, key: str) -> str | None:
    args = ["--group", group, "--key", key]
    return runner("kreadconfig5", args) or runner("kreadconfig", args)


def query_xsettings(runner: Runner, prop: str) -> str | None:
    return runner("xfconf-query", ["-c", "xsettings", "-p", prop])


def _desktop_query(
    env: Mapping[str, str],
    runner: Runner,
    gnome_key: str,
    kde_group: str,
    kde_key: str,
    xfce_prop: str,
) -> str | None:
    desktop = env.get("XDG_CURRENT_DESKTOP", "").lower()

    if any(name in desktop for name in GNOME_LIKE):
        value = query_gsettings(runner, "org.gnome.desktop.interface", gnome_key)
        if value:
            return value
    if "kde" in desktop:
        value = query_kde_config(runner, kde_group, kde_key)
        if value:
            return value
    if "xfce" in desktop:
        value = query_xsettings(runner, xfce_prop)
        if value:
            return value
    return None


def _search_index_theme(path: Path) -> str | None:
    """Inherits= value from an icon theme index file."""
    try:
        content = path.read_text(errors="replace")
    except OSError:
        return None
    for line in content.splitlines():
        if line.startswith("Inherits="):
            value = line[len("Inherits=") :].strip()
            if value:
                return value
    return None


def detect_gtk_theme(
    env: Mapping[str, str],
    runner: Runner = run_command,
    config_paths: tuple[str, ...] = THEME_CONFIG_PATHS,
) -> str:
    """Name of the active GTK theme, or "Unknown"."""
    theme = env.get("GTK_THEME")
    if theme:
        return theme

    theme = _desktop_query(
        env, runner, "gtk-theme", "KDE", "widgetStyle", "/Net/ThemeName"
    )
    if theme:
        return theme

    for raw_path in config_paths:
        # .gtkrc-2.0 uses the same `gtk-theme-name="..."` form as settings.ini
        theme = search_file_for_key(expand_path(raw_path, env), "gtk-theme-name")
        if theme:
            return theme

    return UNKNOWN


def detect_icon_theme(
    env: Mapping[str, str],
    runner: Runner = run_command,
    config_paths: tuple[str, ...] = ICON_CONFIG_PATHS,
) -> str:
    """Name of the active icon theme, or "Unknown"."""
    icons = env.get("ICON_THEME")
    if icons:
        return icons

    icons = _desktop_query(
        env, runner, "icon-theme", "Icons", "Theme", "/Net/IconThemeName"
    )
    if icons:
        return icons

    for raw_path in config_paths:
        path = expand_path(raw_path, env)
        if path.name == "index.theme":
            icons = _search_index_theme(path)
        else:
            icons = search_file_for_key(path, "gtk-icon-theme-name")
        if icons:
            return icons

    return UNKNOWN
