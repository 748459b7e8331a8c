"""EDID decoding and DRM connector discovery for display resolutions."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

EDID_HEADER = bytes((0x00, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0xFF, 0x00))
EDID_SIZE = 128

# First detailed timing descriptor starts at byte 54.
H_ACTIVE_LOW = 56
H_ACTIVE_HIGH = 58  # upper nibble
V_ACTIVE_LOW = 59
V_ACTIVE_HIGH = 61  # upper nibble

DRM_ROOT = Path("/sys/class/drm")


def decode_resolution(data: bytes) -> tuple[int, int] | None:
    """
    Decode the preferred resolution from an EDID block.

    Returns (horizontal, vertical), or None when the block is too short,
    lacks the fixed header, or encodes a zero dimension.
    """
    if len(data) < EDID_SIZE or data[:8] != EDID_HEADER:
        return None

    horizontal = ((data[H_ACTIVE_HIGH] & 0xF0) << 4) | data[H_ACTIVE_LOW]
    vertical = ((data[V_ACTIVE_HIGH] & 0xF0) << 4) | data[V_ACTIVE_LOW]

    if horizontal and vertical:
        return horizontal, vertical
    return None


def format_resolution(horizontal: int, vertical: int) -> str:
    """Format a resolution as "WxH"."""
    return f"{horizontal}x{vertical}"


def _active_connectors(drm_root: Path) -> list[Path]:
    """Connector directories (e.g. card0-HDMI-A-1) reporting "connected"."""
    connectors: list[Path] = []
    for path in sorted(drm_root.iterdir()):
        name = path.name
        if not name.startswith("card") or "-" not in name:
            continue
        status_path = path / "status"
        if not status_path.is_file() or not (path / "edid").is_file():
            continue
        try:
            status = status_path.read_bytes().strip()
        except OSError as e:
            logger.debug("Cannot read %s: %s", status_path, e)
            continue
        if status == b"connected":
            connectors.append(path)
    return connectors


def connector_resolutions(drm_root: Path = DRM_ROOT) -> list[str]:
    """
    Decode the resolution of every connected display under `drm_root`.

    Each connector is decoded independently; one unreadable or invalid
    EDID does not affect the others.
    """
    if not drm_root.is_dir():
        return []

    try:
        connectors = _active_connectors(drm_root)
    except OSError as e:
        logger.debug("Cannot list %s: %s", drm_root, e)
        return []

    resolutions: list[str] = []
    for path in connectors:
        try:
            data = (path / "edid").read_bytes()
        except OSError as e:
            logger.debug("Cannot read EDID for %s: %s", path.name, e)
            continue
        decoded = decode_resolution(data)
        if decoded is None:
            logger.debug("No usable EDID for %s", path.name)
            continue
        resolutions.append(format_resolution(*decoded))
    return resolutions


def resolution_label(drm_root: Path = DRM_ROOT) -> str:
    """All connected display resolutions joined by ", ", or "Unknown"."""
    resolutions = connector_resolutions(drm_root)
    return ", ".join(resolutions) if resolutions else "Unknown"
