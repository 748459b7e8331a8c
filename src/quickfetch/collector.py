"""Telemetry collection engine for quickfetch."""

import logging
import os
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

import psutil

from quickfetch import edid, scanner
from quickfetch.env import EnvCache
from quickfetch.models import MemoryStats, Snapshot
from quickfetch.shell import detect_shell_version, shell_name
from quickfetch.theme import UNKNOWN, detect_gtk_theme, detect_icon_theme
from quickfetch.utils import Runner, run_command

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "/bin/sh"

DISTRO_MARKERS = (
    ("arch-release", "Arch Linux"),
    ("debian_version", "Debian Linux"),
    ("redhat-release", "Red Hat Linux"),
)


@dataclass(slots=True, frozen=True)
class SystemPaths:
    """Roots of the pseudo-filesystems read during collection."""

    proc_root: Path = Path("/proc")
    sys_root: Path = Path("/sys")
    etc_root: Path = Path("/etc")

    @property
    def meminfo(self) -> Path:
        return self.proc_root / "meminfo"

    @property
    def cpuinfo(self) -> Path:
        return self.proc_root / "cpuinfo"

    @property
    def cpu_max_freq(self) -> Path:
        return self.sys_root / "devices/system/cpu/cpu0/cpufreq/cpuinfo_max_freq"

    @property
    def os_release(self) -> Path:
        return self.etc_root / "os-release"

    @property
    def drm_root(self) -> Path:
        return self.sys_root / "class/drm"


def format_os_name(sysname: str, machine: str, distribution: str) -> str:
    """Distribution plus architecture on Linux, kernel name plus architecture elsewhere."""
    if sysname == "Linux":
        return f"{distribution} {machine}"
    return f"{sysname} {machine}"


def window_manager(env: EnvCache) -> str:
    """Best guess at the compositor of a Wayland session."""
    if env.value("XDG_SESSION_TYPE") != "wayland":
        return UNKNOWN
    desktop = env.value("XDG_CURRENT_DESKTOP")
    if "GNOME" in desktop:
        return "Mutter"
    if "KDE" in desktop:
        return "KWin"
    return UNKNOWN


def _join(future: Future[str], fallback: str, task: str) -> str:
    """Wait for a worker; a failed worker yields `fallback`."""
    try:
        return future.result()
    except Exception:
        logger.debug("%s detection failed", task, exc_info=True)
        return fallback


class Collector:
    """
    Builds one Snapshot of the machine.

    Shell version, GTK theme and icon theme are detected on worker threads
    (they may spawn subprocesses) while the main thread reads /proc, /sys
    and /etc. The workers are joined before the Snapshot is assembled.
    """

    def __init__(
        self,
        env: EnvCache,
        paths: SystemPaths | None = None,
        runner: Runner = run_command,
    ) -> None:
        """
        Initialize the Collector.

        Args:
            env: Environment cache, built before any worker starts.
            paths: Pseudo-filesystem roots. Defaults to the live system.
            runner: Command runner used by the detection workers.
        """
        self._env = env
        self._paths = paths or SystemPaths()
        self._runner = runner

    @property
    def paths(self) -> SystemPaths:
        """Pseudo-filesystem roots in use."""
        return self._paths

    def collect(self) -> Snapshot:
        """Collect a snapshot of the current system."""
        shell_path = self._env.value("SHELL", DEFAULT_SHELL)

        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="quickfetch") as executor:
            # Workers start before the synchronous reads so the two overlap
            shell_future = executor.submit(detect_shell_version, shell_path, self._runner)
            theme_future = executor.submit(detect_gtk_theme, self._env, self._runner)
            icons_future = executor.submit(detect_icon_theme, self._env, self._runner)

            uts = os.uname()
            uptime = int(time.time() - psutil.boot_time())
            cpu_label = self.cpu_label()
            memory = self.memory()
            os_name = format_os_name(uts.sysname, uts.machine, self.distribution_name())
            resolution = edid.resolution_label(self._paths.drm_root)

            shell = _join(shell_future, shell_name(shell_path), "Shell version")
            theme = _join(theme_future, UNKNOWN, "Theme")
            icons = _join(icons_future, UNKNOWN, "Icon theme")

        return Snapshot(
            hostname=uts.nodename,
            os_name=os_name,
            kernel_release=uts.release,
            uptime_seconds=uptime,
            shell_label=shell,
            terminal_label=self._env.value("TERM", UNKNOWN),
            desktop_environment=self._env.value("XDG_CURRENT_DESKTOP", UNKNOWN),
            window_manager=window_manager(self._env),
            theme_name=theme,
            icon_theme_name=icons,
            resolution_label=resolution,
            cpu_label=cpu_label,
            memory_used_bytes=memory.used_bytes,
            memory_total_bytes=memory.total_bytes,
        )

    def cpu_label(self) -> str:
        """CPU model, logical CPU count and max frequency, e.g. "AMD Ryzen 7 (16) @ 4.200GHz"."""
        count = psutil.cpu_count() or 1

        try:
            buffer = scanner.read_head(self._paths.cpuinfo)
        except OSError as e:
            logger.debug("Cannot read cpuinfo: %s", e)
            buffer = b""
        model = scanner.strip_core_suffix(scanner.parse_cpu_model(buffer))

        if not model:
            return f"Unknown CPU ({count} cores)"
        return f"{model} ({count}){self._cpu_frequency_suffix()}"

    def _cpu_frequency_suffix(self) -> str:
        try:
            khz = int(self._paths.cpu_max_freq.read_text().strip())
        except (OSError, ValueError) as e:
            logger.debug("No max CPU frequency: %s", e)
            return ""
        if khz <= 0:
            return ""
        return f" @ {khz / 1_000_000:.3f}GHz"

    def memory(self) -> MemoryStats:
        """Memory usage from /proc/meminfo, falling back to psutil."""
        try:
            stats = scanner.parse_meminfo(scanner.read_head(self._paths.meminfo))
        except OSError as e:
            logger.debug("Cannot read meminfo: %s", e)
            stats = None

        if stats is not None:
            return stats

        logger.debug("Falling back to psutil for memory usage")
        mem = psutil.virtual_memory()
        return MemoryStats(used_bytes=max(mem.total - mem.free, 0), total_bytes=mem.total)

    def distribution_name(self) -> str:
        """Distribution name from os-release, release marker files, or "Linux"."""
        try:
            name = scanner.parse_os_release(scanner.read_head(self._paths.os_release))
        except OSError as e:
            logger.debug("Cannot read os-release: %s", e)
            name = None
        if name:
            return name

        for marker, label in DISTRO_MARKERS:
            if (self._paths.etc_root / marker).exists():
                return label
        return "Linux"
