"""Shell version detection."""

from quickfetch.utils import Runner, run_command


def shell_name(shell_path: str) -> str:
    """Executable name of a shell path ("/usr/bin/zsh" -> "zsh")."""
    return shell_path.rsplit("/", 1)[-1]


def _first_line(output: str | None) -> str:
    if not output:
        return ""
    return output.splitlines()[0]


def parse_zsh_version(line: str) -> str | None:
    """Version from a line like "zsh 5.9 (x86_64-pc-linux-gnu)"."""
    pos = line.find("zsh ")
    if pos < 0:
        return None
    rest = line[pos + 4 :]
    end = rest.find(" ")
    if end < 0:
        return None
    return rest[:end]


def parse_bash_version(line: str) -> str | None:
    """Version from a line like "GNU bash, version 5.2.15(1)-release"."""
    pos = line.find("version ")
    if pos < 0:
        return None
    rest = line[pos + 8 :]
    for end, char in enumerate(rest):
        if char in "-(":
            return rest[:end].strip() or None
    words = rest.split()
    return words[0] if words else None


def parse_fish_version(line: str) -> str | None:
    """Version from a line like "fish, version 3.6.1"."""
    pos = line.find("version ")
    if pos < 0:
        return None
    return line[pos + 8 :].strip() or None


VERSION_PARSERS = {
    "zsh": parse_zsh_version,
    "bash": parse_bash_version,
    "fish": parse_fish_version,
}


def detect_shell_version(shell_path: str, runner: Runner = run_command) -> str:
    """
    Return "<shell> <version>" for known shells.

    Unknown shells, and known shells whose version cannot be read, yield the
    bare executable name.
    """
    name = shell_name(shell_path)
    parser = VERSION_PARSERS.get(name)
    if parser is None:
        return name

    version = parser(_first_line(runner(name, ["--version"])))
    return f"{name} {version}" if version else name
