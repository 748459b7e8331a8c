"""Logo registry: sorted immutable table with exact and prefix lookup."""

import re
from bisect import bisect_left
from collections.abc import Iterable, Iterator
from operator import attrgetter

from quickfetch.catalog import CATALOG
from quickfetch.models import ArtEntry, LogoDefinition

RESET = "\x1b[0m"
DEFAULT_LOGO = "Linux"

PLACEHOLDER = re.compile(r"\$\{c(\d)\}")

_entry_name = attrgetter("name")


def sgr_color(color: int | str) -> str:
    """ANSI foreground sequence for a terminal color number ("fg" means 7)."""
    if color == "fg":
        color = 7
    color = int(color)
    if color <= 7:
        return f"\x1b[{30 + color}m"
    return f"\x1b[38;5;{color}m"


def colorize(art: str, colors: tuple[int | str, ...]) -> str:
    """Replace ${cN} placeholders with escape sequences and end with a reset.

    Placeholders without a matching color are dropped.
    """
    codes = [sgr_color(color) for color in colors]

    def replace(match: re.Match[str]) -> str:
        index = int(match.group(1)) - 1
        return codes[index] if 0 <= index < len(codes) else ""

    colored = PLACEHOLDER.sub(replace, art)
    if not colored.endswith(RESET):
        colored += RESET
    return colored


def max_visible_width(art: str) -> int:
    """Widest line of a placeholder-marked art block, ignoring the markup."""
    stripped = PLACEHOLDER.sub("", art)
    return max((len(line) for line in stripped.split("\n")), default=0)


def build_entry(definition: LogoDefinition) -> ArtEntry:
    """Turn a catalog definition into a display-ready entry."""
    return ArtEntry(
        name=definition.name,
        is_wildcard=definition.is_wildcard,
        ascii_art=colorize(definition.art, definition.colors),
        max_visible_line_length=max_visible_width(definition.art),
    )


class ArtRegistry:
    """
    Immutable table of logos.

    Entries are sorted with every exact-name entry first (ascending,
    case-sensitive) and the wildcard entries after them, so lookups can
    binary search the exact part and scan only the wildcards.
    """

    def __init__(
        self,
        definitions: Iterable[LogoDefinition],
        default_name: str = DEFAULT_LOGO,
    ) -> None:
        entries = sorted(
            (build_entry(definition) for definition in definitions),
            key=lambda entry: (entry.is_wildcard, entry.name),
        )
        self._entries: tuple[ArtEntry, ...] = tuple(entries)
        self._exact_count = sum(1 for entry in entries if not entry.is_wildcard)
        self._default_name = default_name

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ArtEntry]:
        return iter(self._entries)

    def names(self) -> list[str]:
        """Entry names in table order."""
        return [entry.name for entry in self._entries]

    def lookup(self, identifier: str) -> ArtEntry | None:
        """
        Find the logo for `identifier`.

        An exact match on a non-wildcard entry always wins; otherwise the
        first wildcard entry whose name prefixes `identifier` is returned.
        """
        index = bisect_left(self._entries, identifier, hi=self._exact_count, key=_entry_name)
        if index < self._exact_count and self._entries[index].name == identifier:
            return self._entries[index]

        for entry in self._entries[self._exact_count :]:
            if identifier.startswith(entry.name):
                return entry
        return None

    @property
    def default(self) -> ArtEntry:
        """Fallback logo for identifiers with no match."""
        entry = self.lookup(self._default_name)
        if entry is None:
            return ArtEntry(name="", is_wildcard=False, ascii_art="", max_visible_line_length=0)
        return entry


REGISTRY = ArtRegistry(CATALOG)
