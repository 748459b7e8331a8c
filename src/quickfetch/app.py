"""quickfetch - command line entry point."""

import argparse
import logging
import sys
import time

from quickfetch.collector import Collector
from quickfetch.compositor import render
from quickfetch.env import get_env_cache
from quickfetch.logos import REGISTRY, ArtRegistry
from quickfetch.models import ArtEntry

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="quickfetch",
        description="Show system information next to a distribution logo.",
    )
    parser.add_argument("--logo", help="Logo to show instead of the detected distribution's")
    parser.add_argument("--list-logos", action="store_true", help="List available logos and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log detection details to stderr")
    return parser.parse_args(argv)


def logo_identifier(os_name: str) -> str:
    """First word of the OS name ("Arch Linux x86_64" -> "Arch")."""
    words = os_name.split()
    return words[0] if words else ""


def select_logo(identifier: str, registry: ArtRegistry = REGISTRY) -> ArtEntry:
    """Logo for `identifier`, or the registry default."""
    entry = registry.lookup(identifier)
    if entry is None:
        logger.debug("No logo for %r, using default", identifier)
        return registry.default
    return entry


def main(argv: list[str] | None = None) -> None:
    """Entry point for quickfetch."""
    start = time.perf_counter()
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.list_logos:
        for name in REGISTRY.names():
            print(name)
        return

    # Built before the collector starts its workers; read-only afterwards
    env = get_env_cache()
    snapshot = Collector(env).collect()

    art = select_logo(args.logo or logo_identifier(snapshot.os_name))
    for row in render(snapshot, art, env.value("USER", "user")):
        print(row)

    elapsed_ms = (time.perf_counter() - start) * 1000
    print(f"Time elapsed: {elapsed_ms:.3f}ms", file=sys.stderr)


if __name__ == "__main__":
    main()
