"""CLI entry point for the wttr.in querier."""

import argparse
import logging
import sys

from wttr.config.loader import resolve_config
from wttr.errors import WttrError
from wttr.ingest.wttr_client import WttrClient
from wttr.pipeline.fetch_pipeline import FetchPipeline
from wttr.reporting.formatters import Field, Presentation, format_field
from wttr.storage.cache_store import FileCacheStore, default_cache_path, resolve_home

VERSION = "1.0.0"

# command name -> (field printed, help text)
COMMANDS: dict[str, tuple[Field, str]] = {
    "temperature": (Field.TEMPERATURE, "Current temperature in °C"),
    "feel-temperature": (Field.FEELS_LIKE, "Current felt temperature in °C"),
    "description": (
        Field.DESCRIPTION,
        "Description of current weather (text or emoji, requires Nerd Font)",
    ),
    "wind-speed": (Field.WIND_SPEED, "Wind speed in km/h"),
    "wind-direction": (
        Field.WIND_DIRECTION,
        "Uses a sixteen direction system (text or symbol, requires Nerd Font)",
    ),
    "min-temperature": (Field.MIN_TEMPERATURE, "Min temperature in °C for today"),
    "max-temperature": (Field.MAX_TEMPERATURE, "Max temperature in °C for today"),
    "area": (Field.AREA, "Place queried"),
    "full": (Field.FULL, "Full weather data"),
}

CODED_COMMANDS = ("description", "wind-direction")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wttr", description="wttr.in querier")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--no-cache", action="store_true", help="Bypass the local cache entirely"
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress to stderr"
    )

    sub = parser.add_subparsers(dest="command")
    for name, (_, help_text) in COMMANDS.items():
        cmd_p = sub.add_parser(name, help=help_text)
        if name in CODED_COMMANDS:
            cmd_p.add_argument(
                "description_type",
                nargs="?",
                default=Presentation.TEXT.value,
                choices=[p.value for p in Presentation],
                help="Show as text or as emoji / symbol",
            )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        return _cmd_show(args)
    except WttrError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def _cmd_show(args) -> int:
    _configure_logging(logging.INFO if args.verbose else logging.WARNING)
    home = resolve_home()
    config = resolve_config(args.config, home)
    if not args.verbose:
        logging.getLogger().setLevel(config.logging.level.value)

    client = WttrClient(
        url=config.provider.url,
        user_agent=config.provider.user_agent,
        timeout=config.provider.timeout,
    )
    store = FileCacheStore(default_cache_path(home))
    pipeline = FetchPipeline(client, store, no_cache=args.no_cache)
    record = pipeline.run()

    field, _ = COMMANDS[args.command]
    presentation = Presentation(getattr(args, "description_type", Presentation.TEXT))
    print(format_field(record, field, presentation))
    return 0


if __name__ == "__main__":
    sys.exit(main())
