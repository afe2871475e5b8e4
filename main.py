"""Main CLI entry-point."""
from __future__ import annotations

import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_USAGE = """usage: kvdel <command> [options]

commands:
  del    Removes the specified key or range of keys [key, range_end)

Run 'kvdel del --help' for the options of a command."""


def _dispatch(argv: list[str]) -> int:
    # Lazy import keeps `kvdel --help` free of the httpx import cost
    from presentation.cli import DelCommand, ExitCode

    if not argv or argv[0] in ("-h", "--help"):
        print(_USAGE)
        return int(ExitCode.SUCCESS) if argv else int(ExitCode.BAD_ARGS)

    command, rest = argv[0], argv[1:]
    if command == "del":
        return DelCommand().run(rest)
    print(f"Error: unknown command {command!r}\n\n{_USAGE}", file=sys.stderr)
    return int(ExitCode.BAD_ARGS)


def main(argv: list[str]) -> int:
    try:
        settings.validate()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    bootstrap_logging(
        service="kvdel",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="kvdel.jsonl",
    )
    try:
        return _dispatch(argv)
    finally:
        shutdown_logging()


def cli() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    cli()
