from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Callable, List, Optional, Sequence, TextIO

from config import settings
from core.logging.context import context as log_context
from core.logging.logger import get_logger, StructuredLogger
from domain.entities import DeleteFlags
from domain.exceptions import BadArgumentError, StoreError
from domain.interfaces import IKeyValueStore
from infrastructure import EtcdGatewayClient, EtcdKeyValueStore
from application.use_cases.delete_keys import DeleteKeysUseCase
from .display import DeleteReporter
from .exit_codes import ExitCode


class _UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that raises on usage errors instead of exiting."""

    def error(self, message: str):
        raise _UsageError(message)


def positive_seconds(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number of seconds: {value!r}")
    if not seconds > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="kvdel del",
        usage="kvdel del [options] <key> [range_end]",
        description="Removes the specified key or range of keys [key, range_end)",
    )
    parser.add_argument("args", nargs="*", metavar="key [range_end]")
    parser.add_argument("--prefix", action="store_true", help="delete keys with matching prefix")
    parser.add_argument("--prev-kv", action="store_true", help="return deleted key-value pairs")
    parser.add_argument(
        "--from-key",
        action="store_true",
        help="delete keys that are greater than or equal to the given key using byte compare",
    )
    parser.add_argument("--key-contains", default="", help="delete keys that contain the matching string")
    parser.add_argument(
        "--execute",
        action="store_true",
        help="actually delete keys found by --key-contains (default only prints them)",
    )
    parser.add_argument("--endpoint", default=None, help=f"gateway URL (default: {settings.ENDPOINT})")
    parser.add_argument(
        "--command-timeout",
        type=positive_seconds,
        default=None,
        help=f"timeout in seconds for the whole command (default: {settings.COMMAND_TIMEOUT})",
    )
    parser.add_argument(
        "-w",
        "--write-out",
        choices=settings.WRITE_OUT_FORMATS,
        default=None,
        help=f"output format (default: {settings.WRITE_OUT})",
    )
    return parser


def flags_from_namespace(ns: argparse.Namespace) -> DeleteFlags:
    return DeleteFlags(
        prefix=ns.prefix,
        prev_kv=ns.prev_kv,
        from_key=ns.from_key,
        key_contains=ns.key_contains,
        execute=ns.execute,
    )


class DelCommand:
    """The ``del`` command: parses arguments, runs the use case, maps errors to exit codes.

    ``store_factory`` replaces the gateway-backed store (used by tests).
    """

    def __init__(
        self,
        *,
        store_factory: Optional[Callable[[], IKeyValueStore]] = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.log: StructuredLogger = get_logger(__name__, service="del-cli")
        self._store_factory = store_factory
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr

    def _fail(self, code: ExitCode, message: str) -> int:
        print(f"Error: {message}", file=self._stderr, flush=True)
        return int(code)

    def run(self, argv: Sequence[str]) -> int:
        try:
            ns = build_parser().parse_intermixed_args(list(argv))
        except _UsageError as e:
            self.log.error(lambda: f"usage {e}")
            return self._fail(ExitCode.BAD_ARGS, str(e))

        flags = flags_from_namespace(ns)
        endpoint = ns.endpoint or settings.ENDPOINT
        timeout = ns.command_timeout if ns.command_timeout is not None else settings.COMMAND_TIMEOUT
        reporter = DeleteReporter(ns.write_out or settings.WRITE_OUT, stream=self._stdout)

        with log_context(command="del", endpoint=endpoint):
            try:
                deleted = asyncio.run(self._execute(ns.args, flags, reporter, endpoint, timeout))
            except BadArgumentError as e:
                self.log.error(lambda: f"bad-args {e}")
                return self._fail(ExitCode.BAD_ARGS, str(e))
            except StoreError as e:
                self.log.error(lambda: f"store-failed status={e.status_code} code={e.code} {e}")
                return self._fail(ExitCode.ERROR, str(e))

        self.log.success(lambda: f"del-ok deleted={deleted}")
        return int(ExitCode.SUCCESS)

    async def _execute(
        self,
        args: List[str],
        flags: DeleteFlags,
        reporter: DeleteReporter,
        endpoint: str,
        timeout: float,
    ) -> int:
        try:
            if self._store_factory is not None:
                use_case = DeleteKeysUseCase(self._store_factory(), reporter)
                return await asyncio.wait_for(use_case.execute(args, flags), timeout)
            async with EtcdGatewayClient(endpoint, timeout=timeout) as api:
                use_case = DeleteKeysUseCase(EtcdKeyValueStore(api), reporter)
                return await asyncio.wait_for(use_case.execute(args, flags), timeout)
        except asyncio.TimeoutError as e:
            raise StoreError("context deadline exceeded") from e
