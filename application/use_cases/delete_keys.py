"""Use case for the del command - resolve-and-delete or key-contains scan."""
from __future__ import annotations

from typing import Protocol, Sequence

from core.logging.context import context as log_context
from core.logging.logger import get_logger
from domain.entities import DeleteFlags, DeleteResult, KeyValue
from domain.interfaces import IKeyValueStore
from application.services.delete_keys import ContainsScanner, DeleteExecutor, resolve_delete_op


class DeleteReporter(Protocol):
    def deleted(self, result: DeleteResult) -> None: ...

    def match_found(self, kv: KeyValue) -> None: ...

    def deleting(self, kv: KeyValue) -> None: ...


class DeleteKeysUseCase:
    """
    Runs exactly one of two paths per invocation:

    key_contains set  →  ContainsScanner (args and the range flags are ignored,
                         ``execute`` still decides whether anything is deleted)
    otherwise         →  resolve_delete_op → DeleteExecutor

    Argument errors are raised before the store is touched.
    """

    def __init__(self, store: IKeyValueStore, reporter: DeleteReporter):
        self.store    = store
        self.reporter = reporter
        self.executor = DeleteExecutor(store)
        self._log     = get_logger(__name__, service="del")

    async def execute(self, args: Sequence[str], flags: DeleteFlags) -> int:
        """Run the command; returns the number of keys deleted."""
        if flags.contains_mode:
            with log_context(mode="key-contains"):
                return await self._delete_containing(flags.key_contains, flags.execute)

        request = resolve_delete_op(args, flags)
        with log_context(mode=request.kind.value):
            result = await self.executor.execute(request)
        self.reporter.deleted(result)
        return result.deleted

    async def _delete_containing(self, substring: str, execute: bool) -> int:
        scanner = ContainsScanner(
            self.store,
            self.executor,
            match_callback=self.reporter.match_found,
            delete_callback=self.reporter.deleting,
        )
        total = 0
        async for match in scanner.scan(substring, execute):
            if match.result is not None:
                self.reporter.deleted(match.result)
                total += match.result.deleted
        if not execute:
            self._log.info("dry-run: nothing deleted, pass --execute to delete")
        return total
