"""Application services root exports."""
from .delete_keys import ContainsScanner, DeleteExecutor, resolve_delete_op

__all__ = [
    "ContainsScanner",
    "DeleteExecutor",
    "resolve_delete_op",
]
