from .op_resolver import resolve_delete_op
from .delete_executor import DeleteExecutor
from .contains_scanner import ContainsScanner

__all__ = ["resolve_delete_op", "DeleteExecutor", "ContainsScanner"]
