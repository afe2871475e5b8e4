from __future__ import annotations

from typing import Optional, Sequence

from core.logging.logger import get_logger, traceable
from domain.entities import DeleteFlags, DeleteRequest
from domain.enums import RangeKind
from domain.exceptions import BadArgumentError
from domain.keys import ZERO_BYTE, prefix_range_end

_log = get_logger(__name__, service="resolver")


@traceable
def resolve_delete_op(args: Sequence[str], flags: DeleteFlags) -> DeleteRequest:
    """Turn positional arguments and flags into one delete request.

    ``args`` is ``[key]`` or ``[key, range_end]``. Raises BadArgumentError
    for a wrong argument count or conflicting flags. No I/O.
    """
    if len(args) == 0 or len(args) > 2:
        raise BadArgumentError("del command needs one argument as key and an optional argument as range_end")

    if flags.prefix and flags.from_key:
        raise BadArgumentError("`--prefix` and `--from-key` cannot be set at the same time, choose one")

    key = args[0].encode("utf-8")
    range_end: Optional[bytes] = None
    kind = RangeKind.SINGLE
    if len(args) > 1:
        if flags.prefix or flags.from_key:
            raise BadArgumentError("too many arguments, only accept one argument when `--prefix` or `--from-key` is set")
        range_end = args[1].encode("utf-8")
        kind = RangeKind.RANGE

    if flags.prefix:
        if len(key) == 0:
            # empty prefix: delete everything
            key = ZERO_BYTE
            range_end = ZERO_BYTE
            kind = RangeKind.FROM_KEY
        else:
            range_end = prefix_range_end(key)
            kind = RangeKind.PREFIX

    if flags.from_key:
        if len(key) == 0:
            key = ZERO_BYTE
        range_end = ZERO_BYTE
        kind = RangeKind.FROM_KEY

    request = DeleteRequest(key=key, range_end=range_end, include_prev_kv=flags.prev_kv, kind=kind)
    _log.debug(lambda: f"resolved {request.describe()}")
    return request
