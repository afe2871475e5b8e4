"""Immutable flag set for the delete command."""
from dataclasses import dataclass


@dataclass(frozen=True)
class DeleteFlags:
    """Options shaping a delete request.

    Built once by the command line and passed explicitly to the resolver
    and scanner. ``key_contains`` switches the command into substring
    scan mode, in which only ``execute`` still has an effect.
    """

    prefix: bool = False
    prev_kv: bool = False
    from_key: bool = False
    key_contains: str = ""
    execute: bool = False

    @property
    def contains_mode(self) -> bool:
        return len(self.key_contains) > 0
