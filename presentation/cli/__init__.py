"""Presentation CLI exports."""
from .del_command import DelCommand, build_parser
from .display import DeleteReporter
from .exit_codes import ExitCode

__all__ = [
    "DelCommand",
    "DeleteReporter",
    "ExitCode",
    "build_parser",
]
