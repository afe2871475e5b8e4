"""Process exit codes for kvdel commands."""
from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    BAD_ARGS = 128
