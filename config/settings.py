"""Application settings and configuration."""
import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)

# Malformed values seen while reading the environment; reported by Settings.validate().
_ENV_ERRORS: List[str] = []


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, str(default))
    try:
        return float(raw)
    except ValueError:
        _ENV_ERRORS.append(f"{name} must be a number of seconds, got {raw!r}")
        return default


class Settings:
    """
    Values come from the process environment, after ``config/.env`` has
    been loaded. Command-line options override the store and output
    settings per invocation.
    """

    # ── Store ─────────────────────────────────────────────────────────────
    # etcd v3 JSON gateway, served on the client port by default.
    ENDPOINT:        str   = os.getenv('KVDEL_ENDPOINT', 'http://127.0.0.1:2379')
    COMMAND_TIMEOUT: float = _float_env('KVDEL_COMMAND_TIMEOUT', 5.0)
    DIAL_TIMEOUT:    float = _float_env('KVDEL_DIAL_TIMEOUT', 2.0)

    # ── Output ────────────────────────────────────────────────────────────
    WRITE_OUT: str = os.getenv('KVDEL_WRITE_OUT', 'simple')
    WRITE_OUT_FORMATS: tuple = ('simple', 'json')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / 'data'
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(DATA_DIR / 'logs')))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if _ENV_ERRORS:
            raise ValueError("; ".join(_ENV_ERRORS))
        if not cls.ENDPOINT.startswith(('http://', 'https://')):
            raise ValueError(f"KVDEL_ENDPOINT must be an http(s) URL, got {cls.ENDPOINT!r}")
        if cls.COMMAND_TIMEOUT <= 0 or cls.DIAL_TIMEOUT <= 0:
            raise ValueError("KVDEL_COMMAND_TIMEOUT and KVDEL_DIAL_TIMEOUT must be positive")
        if cls.WRITE_OUT not in cls.WRITE_OUT_FORMATS:
            raise ValueError(f"KVDEL_WRITE_OUT must be one of {', '.join(cls.WRITE_OUT_FORMATS)}")


settings = Settings()
