"""Runtime settings from the environment and an optional project .env file.

Priority: real environment variable > .env entry > default. Only the keys
in ``KNOWN_KEYS`` are read from .env; malformed lines are skipped.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

ENV_PATH = Path(__file__).resolve().parent.parent / '.env'
KNOWN_KEYS = {'TODO_LOG_FILE', 'TODO_PRIMARY', 'TODO_PENDING', 'TODO_COMPLETED'}
DEFAULT_LOG_FILE = 'app_log.txt'

def read_env_file(path: Path = ENV_PATH) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if not path.exists():
        return overrides
    try:
        text = path.read_text()
    except OSError:
        return overrides
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        if k in KNOWN_KEYS:
            overrides[k] = v.strip().strip('"\'')
    return overrides

def lookup(key: str, default: str, environ: Optional[Mapping[str, str]] = None,
           env_file: Optional[Mapping[str, str]] = None) -> str:
    environ = os.environ if environ is None else environ
    env_file = read_env_file() if env_file is None else env_file
    return str(environ.get(key) or env_file.get(key, default))

@dataclass
class Settings:
    log_file: Optional[str] = DEFAULT_LOG_FILE

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None,
             env_file: Optional[Mapping[str, str]] = None) -> "Settings":
        return cls(log_file=lookup('TODO_LOG_FILE', DEFAULT_LOG_FILE, environ, env_file))
