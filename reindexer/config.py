# reindexer/config.py
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel

from .errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Local dev only; real deployments export the variables directly
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env.development"


class Settings(BaseModel):
    api_url: str
    api_key: str
    timeout: Optional[float] = None


def _getenv(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """Read API settings from the environment, after loading the dotenv file.

    Variables already present in the process environment win over the file.
    """
    path = Path(env_file) if env_file is not None else DEFAULT_ENV_FILE
    if path.is_file():
        load_dotenv(path, override=False)

    api_url = _getenv("API_URL")
    if not api_url:
        raise ConfigError(
            "API_URL environment variable is required",
            hints=[
                "Set it explicitly to prevent accidental production changes",
                "Example: API_URL=http://localhost:8787",
            ],
        )

    api_key = _getenv("API_KEY") or _getenv("API_KEY_WRITER")
    if not api_key:
        raise ConfigError(
            "API_KEY or API_KEY_WRITER environment variable is required",
            hints=[f"Set it in {path.name} or pass via environment"],
        )

    timeout = None
    raw_timeout = _getenv("REINDEX_TIMEOUT")
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(
                f"REINDEX_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            )

    return Settings(api_url=api_url, api_key=api_key, timeout=timeout)
