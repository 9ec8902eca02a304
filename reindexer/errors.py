# reindexer/errors.py
from typing import List, Optional


class ReindexError(Exception):
    """Base class for errors that abort a reindex run."""


class ConfigError(ReindexError):
    def __init__(self, message: str, hints: Optional[List[str]] = None):
        super().__init__(message)
        self.hints = hints or []


class SeedDataError(ReindexError):
    pass
