"""Custom exception hierarchy for wordnet-graph."""

from __future__ import annotations


class WordnetGraphError(Exception):
    """Base exception for all wordnet-graph errors."""


class _LocatedError(WordnetGraphError):
    """An error that may point at a file and line of the source data."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        line: int | None = None,
    ) -> None:
        self.message = message
        self.source = source
        self.line = line
        super().__init__(self._location() + message)

    def _location(self) -> str:
        if self.source is not None and self.line is not None:
            return f"{self.source}:{self.line}: "
        if self.line is not None:
            return f"line {self.line}: "
        if self.source is not None:
            return f"{self.source}: "
        return ""


class FormatError(_LocatedError):
    """Malformed record (bad number, unknown pointer symbol, missing gloss)."""


class IntegrityError(_LocatedError):
    """Graph inconsistency (undefined synset, word index out of range)."""


class DataSourceError(WordnetGraphError):
    """Source location missing or unreadable."""


class QueryError(WordnetGraphError):
    """Invalid query parameter (empty search text, unknown relation name)."""


class ConfigError(WordnetGraphError):
    """Invalid loader configuration."""
