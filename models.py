"""Shared typed models and errors for the citation exporter."""

from __future__ import annotations

from dataclasses import dataclass, field


class CitationError(RuntimeError):
    """Base class for errors that abort a citation run."""


class FetchError(CitationError):
    """Network failure or unparseable esummary response for one PMID."""

    def __init__(self, pmid: str, url: str, message: str) -> None:
        super().__init__(message)
        self.pmid = pmid
        self.url = url


class ConfigError(CitationError):
    """An environment or command-line setting has an unusable value."""


class ExtractionError(CitationError):
    """A required esummary field is missing or malformed."""

    def __init__(self, message: str, pmid: str | None = None) -> None:
        super().__init__(message)
        self.pmid = pmid


@dataclass(frozen=True, slots=True)
class ArticleRecord:
    """Normalized citation record extracted from one esummary document."""

    uid: str
    title: str
    authors: list[str]
    pub_date: str  # YYYY-MM-DD
    doi: str
    pmid: str
    journal: str | None = None
    article_ids: dict[str, str] = field(default_factory=dict)
