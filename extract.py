"""Field extraction and normalization for PubMed esummary documents."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from models import ArticleRecord, ExtractionError

# esummary history dates look like "2020/05/14 00:00".
HISTORY_DATE_FORMAT = "%Y/%m/%d %H:%M"
PUB_DATE_FORMAT = "%Y-%m-%d"
PUBMED_STATUS = "pubmed"


def extract_article(doc: dict[str, Any]) -> ArticleRecord:
    """Build an ArticleRecord from one ``result[<pmid>]`` sub-document.

    Every field except the journal name is mandatory; the first missing or
    malformed one raises ExtractionError.
    """
    authors = extract_authors(doc)
    ids = extract_ids(doc)
    pub_date = extract_pub_date(doc)
    title = extract_str(doc, "title")
    uid = extract_str(doc, "uid")

    doi = _require_doi(ids)

    return ArticleRecord(
        uid=uid,
        title=title,
        authors=authors,
        pub_date=pub_date,
        doi=doi,
        pmid=ids.get("pubmed") or uid,
        journal=extract_journal(doc),
        article_ids=ids,
    )


def extract_authors(doc: dict[str, Any]) -> list[str]:
    """Return author display names in source order."""
    authors = doc.get("authors")
    if not isinstance(authors, list):
        raise ExtractionError("no authors found")

    names: list[str] = []
    for index, author in enumerate(authors):
        name = author.get("name") if isinstance(author, dict) else None
        if not isinstance(name, str):
            raise ExtractionError(f"author #{index + 1} has no name")
        names.append(name)
    return names


def extract_ids(doc: dict[str, Any]) -> dict[str, str]:
    """Map id type (``doi``, ``pubmed``, ``pmc`` ...) to its value."""
    article_ids = doc.get("articleids")
    if not isinstance(article_ids, list):
        raise ExtractionError("no articleids found")

    ids: dict[str, str] = {}
    for entry in article_ids:
        idtype = entry.get("idtype") if isinstance(entry, dict) else None
        value = entry.get("value") if isinstance(entry, dict) else None
        if not isinstance(idtype, str) or not isinstance(value, str):
            raise ExtractionError(f"malformed articleids entry: {entry!r}")
        ids[idtype] = value
    return ids


def extract_doi(doc: dict[str, Any]) -> str:
    return _require_doi(extract_ids(doc))


def _require_doi(ids: dict[str, str]) -> str:
    doi = ids.get("doi")
    if doi is None:
        raise ExtractionError("no DOI found")
    return doi


def extract_pub_date(doc: dict[str, Any]) -> str:
    """Return the date the record entered PubMed as YYYY-MM-DD."""
    history = doc.get("history")
    if not isinstance(history, list):
        raise ExtractionError("no history found")

    entry = next(
        (h for h in history if isinstance(h, dict) and h.get("pubstatus") == PUBMED_STATUS),
        None,
    )
    if entry is None:
        raise ExtractionError("no pubmed history found")

    raw = entry.get("date")
    if not isinstance(raw, str):
        raise ExtractionError("pubmed history entry has no date")

    try:
        parsed = datetime.strptime(raw, HISTORY_DATE_FORMAT)
    except ValueError as exc:
        raise ExtractionError(f"malformed pubmed history date {raw!r}: {exc}") from exc
    return parsed.strftime(PUB_DATE_FORMAT)


def extract_str(doc: dict[str, Any], key: str) -> str:
    value = doc.get(key)
    if not isinstance(value, str):
        raise ExtractionError(f"no {key} found")
    return value


def extract_journal(doc: dict[str, Any]) -> str | None:
    value = doc.get("fulljournalname")
    return value if isinstance(value, str) and value else None
