"""NCBI E-utilities esummary client."""

from __future__ import annotations

import logging
import os
from typing import Any

import requests

from models import ConfigError, ExtractionError, FetchError

# https://www.ncbi.nlm.nih.gov/books/NBK25497/
PUBMED_BASE_URL = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils/"
SUMMARY_PATH_TEMPLATE = "esummary.fcgi?db=pubmed&id={pmid}&retmode=json"

LOGGER = logging.getLogger(__name__)


def build_summary_url(pmid: str, base_url: str | None = None) -> str:
    """Return the esummary URL for one PMID."""
    base = base_url or os.getenv("PUBMED_BASE_URL", PUBMED_BASE_URL)
    if not base.endswith("/"):
        base += "/"
    return base + SUMMARY_PATH_TEMPLATE.format(pmid=pmid)


def request_timeout() -> float | None:
    """Read PUBMED_TIMEOUT_SECONDS; unset means the requests default (no timeout)."""
    raw = os.getenv("PUBMED_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(f"PUBMED_TIMEOUT_SECONDS must be a number of seconds, got {raw!r}") from exc
    if timeout <= 0:
        raise ConfigError(f"PUBMED_TIMEOUT_SECONDS must be positive, got {raw!r}")
    return timeout


def fetch_summary(pmid: str, base_url: str | None = None, timeout: float | None = None) -> dict[str, Any]:
    """Fetch the esummary document for one PMID.

    Performs exactly one blocking GET. Network errors, HTTP error statuses and
    non-JSON bodies are all raised as FetchError naming the PMID and URL.
    """
    url = build_summary_url(pmid, base_url=base_url)
    if timeout is None:
        timeout = request_timeout()

    LOGGER.info("Fetching esummary for PMID %s: %s", pmid, url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as exc:
        LOGGER.warning("esummary fetch failed for PMID %s: %s", pmid, exc)
        raise FetchError(pmid, url, str(exc)) from exc

    if not isinstance(payload, dict):
        LOGGER.warning("esummary payload for PMID %s is not a JSON object", pmid)
        raise FetchError(pmid, url, "Unexpected esummary payload shape: expected a JSON object")
    return payload


def article_document(payload: dict[str, Any], pmid: str) -> dict[str, Any]:
    """Return the per-identifier sub-document ``payload["result"][pmid]``."""
    result = payload.get("result")
    if not isinstance(result, dict):
        raise ExtractionError("no result found")

    doc = result.get(pmid)
    if not isinstance(doc, dict):
        raise ExtractionError(f"no summary found for PMID {pmid}")
    # Unknown PMIDs come back as {"uid": ..., "error": "cannot get document summary"}.
    if isinstance(doc.get("error"), str):
        raise ExtractionError(doc["error"])
    return doc
