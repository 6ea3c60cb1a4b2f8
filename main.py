"""CLI entrypoint: print YAML bibliography entries for PubMed identifiers."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from extract import extract_article
from models import ConfigError, ExtractionError, FetchError
from pubmed_client import article_document, build_summary_url, fetch_summary, request_timeout
from render import render_record

LOGGER = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Export PubMed citations as YAML bibliography entries")
    parser.add_argument("pmids", nargs="*", metavar="PMID", help="PubMed identifiers to export")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print the esummary URLs that would be requested, without network calls",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=os.getenv("LOG_LEVEL", "WARNING").upper(),
        help=f"Logging level for stderr diagnostics, one of {', '.join(LOG_LEVELS)} (default: LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def run(pmids: list[str], dry_run: bool = False) -> None:
    """Fetch, extract and print one record per PMID, in input order.

    Stops at the first failure; records already printed stay printed.
    """
    for pmid in pmids:
        if dry_run:
            print(f"[dry-run] Would fetch PMID {pmid}: {build_summary_url(pmid)}")
            continue

        payload = fetch_summary(pmid)
        try:
            record = extract_article(article_document(payload, pmid))
        except ExtractionError as exc:
            exc.pmid = pmid
            raise
        LOGGER.info("Extracted PMID %s: %s authors, doi=%s", pmid, len(record.authors), record.doi)
        print(render_record(record))


def main(argv: list[str] | None = None) -> int:
    """Initialize config and export every PMID; return the process exit code."""
    load_dotenv()
    args = parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        print(f"Invalid configuration: unknown log level {args.log_level!r}, expected one of {', '.join(LOG_LEVELS)}")
        return 1
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    if not args.pmids:
        print(f"Usage: {os.path.basename(sys.argv[0])} <PMID>...")
        return 1

    try:
        request_timeout()
    except ConfigError as exc:
        print(f"Invalid configuration: {exc}")
        return 1

    try:
        run(args.pmids, dry_run=args.dry_run)
    except FetchError as exc:
        print(f"Failed to fetch data for PMID {exc.pmid} ({exc.url}): {exc}")
        return 1
    except ExtractionError as exc:
        print(f"Failed to generate YAML for PMID {exc.pmid}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
