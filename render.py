"""Hayagriva YAML bibliography rendering for extracted article records."""

from __future__ import annotations

from typing import Any

import yaml

from models import ArticleRecord


def record_to_entry(record: ArticleRecord) -> dict[str, Any]:
    """Bind a record into the fixed-shape Hayagriva ``article`` entry body.

    Key order is part of the output format; ``parent`` is omitted when the
    record has no journal.
    """
    entry: dict[str, Any] = {
        "type": "article",
        "title": record.title,
        "author": list(record.authors),
        "date": record.pub_date,
        "doi": record.doi,
        "serial-number": {"pmid": record.pmid},
    }
    if record.journal:
        entry["parent"] = {"type": "periodical", "title": record.journal}
    return entry


def render_record(record: ArticleRecord) -> str:
    """Serialize one record as a self-contained mapping keyed by its uid.

    Concatenating the output of several calls yields one Hayagriva file.
    """
    return yaml.safe_dump(
        {record.uid: record_to_entry(record)},
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=1000,
    ).rstrip("\n")
