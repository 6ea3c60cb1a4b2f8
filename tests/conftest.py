from __future__ import annotations

import copy
from typing import Any

import pytest

SAMPLE_DOC: dict[str, Any] = {
    "uid": "32405645",
    "title": "A study of things.",
    "fulljournalname": "Journal of Things",
    "authors": [
        {"name": "Smith J", "authtype": "Author"},
        {"name": "Doe A", "authtype": "Author"},
    ],
    "articleids": [
        {"idtype": "pubmed", "idtypen": 1, "value": "32405645"},
        {"idtype": "doi", "idtypen": 3, "value": "10.1000/things.2020.1"},
        {"idtype": "pmc", "idtypen": 8, "value": "PMC7219999"},
    ],
    "history": [
        {"pubstatus": "received", "date": "2020/03/01 00:00"},
        {"pubstatus": "pubmed", "date": "2020/05/14 00:00"},
        {"pubstatus": "medline", "date": "2020/05/15 06:00"},
    ],
}


def make_payload(*docs: dict[str, Any]) -> dict[str, Any]:
    """Wrap documents the way esummary does: result keyed by uid plus a uids list."""
    result: dict[str, Any] = {"uids": [d["uid"] for d in docs]}
    for doc in docs:
        result[doc["uid"]] = doc
    return {"header": {"type": "esummary", "version": "0.3"}, "result": result}


@pytest.fixture
def sample_doc() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_DOC)


@pytest.fixture
def payload_for():
    return make_payload
