# tests/conftest.py
"""Shared fixtures: a small viewer-data payload and the report built from it.

The payload exercises every fact shape the model distinguishes:

    f-usd / f-eur / f-usd-dup    same concept and period, USD vs EUR units
    f-usd-prior / f-usd-q4       same series, other periods (year / quarter)
    f-nil / f-invalid            nil value and invalid-value error tag
    f-shares / f-ratio           non-monetary and compound units
    f-cents / f-gbp / f-unspec   decimals 2 (cents / pence) and unspecified
    f-seg-a / f-seg-b / f-typed  explicit and typed dimensions
    f-text / f-enum / f-plain    escaped markup, enumeration, plain text
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator
from typing import Any

import pytest

from ixbrl_inspector.adapters.report.viewer_data_report import ViewerDataReport
from ixbrl_inspector.domain.entities.ix_node import IXNode

ENTITY = "e:0000320193"
FY2023 = "2023-01-01/2024-01-01"
FY2022 = "2022-01-01/2023-01-01"
FY2021 = "2021-01-01/2022-01-01"
Q4_2023 = "2023-10-01/2024-01-01"
YE2023 = "2024-01-01"

USD = "iso4217:USD"
EUR = "iso4217:EUR"


def _fact(concept: str, period: str, unit: str | None = None, **extra: Any) -> dict[str, Any]:
    aspects: dict[str, Any] = {"c": concept, "e": ENTITY, "p": period}
    if unit is not None:
        aspects["u"] = unit
    aspects.update(extra.pop("dims", {}))
    return {"a": aspects, **extra}


VIEWER_DATA: dict[str, Any] = {
    "prefixes": {
        "us-gaap": "http://fasb.org/us-gaap/2023",
        "iso4217": "http://www.xbrl.org/2003/iso4217",
        "xbrli": "http://www.xbrl.org/2003/instance",
        "srt": "http://fasb.org/srt/2023",
        "ex": "http://example.com/ex",
        "e": "http://www.sec.gov/CIK",
    },
    "concepts": {
        "us-gaap:Revenues": {
            "labels": {
                "std": {"en": "Revenues", "fr": "Produits"},
                "doc": {"en": "Amount of revenue recognized."},
            }
        },
        "us-gaap:SharesOutstanding": {"labels": {"std": {"en": "Shares Outstanding"}}},
        "us-gaap:Assets": {"labels": {"std": {"en": "Assets"}}},
        "us-gaap:AssetsCurrent": {"labels": {"std": {"en": "Current Assets"}}},
        "us-gaap:Cash": {"labels": {"std": {"de": "Barmittel"}}},
        "us-gaap:PolicyTextBlock": {"t": True, "labels": {"std": {"en": "Policy"}}},
        "srt:ProductOrServiceAxis": {
            "d": "e",
            "labels": {"std": {"en": "Product or Service [Axis]"}},
        },
        "ex:CustomerAxis": {"d": "t", "labels": {"std": {"en": "Customer [Axis]"}}},
        "ex:ProductAMember": {"labels": {"std": {"en": "Product A"}}},
        "ex:ProductBMember": {"labels": {"std": {"en": "Product B"}}},
        "ex:StatusItem": {"e": True},
        "ex:ActiveMember": {"labels": {"std": {"en": "Active"}}},
        "ex:PendingMember": {"labels": {"std": {"en": "Pending"}}},
    },
    "facts": {
        "f-usd": _fact("us-gaap:Revenues", FY2023, USD, v="1000000", d=-3, fn=["fn-1", "f-text"]),
        "f-eur": _fact("us-gaap:Revenues", FY2023, EUR, v="920000", d=-3, fn=["fn-1"]),
        "f-usd-dup": _fact("us-gaap:Revenues", FY2023, USD, v="1000000", d=-6),
        "f-usd-prior": _fact("us-gaap:Revenues", FY2022, USD, v="950000", d=-3),
        "f-usd-q4": _fact("us-gaap:Revenues", Q4_2023, USD, v="260000", d=-3),
        "f-nil": _fact("us-gaap:Revenues", FY2021, USD, v=None),
        "f-invalid": _fact("us-gaap:Assets", YE2023, USD, v=None, err="INVALID_IX_VALUE"),
        "f-shares": _fact("us-gaap:SharesOutstanding", YE2023, "xbrli:shares", v="1000000", d=0),
        "f-ratio": _fact("ex:EarningsPerShare", FY2023, "iso4217:USD/xbrli:shares", v="1.5", d=2),
        "f-cents": _fact("us-gaap:Cash", YE2023, USD, v="1234.567", d=2),
        "f-gbp": _fact("us-gaap:Cash", YE2023, "iso4217:GBP", v="10.5", d=2),
        "f-unspec": _fact("us-gaap:Cash", "2023-01-01", USD, v="100", d=None),
        "f-seg-a": _fact(
            "us-gaap:Revenues",
            FY2023,
            USD,
            v="600000",
            d=-3,
            dims={"srt:ProductOrServiceAxis": "ex:ProductAMember"},
        ),
        "f-seg-b": _fact(
            "us-gaap:Revenues",
            FY2023,
            USD,
            v="400000",
            d=-3,
            dims={"srt:ProductOrServiceAxis": "ex:ProductBMember"},
        ),
        "f-typed": _fact(
            "us-gaap:Revenues", FY2022, USD, v="5000", d=0, dims={"ex:CustomerAxis": "C-17"}
        ),
        "f-text": _fact(
            "us-gaap:PolicyTextBlock",
            FY2023,
            v="<p>First&#160;policy</p><p>Second   policy</p>",
        ),
        "f-enum": _fact("ex:StatusItem", YE2023, v="ex:ActiveMember ex:PendingMember"),
        "f-plain": _fact("ex:Note", YE2023, v="10-K"),
    },
    "rels": {
        "w-n": {
            "http://example.com/role/R1": {
                "us-gaap:Assets": [{"t": "us-gaap:AssetsCurrent"}],
            },
            "http://example.com/role/R2": {
                "us-gaap:Assets": [{"t": "us-gaap:Cash"}],
                "us-gaap:AssetsCurrent": [{"t": "us-gaap:Cash", "w": 1.0}],
            },
        }
    },
    "languages": {"en": "English", "fr": "French"},
}

IX_NODES: dict[str, IXNode] = {
    "f-text": IXNode(escaped=True),
    "f-shares": IXNode(is_hidden=True),
    "f-plain": IXNode(html_hidden=True),
}


@pytest.fixture()
def viewer_data() -> dict[str, Any]:
    """Return a private deep copy of the sample viewer data."""
    return copy.deepcopy(VIEWER_DATA)


@pytest.fixture()
def report(viewer_data: dict[str, Any]) -> ViewerDataReport:
    """Report over the sample viewer data with presentation flags."""
    return ViewerDataReport(viewer_data, ix_nodes=IX_NODES)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo root logger changes made by configure_root_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
