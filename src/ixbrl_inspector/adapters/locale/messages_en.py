# src/ixbrl_inspector/adapters/locale/messages_en.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""English message tables, keyed by namespace."""

from __future__ import annotations

from typing import Any, Final

__all__ = ["MESSAGES_EN"]

MESSAGES_EN: Final[dict[str, dict[str, Any]]] = {
    "translation": {
        "common": {
            "notApplicable": "n/a",
            "accuracyInfinite": "Infinite precision",
            "unspecified": "Unspecified",
            "nil": "nil",
        },
        "factDetails": {
            "footnoteTitle": "Footnote {{id}}",
        },
    },
    "currencies": {
        "accuracy-12": "trillions",
        "accuracy-9": "billions",
        "accuracy-6": "millions",
        "accuracy-3": "thousands",
        "accuracy-2": "hundreds",
        "accuracy-1": "tens",
        "accuracy0": "ones",
        "accuracy1": "tenths",
        "accuracy2": "hundredths",
        "accuracy3": "thousandths",
        "centsUSD": "cents",
        "centsEUR": "cents",
        "centsGBP": "pence",
    },
}
