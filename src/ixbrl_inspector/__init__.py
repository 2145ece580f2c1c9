# src/ixbrl_inspector/__init__.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Inline XBRL fact inspection: fact model, alignment engine and viewer-data adapters."""

__version__ = "0.1.0"
