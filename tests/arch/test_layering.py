# tests/arch/test_layering.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Clean Architecture layering guardrail using grimp import graph.

This test builds an import graph for the `ixbrl_inspector` package and
enforces a strict layering policy:

    domain         → may depend only on domain
    application    → may depend on {domain, application}
    adapters       → may depend on {domain, application, adapters, infrastructure}
    infrastructure → may depend on {domain, application, adapters, infrastructure}

`config` and `tasks` (the CLI) sit outside the matrix and may import any layer.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

import grimp
from grimp import ImportGraph

ROOT_PACKAGE: Final[str] = "ixbrl_inspector"

LAYERS: Final[frozenset[str]] = frozenset({"domain", "application", "adapters", "infrastructure"})

ALLOWED_DEPENDENCIES: Mapping[str, set[str]] = {
    # The fact model and alignment engine depend on nothing outward.
    "domain": {"domain"},
    "application": {"domain", "application"},
    "adapters": {"domain", "application", "adapters", "infrastructure"},
    "infrastructure": {"domain", "application", "adapters", "infrastructure"},
}


def _layer_for_module(module_name: str) -> str | None:
    """Return the layer of a module, or None for modules outside the matrix.

    Classification uses the first component after the root package, e.g.
    ``ixbrl_inspector.domain.entities.fact`` → ``"domain"``.
    """
    if not module_name.startswith(f"{ROOT_PACKAGE}."):
        return None
    top = module_name[len(ROOT_PACKAGE) + 1 :].split(".", 1)[0]
    return top if top in LAYERS else None


def _find_layering_violations(graph: ImportGraph) -> list[str]:
    violations: set[str] = set()

    for importer in sorted(graph.modules):
        importer_layer = _layer_for_module(importer)
        if importer_layer is None:
            continue

        allowed_targets = ALLOWED_DEPENDENCIES[importer_layer]
        for imported in graph.find_modules_directly_imported_by(importer):
            imported_layer = _layer_for_module(imported)
            if imported_layer is None:
                continue
            if imported_layer not in allowed_targets:
                violations.add(
                    f"{importer} ({importer_layer}) -> {imported} ({imported_layer}) "
                    "is not allowed by ALLOWED_DEPENDENCIES"
                )

    return sorted(violations)


def test_layering_respects_clean_architecture() -> None:
    graph = grimp.build_graph(ROOT_PACKAGE)
    violations = _find_layering_violations(graph)

    if violations:
        raise AssertionError("Layering violations detected:\n" + "\n".join(violations))


def test_domain_has_no_third_party_imports() -> None:
    """The fact model runs on the standard library alone."""
    graph = grimp.build_graph(ROOT_PACKAGE, include_external_packages=True)
    offenders = sorted(
        f"{importer} -> {imported}"
        for importer in graph.modules
        if _layer_for_module(importer) == "domain"
        for imported in graph.find_modules_directly_imported_by(importer)
        if imported.split(".", 1)[0] in {"pydantic", "pydantic_settings", "typer", "lxml"}
    )

    assert offenders == []
