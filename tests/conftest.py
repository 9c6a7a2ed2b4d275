"""Contract fixture loader for clam.

Loads YAML fixtures from tests/fixtures/ and binds each fixture's matcher
through the core registry, so every case runs through the same path as
config-driven alternatives.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from clam import Matcher, MatcherSpec, core_registry

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

# Inputs for exhaustive property checks: every printable ASCII character plus
# a few multi-character arguments shaped like real command lines.
ASCII_CHARS = [chr(c) for c in range(0x20, 0x7F)]
SAMPLE_ARGS = [
    "",
    "-",
    "--",
    "---",
    "-h",
    "-hv",
    "--help",
    "--help=x",
    "-link",
    "/f",
    "/Fvalue",
    "+12",
    "-12",
    "12ab",
    "0x1F",
    "name",
    "\0",
]


@dataclass
class FixtureCase:
    """A single case from a contract fixture."""

    fixture_name: str
    case_name: str
    matcher: Matcher
    args: dict[str, Any]
    input: str
    expect: int


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixtures() -> list[FixtureCase]:
    """Load all contract fixtures in file order."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURES_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    registry = core_registry()
    cases: list[FixtureCase] = []
    with path.open(encoding="utf-8") as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = doc["name"]
            for case in doc["cases"]:
                args = case.get("args", {})
                matcher = registry.load_matcher(MatcherSpec(doc["matcher"], args))
                cases.append(
                    FixtureCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        matcher=matcher,
                        args=args,
                        input=str(case["input"]),
                        expect=case["expect"],
                    )
                )
    return cases
