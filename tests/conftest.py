"""Conformance fixture loader for pathmatch.

Loads YAML fixtures from tests/fixtures/ for parametrized testing.

Each document has a name, a pattern, and a list of cases:

    name: single_wildcard
    pattern: /users/*
    cases:
      - name: one_segment
        url: /users/andrew
        expect: {matches: true, params: []}
      - name: too_short
        url: /users
        expect: {matches: false}

params is a list of [name, value] pairs, in binding order. A document with
``expect_error`` (pattern_syntax or segment_capacity) has no cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    pattern: str
    url: str
    matches: bool
    params: list[tuple[str, str]]

    @property
    def id(self) -> str:
        return f"{self.fixture_name}::{self.case_name}"


@dataclass
class ErrorFixture:
    """A pattern (and optionally a URL) that must raise."""

    fixture_name: str
    pattern: str
    url: str
    expect_error: str

    @property
    def id(self) -> str:
        return self.fixture_name


def _load_documents() -> list[dict[str, Any]]:
    docs: list[dict[str, Any]] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        with yaml_file.open() as f:
            for doc in yaml.safe_load_all(f):
                if doc is None:
                    continue
                doc["_source"] = yaml_file.stem
                docs.append(doc)
    return docs


def load_match_cases() -> list[FixtureCase]:
    """Load every positive/negative match case from the fixture files."""
    cases: list[FixtureCase] = []
    for doc in _load_documents():
        if "expect_error" in doc:
            continue
        fixture_name = f"{doc['_source']}::{doc['name']}"
        for case in doc.get("cases", []):
            expect = case["expect"]
            params = [(str(n), str(v)) for n, v in expect.get("params", [])]
            cases.append(
                FixtureCase(
                    fixture_name=fixture_name,
                    case_name=case["name"],
                    pattern=str(doc["pattern"]),
                    url=str(case["url"]),
                    matches=bool(expect["matches"]),
                    params=params,
                )
            )
    return cases


def load_error_fixtures() -> list[ErrorFixture]:
    """Load every fixture that must raise instead of returning a result."""
    return [
        ErrorFixture(
            fixture_name=f"{doc['_source']}::{doc['name']}",
            pattern=str(doc["pattern"]),
            url=str(doc.get("url", "/")),
            expect_error=doc["expect_error"],
        )
        for doc in _load_documents()
        if "expect_error" in doc
    ]


def pytest_generate_tests(metafunc: Any) -> None:
    """Parametrize ``match_case`` and ``error_fixture`` from the YAML fixtures."""
    if "match_case" in metafunc.fixturenames:
        cases = load_match_cases()
        metafunc.parametrize("match_case", cases, ids=[c.id for c in cases])
    if "error_fixture" in metafunc.fixturenames:
        fixtures = load_error_fixtures()
        metafunc.parametrize("error_fixture", fixtures, ids=[f.id for f in fixtures])
