"""Shared pytest fixtures and test helpers for projectspec tests."""

from __future__ import annotations

from typing import Any

import pytest

from projectspec.config import Settings
from projectspec.examples import get_all_examples, load_example
from projectspec.models.input import ProjectSpec
from projectspec.validators.engine import ValidationEngine
from projectspec.validators.models import Finding


@pytest.fixture
def settings() -> Settings:
    """Default policy, independent of the environment."""
    return Settings(DEBUG=False, ENTRY_POINT_POLICY="any", REPORT_REACHABILITY=True, _env_file=None)


@pytest.fixture
def engine(settings: Settings) -> ValidationEngine:
    return ValidationEngine(settings=settings)


@pytest.fixture
def financial_crm() -> dict:
    return load_example("financial_crm")


@pytest.fixture
def payment_api() -> dict:
    return load_example("payment_api")


@pytest.fixture
def order_worker() -> dict:
    return load_example("order_worker")


@pytest.fixture
def validation_library() -> dict:
    return load_example("validation_library")


@pytest.fixture(params=get_all_examples())
def example(request: pytest.FixtureRequest) -> dict:
    """Each bundled example document in turn."""
    return load_example(request.param)


def parse(document: dict[str, Any]) -> ProjectSpec:
    """Parse a document that is known to be structurally valid."""
    return ProjectSpec.model_validate(document)


def entity(
    name: str,
    states: list[str] | None = None,
    transitions: list[tuple[str, str, str]] | None = None,
    has_state_transition: bool | None = None,
) -> dict[str, Any]:
    """Build an entity dict from state names and (from, to, action) triples."""
    doc: dict[str, Any] = {
        "japaneseName": name,
        "englishName": name,
        "hasStateTransition": bool(states) if has_state_transition is None else has_state_transition,
    }
    if states is not None:
        doc["states"] = [{"japaneseName": s, "englishName": s, "description": s} for s in states]
    if transitions is not None:
        doc["transitions"] = [{"from": f, "to": t, "action": a} for f, t, a in transitions]
    return doc


def with_entities(document: dict[str, Any], *entities: dict[str, Any]) -> dict[str, Any]:
    """Replace the first domain's entities."""
    document["domains"][0]["entities"] = list(entities)
    return document


def of_kind(findings: list[Finding], kind: str) -> list[Finding]:
    return [f for f in findings if f.kind == kind]
