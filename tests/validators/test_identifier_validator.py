"""Tests for identifier-safe name checks."""

import pytest

from projectspec.validators.identifier_validator import IdentifierValidator, identifier_problem
from projectspec.validators.models import ErrorKind, FindingCode, Severity
from tests.conftest import entity, parse, with_entities


class TestIdentifierProblem:
    @pytest.mark.parametrize(
        "value",
        ["customers", "Deal", "order-fulfillment", "_private", "v2", "A_B-c9"],
    )
    def test_valid(self, value: str) -> None:
        assert identifier_problem(value) is None

    def test_empty(self) -> None:
        code, _ = identifier_problem("")
        assert code == FindingCode.NAMING_EMPTY

    def test_leading_digit(self) -> None:
        code, _ = identifier_problem("2fa")
        assert code == FindingCode.NAMING_LEADING_DIGIT

    @pytest.mark.parametrize("value", ["顧客", "with space", "dot.name", "slash/name", "trailing\n"])
    def test_invalid_characters(self, value: str) -> None:
        code, _ = identifier_problem(value)
        assert code == FindingCode.NAMING_INVALID_CHARACTER


class TestIdentifierValidator:
    def test_examples_are_clean(self, example: dict, settings) -> None:
        assert IdentifierValidator(settings).validate(parse(example)) == []

    def test_reports_nested_state_path(self, financial_crm: dict, settings) -> None:
        financial_crm["domains"][1]["entities"][0]["states"][2]["englishName"] = "進行中"
        errors = IdentifierValidator(settings).validate(parse(financial_crm))

        assert [e.path for e in errors] == ["domains[1].entities[0].states[2].englishName"]
        assert errors[0].kind == ErrorKind.NAMING
        assert errors[0].severity == Severity.FATAL

    def test_reports_every_bad_name(self, payment_api: dict, settings) -> None:
        payment_api["domains"][0]["englishName"] = ""
        payment_api["domains"][0]["subdomains"][1]["englishName"] = "1capture"
        payment_api["domains"][0]["entities"][0]["englishName"] = "Payment Intent"

        errors = IdentifierValidator(settings).validate(parse(payment_api))

        assert {e.path: e.code for e in errors} == {
            "domains[0].englishName": FindingCode.NAMING_EMPTY,
            "domains[0].subdomains[1].englishName": FindingCode.NAMING_LEADING_DIGIT,
            "domains[0].entities[0].englishName": FindingCode.NAMING_INVALID_CHARACTER,
        }

    def test_command_class_and_value_objects(self, financial_crm: dict, settings) -> None:
        financial_crm["domains"][1]["entities"][0]["transitions"][0]["commandClass"] = "Draft Deal"
        financial_crm["valueObjects"][1] = "Date.Range"

        paths = [e.path for e in IdentifierValidator(settings).validate(parse(financial_crm))]

        assert paths == [
            "domains[1].entities[0].transitions[0].commandClass",
            "valueObjects[1]",
        ]

    def test_entity_without_states_is_fine(self, order_worker: dict, settings) -> None:
        doc = with_entities(order_worker, entity("Order"))
        assert IdentifierValidator(settings).validate(parse(doc)) == []
