"""Tests for document-wide referential integrity checks."""

from projectspec.config import Settings
from projectspec.validators.models import ErrorKind, FindingCode
from projectspec.validators.reference_validator import ReferentialIntegrityChecker
from tests.conftest import entity, parse


def run(document: dict, settings: Settings) -> list:
    return ReferentialIntegrityChecker(settings).validate(parse(document))


class TestGoldenPaths:
    def test_examples_are_clean(self, example: dict, settings: Settings) -> None:
        assert run(example, settings) == []

    def test_subdomain_names_may_repeat_across_domains(self, validation_library: dict, settings: Settings) -> None:
        # Both domains declare a "core" subdomain.
        names = [d["subdomains"][-1]["englishName"] for d in validation_library["domains"]]
        assert names == ["core", "core"]
        assert run(validation_library, settings) == []


class TestIsolationKey:
    def test_blank_isolation_key(self, financial_crm: dict, settings: Settings) -> None:
        financial_crm["compliance"]["tenantIsolation"]["isolationKey"] = "   "
        errors = run(financial_crm, settings)

        assert [(e.path, e.code) for e in errors] == [
            ("compliance.tenantIsolation.isolationKey", FindingCode.REF_EMPTY_ISOLATION_KEY),
        ]
        assert errors[0].kind == ErrorKind.REFERENTIAL_INTEGRITY


class TestChecklists:
    def test_empty_items(self, order_worker: dict, settings: Settings) -> None:
        order_worker["customChecklist"] = [
            {"category": "Idempotency", "items": ["Every consumer checks the idempotency key"]},
            {"category": "Retries", "items": []},
        ]
        paths = [e.path for e in run(order_worker, settings)]
        assert paths == ["customChecklist[1].items"]


class TestUniqueness:
    def test_entity_name_shared_by_two_domains(self, financial_crm: dict, settings: Settings) -> None:
        financial_crm["domains"][1]["entities"].append(entity("Customer"))
        errors = run(financial_crm, settings)

        assert len(errors) == 1
        assert errors[0].path == "domains[1].entities[1].englishName"
        assert errors[0].code == FindingCode.REF_DUPLICATE_IDENTIFIER
        assert "domains[0].entities[0].englishName" in errors[0].message

    def test_names_are_case_sensitive(self, financial_crm: dict, settings: Settings) -> None:
        financial_crm["domains"][1]["entities"].append(entity("customer"))
        assert run(financial_crm, settings) == []

    def test_duplicate_domain(self, validation_library: dict, settings: Settings) -> None:
        validation_library["domains"][1]["englishName"] = "schemas"
        paths = [e.path for e in run(validation_library, settings)]
        assert paths == ["domains[1].englishName"]

    def test_domain_and_entity_namespaces_are_separate(self, order_worker: dict, settings: Settings) -> None:
        order_worker["domains"][1]["entities"].append(entity("orders"))
        assert run(order_worker, settings) == []

    def test_duplicate_subdomain_within_domain(self, payment_api: dict, settings: Settings) -> None:
        payment_api["domains"][0]["subdomains"][3]["englishName"] = "capture"
        paths = [e.path for e in run(payment_api, settings)]
        assert paths == ["domains[0].subdomains[3].englishName"]

    def test_duplicate_state_within_entity(self, order_worker: dict, settings: Settings) -> None:
        order_worker["domains"][0]["entities"][0]["states"][2]["englishName"] = "Pending"
        paths = [e.path for e in run(order_worker, settings)]
        assert paths == ["domains[0].entities[0].states[2].englishName"]

    def test_every_later_occurrence_is_reported(self, financial_crm: dict, settings: Settings) -> None:
        financial_crm["domains"][1]["entities"].extend([entity("Contact"), entity("Contact")])
        paths = [e.path for e in run(financial_crm, settings)]
        assert paths == ["domains[1].entities[1].englishName", "domains[1].entities[2].englishName"]
