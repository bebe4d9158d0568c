"""Referential Integrity Checker — document-wide references and identifier collisions.

Transition endpoints are checked per entity by the state machine validator;
this checker covers everything that needs a view of the whole document.
"""

from typing import Iterable

from projectspec.models.input import ProjectSpec
from projectspec.validators.base import BaseValidator
from projectspec.validators.models import ErrorKind, Finding, FindingCode


class ReferentialIntegrityChecker(BaseValidator):
    """Validates isolation keys, checklist items and identifier uniqueness."""

    @property
    def name(self) -> str:
        return "ReferentialIntegrityChecker"

    def validate(self, spec: ProjectSpec) -> list[Finding]:
        errors = []

        errors.extend(self._check_isolation_key(spec))
        errors.extend(self._check_checklists(spec))
        errors.extend(self._check_local_uniqueness(spec))
        errors.extend(self._check_global_uniqueness(spec))

        return errors

    def _check_isolation_key(self, spec: ProjectSpec) -> list[Finding]:
        isolation = spec.compliance.tenant_isolation if spec.compliance else None
        if isolation is None or isolation.isolation_key.strip():
            return []

        return [self._error(
            path="compliance.tenantIsolation.isolationKey",
            kind=ErrorKind.REFERENTIAL_INTEGRITY,
            code=FindingCode.REF_EMPTY_ISOLATION_KEY,
            message="Tenant isolation is declared with an empty isolation key",
            suggestion="Name the field that scopes data per tenant (e.g. 'branchId')",
        )]

    def _check_checklists(self, spec: ProjectSpec) -> list[Finding]:
        errors = []

        for i, checklist in enumerate(spec.custom_checklist or []):
            if checklist.items:
                continue
            errors.append(self._error(
                path=f"customChecklist[{i}].items",
                kind=ErrorKind.REFERENTIAL_INTEGRITY,
                code=FindingCode.REF_EMPTY_CHECKLIST,
                message=f"Checklist category '{checklist.category}' has no items",
                suggestion="Add at least one item or remove the category",
            ))

        return errors

    def _check_local_uniqueness(self, spec: ProjectSpec) -> list[Finding]:
        """Subdomains unique per domain, states unique per entity."""
        errors = []

        for domain_path, domain in self._iter_domains(spec):
            errors.extend(self._duplicates(
                f"subdomain in domain '{domain.english_name}'",
                (
                    (f"{domain_path}.subdomains[{s}].englishName", subdomain.english_name)
                    for s, subdomain in enumerate(domain.subdomains)
                ),
            ))

        for entity_path, entity in self._iter_entities(spec):
            errors.extend(self._duplicates(
                f"state in entity '{entity.english_name}'",
                (
                    (f"{entity_path}.states[{i}].englishName", state.english_name)
                    for i, state in enumerate(entity.states or [])
                ),
            ))

        return errors

    def _check_global_uniqueness(self, spec: ProjectSpec) -> list[Finding]:
        """Domain and entity names become directory names, so they must not collide anywhere."""
        errors = []

        errors.extend(self._duplicates(
            "domain",
            ((f"{path}.englishName", domain.english_name) for path, domain in self._iter_domains(spec)),
        ))
        errors.extend(self._duplicates(
            "entity",
            ((f"{path}.englishName", entity.english_name) for path, entity in self._iter_entities(spec)),
        ))

        return errors

    def _duplicates(self, label: str, named: Iterable[tuple[str, str]]) -> list[Finding]:
        """Report every occurrence of a name after its first one."""
        errors = []
        first_seen: dict[str, str] = {}

        for path, name in named:
            if name not in first_seen:
                first_seen[name] = path
                continue
            errors.append(self._error(
                path=path,
                kind=ErrorKind.REFERENTIAL_INTEGRITY,
                code=FindingCode.REF_DUPLICATE_IDENTIFIER,
                message=f"Duplicate {label} name '{name}' (first declared at {first_seen[name]})",
                suggestion="Identifier-safe names are case-sensitive and must be unique",
            ))

        return errors
