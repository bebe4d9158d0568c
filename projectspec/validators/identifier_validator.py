"""Identifier Validator — names used as directory or class names downstream."""

import re
from typing import Iterator, Optional

from projectspec.models.input import ProjectSpec
from projectspec.validators.base import BaseValidator
from projectspec.validators.models import ErrorKind, Finding, FindingCode

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
_IDENTIFIER_CHAR = re.compile(r"[A-Za-z0-9_-]")


def identifier_problem(value: str) -> Optional[tuple[FindingCode, str]]:
    """Return (code, reason) when ``value`` is not a usable identifier, else None."""
    if not value:
        return FindingCode.NAMING_EMPTY, "is empty"
    if not IDENTIFIER_PATTERN.fullmatch(value):
        bad = sorted({ch for ch in value if not _IDENTIFIER_CHAR.fullmatch(ch)})
        return (
            FindingCode.NAMING_INVALID_CHARACTER,
            f"contains characters other than ASCII letters, digits, '_' or '-': {''.join(bad)!r}",
        )
    if value[0].isdigit():
        return FindingCode.NAMING_LEADING_DIGIT, "starts with a digit"
    return None


class IdentifierValidator(BaseValidator):
    """Checks every identifier-safe name in the document."""

    @property
    def name(self) -> str:
        return "IdentifierValidator"

    def validate(self, spec: ProjectSpec) -> list[Finding]:
        errors = []

        for path, value in self._identifier_fields(spec):
            problem = identifier_problem(value)
            if problem is None:
                continue
            code, reason = problem
            errors.append(self._error(
                path=path,
                kind=ErrorKind.NAMING,
                code=code,
                message=f"Identifier {value!r} {reason}",
                suggestion="Use ASCII letters, digits, '_' or '-', not starting with a digit",
            ))

        return errors

    def _identifier_fields(self, spec: ProjectSpec) -> Iterator[tuple[str, str]]:
        """Yield (path, value) for each name that ends up as a directory or class name."""
        for domain_path, domain in self._iter_domains(spec):
            yield f"{domain_path}.englishName", domain.english_name

            for s, subdomain in enumerate(domain.subdomains):
                yield f"{domain_path}.subdomains[{s}].englishName", subdomain.english_name

            for e, entity in enumerate(domain.entities):
                entity_path = f"{domain_path}.entities[{e}]"
                yield f"{entity_path}.englishName", entity.english_name

                for i, state in enumerate(entity.states or []):
                    yield f"{entity_path}.states[{i}].englishName", state.english_name

                for i, transition in enumerate(entity.transitions or []):
                    if transition.command_class is not None:
                        yield f"{entity_path}.transitions[{i}].commandClass", transition.command_class

        for i, value_object in enumerate(spec.value_objects or []):
            yield f"valueObjects[{i}]", value_object
