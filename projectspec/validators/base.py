"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit.
New validators are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from projectspec.config import Settings, get_settings
from projectspec.models.input import DomainSpec, EntitySpec, ProjectSpec
from projectspec.validators.models import ErrorKind, Finding, FindingCode, Severity


class BaseValidator(ABC):
    """Abstract base for all project spec validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns a list of Finding (empty = no issues)
        - validate() never mutates the spec and never stops at the first finding
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, spec: ProjectSpec) -> list[Finding]:
        """Run validation checks against a structurally valid spec.

        Args:
            spec: Parsed input document

        Returns:
            List of findings (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _error(
        self,
        path: str,
        kind: ErrorKind,
        code: FindingCode,
        message: str,
        severity: Severity = Severity.FATAL,
        suggestion: Optional[str] = None,
    ) -> Finding:
        """Convenience method to create a Finding."""
        return Finding(
            path=path,
            kind=kind,
            severity=severity,
            code=code,
            message=message,
            suggestion=suggestion,
        )

    def _iter_domains(self, spec: ProjectSpec) -> Iterator[tuple[str, DomainSpec]]:
        for d, domain in enumerate(spec.domains):
            yield f"domains[{d}]", domain

    def _iter_entities(self, spec: ProjectSpec) -> Iterator[tuple[str, EntitySpec]]:
        """Yield (path, entity) for every entity in document order."""
        for domain_path, domain in self._iter_domains(spec):
            for e, entity in enumerate(domain.entities):
                yield f"{domain_path}.entities[{e}]", entity
