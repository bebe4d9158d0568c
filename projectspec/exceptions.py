"""Exceptions raised by projectspec."""


class ProjectSpecError(ValueError):
    """Base class for projectspec errors."""


class DocumentInvalidError(ProjectSpecError):
    """The document has fatal findings and cannot be normalized."""

    def __init__(self, findings: list):
        self.findings = findings
        super().__init__(f"Document has {len(findings)} fatal finding(s)")


class UnknownExampleError(ProjectSpecError, KeyError):
    """No bundled example payload has the requested name."""
