"""Structure Validator — required fields, types and unknown keys.

This is the precondition gate: every other validator works on the parsed
ProjectSpec and only runs when this one reports nothing.
"""

from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from projectspec.models.input import ProjectSpec
from projectspec.validators.models import ErrorKind, Finding, FindingCode, Severity

_CODE_BY_ERROR_TYPE = {
    "missing": FindingCode.STRUCT_MISSING_FIELD,
    "extra_forbidden": FindingCode.STRUCT_UNKNOWN_FIELD,
}


def format_loc(loc: tuple) -> str:
    """Render a pydantic error location as a dotted path.

    ('domains', 1, 'entities', 0, 'englishName') → 'domains[1].entities[0].englishName'
    """
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


class StructureValidator:
    """Parses a raw document into a ProjectSpec, reporting every shape defect."""

    name = "StructureValidator"

    def parse(self, document: Any) -> tuple[Optional[ProjectSpec], list[Finding]]:
        """Validate the raw document's shape.

        Args:
            document: Mapping parsed from JSON/YAML by the caller

        Returns:
            (spec, []) when the shape is valid, (None, findings) otherwise
        """
        try:
            return ProjectSpec.model_validate(document), []
        except PydanticValidationError as exc:
            return None, [self._to_finding(err) for err in exc.errors()]

    def _to_finding(self, err: dict) -> Finding:
        error_type = err.get("type", "")
        path = format_loc(tuple(err.get("loc", ())))
        code = _CODE_BY_ERROR_TYPE.get(error_type, FindingCode.STRUCT_INVALID_TYPE)

        if code == FindingCode.STRUCT_MISSING_FIELD:
            message = f"Required field '{path}' is missing"
            suggestion = f"Add '{path}' to the document"
        elif code == FindingCode.STRUCT_UNKNOWN_FIELD:
            message = f"Unknown field '{path}'"
            suggestion = "Remove the field or check its spelling"
        else:
            message = f"Invalid value at '{path or '<root>'}': {err.get('msg', 'wrong type')}"
            suggestion = None

        return Finding(
            path=path,
            kind=ErrorKind.STRUCTURAL,
            severity=Severity.FATAL,
            code=code,
            message=message,
            suggestion=suggestion,
        )
