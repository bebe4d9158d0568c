"""projectspec — validation and normalization of documentation-generator input documents.

Usage:
    from projectspec import normalize

    result = normalize(document)
    project = result.unwrap()
"""

from projectspec.exceptions import DocumentInvalidError, ProjectSpecError
from projectspec.normalizer import NormalizationResult, NormalizedModelBuilder, normalize
from projectspec.validators import ValidationEngine, ValidationReport

__version__ = "0.1.0"

__all__ = [
    "normalize",
    "NormalizedModelBuilder",
    "NormalizationResult",
    "ValidationEngine",
    "ValidationReport",
    "DocumentInvalidError",
    "ProjectSpecError",
]
