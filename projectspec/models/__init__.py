"""Input and canonical models."""

from projectspec.models.input import ProjectSpec
from projectspec.models.normalized import NormalizedProject

__all__ = ["ProjectSpec", "NormalizedProject"]
