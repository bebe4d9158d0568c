"""Bundled example input documents."""

from projectspec.examples.loader import get_all_examples, load_example

__all__ = ["get_all_examples", "load_example"]
