"""Example payload loader — the bundled reference documents.

Each JSON file in this directory is one complete input document. Files are
read once and cached; callers always get a fresh copy they may modify.
"""

import copy
import json
from pathlib import Path

from projectspec.exceptions import UnknownExampleError

EXAMPLES_DIR = Path(__file__).parent

# Cache loaded example files to avoid re-reading from disk
_example_cache: dict[str, dict] = {}


def _load_all_examples() -> dict[str, dict]:
    """Load and cache all JSON example files from the examples directory."""
    if _example_cache:
        return _example_cache

    for json_file in sorted(EXAMPLES_DIR.glob("*.json")):
        _example_cache[json_file.stem] = json.loads(json_file.read_text(encoding="utf-8"))

    return _example_cache


def load_example(name: str) -> dict:
    """Load a bundled example document by name.

    Args:
        name: Example identifier (e.g., "financial_crm", "payment_api")

    Returns:
        A deep copy of the example document

    Raises:
        UnknownExampleError: if no example has that name
    """
    examples = _load_all_examples()
    if name not in examples:
        raise UnknownExampleError(f"Unknown example '{name}'. Available: {', '.join(examples)}")
    return copy.deepcopy(examples[name])


def get_all_examples() -> list[str]:
    """List all available example names."""
    return list(_load_all_examples().keys())
