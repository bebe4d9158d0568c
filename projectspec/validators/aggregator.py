"""Error Aggregator — merges findings from every validator into one ordered list.

Ordering: fatal before warning, then by path. Paths compare segment by segment
with list indices compared as numbers, so domains[2] sorts before domains[10].
Exact (path, kind) duplicates keep their first occurrence.
"""

import re

from projectspec.validators.models import Finding, Severity

_SEVERITY_ORDER = {Severity.FATAL.value: 0, Severity.WARNING.value: 1}
_PATH_TOKEN = re.compile(r"\[(\d+)\]|([^.\[\]]+)")


def path_sort_key(path: str) -> tuple:
    """Sort key for a dotted path: names as strings, indices as integers."""
    key = []
    for index, name in _PATH_TOKEN.findall(path):
        if index:
            key.append((1, int(index), ""))
        else:
            key.append((0, 0, name))
    return tuple(key)


class ErrorAggregator:
    """Collect-all accumulator. Never short-circuits on a fatal finding."""

    def __init__(self):
        self._findings: list[Finding] = []

    def add(self, findings: list[Finding]) -> None:
        self._findings.extend(findings)

    def __len__(self) -> int:
        return len(self._findings)

    def results(self) -> list[Finding]:
        """De-duplicated, deterministically ordered findings."""
        unique: list[Finding] = []
        seen: set[tuple[str, str]] = set()
        for finding in self._findings:
            key = (finding.path, finding.kind)
            if key in seen:
                continue
            seen.add(key)
            unique.append(finding)

        # sorted() is stable: ties keep collection order.
        return sorted(
            unique,
            key=lambda f: (_SEVERITY_ORDER[f.severity], path_sort_key(f.path)),
        )


def aggregate(findings: list[Finding]) -> list[Finding]:
    aggregator = ErrorAggregator()
    aggregator.add(findings)
    return aggregator.results()
