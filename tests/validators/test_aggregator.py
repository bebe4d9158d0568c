"""Tests for finding aggregation: de-duplication and ordering."""

from projectspec.validators.aggregator import ErrorAggregator, aggregate, path_sort_key
from projectspec.validators.models import ErrorKind, Finding, FindingCode, Severity


def finding(path: str, kind: ErrorKind = ErrorKind.NAMING, severity: Severity = Severity.FATAL, message: str = "x") -> Finding:
    return Finding(path=path, kind=kind, severity=severity, code=FindingCode.NAMING_EMPTY, message=message)


class TestPathSortKey:
    def test_indices_compare_numerically(self) -> None:
        paths = ["domains[10].englishName", "domains[2].englishName", "domains[1].entities[0]"]
        assert sorted(paths, key=path_sort_key) == [
            "domains[1].entities[0]",
            "domains[2].englishName",
            "domains[10].englishName",
        ]

    def test_parent_before_child(self) -> None:
        assert path_sort_key("compliance") < path_sort_key("compliance.tenantIsolation")

    def test_names_compare_lexically(self) -> None:
        paths = ["systemSubType", "compliance.tenantIsolation", "domains[0].englishName"]
        assert sorted(paths, key=path_sort_key) == [
            "compliance.tenantIsolation",
            "domains[0].englishName",
            "systemSubType",
        ]


class TestErrorAggregator:
    def test_fatal_before_warning(self) -> None:
        results = aggregate([
            finding("a", severity=Severity.WARNING),
            finding("z", severity=Severity.FATAL),
        ])
        assert [f.path for f in results] == ["z", "a"]

    def test_dedupes_path_and_kind(self) -> None:
        results = aggregate([
            finding("domains[0].entities[1].englishName", message="first"),
            finding("domains[0].entities[1].englishName", message="second"),
            finding("domains[0].entities[1].englishName", kind=ErrorKind.REFERENTIAL_INTEGRITY),
        ])

        assert [(f.kind, f.message) for f in results] == [
            (ErrorKind.NAMING, "first"),
            (ErrorKind.REFERENTIAL_INTEGRITY, "x"),
        ]

    def test_collects_across_batches(self) -> None:
        aggregator = ErrorAggregator()
        aggregator.add([finding("b")])
        aggregator.add([])
        aggregator.add([finding("a"), finding("c")])

        assert len(aggregator) == 3
        assert [f.path for f in aggregator.results()] == ["a", "b", "c"]

    def test_order_is_independent_of_collection_order(self) -> None:
        findings = [
            finding("domains[3].englishName"),
            finding("systemSubType", kind=ErrorKind.CONSISTENCY),
            finding("compliance", kind=ErrorKind.CONSISTENCY, severity=Severity.WARNING),
            finding("domains[0].entities[0].states[1]", kind=ErrorKind.STATE_MACHINE),
        ]
        assert aggregate(findings) == aggregate(list(reversed(findings)))
