"""Tests for duplicate selection, report building and schema validation."""

import pytest

from npm_duplicates.models import ScanResult, VersionRecord
from npm_duplicates.report import build_report, select_duplicates
from npm_duplicates.validators.report_schema import ReportSchemaError, validate_report

MONGOOSE = [
    VersionRecord("mongoose", "2.0.0", "b/package.json"),
    VersionRecord("mongoose", "1.0.0", "a/package.json"),
]


class TestSelectDuplicates:
    def test_drops_single_version_names(self):
        versions = {
            "mongoose": MONGOOSE,
            "lodash": [VersionRecord("lodash", "4.17.21", "a/package.json")],
        }
        assert select_duplicates(versions) == {"mongoose": MONGOOSE}

    def test_preserves_order(self):
        records = [
            VersionRecord("x", "3.0.0", "a"),
            VersionRecord("x", "1.0.0", "b"),
            VersionRecord("x", "2.0.0", "c"),
        ]
        assert select_duplicates({"x": records})["x"] == records

    def test_empty(self):
        assert select_duplicates({}) == {}


class TestBuildReport:
    def test_shape(self):
        result = ScanResult(
            root="/repo",
            manifests=("a/package.json", "b/package.json"),
            ignored_manifests=("legacy/package.json",),
            duplicates={"mongoose": MONGOOSE},
        )

        report = build_report(result)

        assert report["hasDuplicates"] is True
        assert report["totals"] == {"manifests": 2, "ignoredManifests": 1, "duplicates": 1}
        assert report["dependencies"] == [
            {
                "name": "mongoose",
                "uniqueVersions": 2,
                "highest": {"version": "2.0.0", "origin": "b/package.json"},
                "versions": [
                    {"version": "2.0.0", "origin": "b/package.json"},
                    {"version": "1.0.0", "origin": "a/package.json"},
                ],
            }
        ]
        validate_report(report)

    def test_clean_report_is_valid(self):
        report = build_report(ScanResult(root="/repo", manifests=("package.json",)))
        assert report["hasDuplicates"] is False
        validate_report(report)


class TestValidateReport:
    def test_rejects_bad_report(self):
        report = build_report(ScanResult(root="/repo", manifests=()))
        report["totals"]["duplicates"] = -1
        del report["root"]

        with pytest.raises(ReportSchemaError) as excinfo:
            validate_report(report)

        problems = excinfo.value.problems
        assert len(problems) == 2
        assert any(p.startswith("- totals/duplicates:") for p in problems)
        assert any("'root' is a required property" in p for p in problems)

    def test_rejects_unnormalised_version(self):
        report = build_report(ScanResult(root="/repo", manifests=(), duplicates={"mongoose": MONGOOSE}))
        report["dependencies"][0]["versions"][0]["version"] = "^2.0.0"

        with pytest.raises(ReportSchemaError, match="dependencies/0/versions/0/version"):
            validate_report(report)

    def test_empty_dependency_name_is_valid(self):
        records = [VersionRecord("", "2.0.0", "a"), VersionRecord("", "1.0.0", "b")]
        validate_report(build_report(ScanResult(root="/repo", manifests=(), duplicates={"": records})))
