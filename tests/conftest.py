"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from mdcoverage.messages import Messages
from mdcoverage.models import CoverageMatrix, MetadataTypeCoverage

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Metadata fixtures
# ---------------------------------------------------------------------------

APEX_CLASS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<ApexClass xmlns="http://soap.sforce.com/2006/04/metadata">
    <apiVersion>52.0</apiVersion>
    <status>Active</status>
</ApexClass>
"""

ASSIGNMENT_RULES_XML = """<?xml version="1.0" encoding="UTF-8"?>
<AssignmentRules xmlns="http://soap.sforce.com/2006/04/metadata">
</AssignmentRules>
"""

PROFILE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Profile xmlns="http://soap.sforce.com/2006/04/metadata">
    <custom>false</custom>
</Profile>
"""

COVERAGE_REPORT_JSON = {
    "types": {
        "ApexClass": {
            "channels": {
                "unlockedPackagingWithoutNamespace": True,
                "unlockedPackagingWithNamespace": True,
                "toolingApi": True,
                "sourceTracking": True,
                "metadataApi": True,
                "managedPackaging": True,
                "classicUnmanagedPackaging": True,
                "classicManagedPackaging": True,
                "changeSets": True,
                "apexMetadataApi": False,
            }
        },
        "AssignmentRules": {
            "channels": {
                "unlockedPackagingWithoutNamespace": False,
                "unlockedPackagingWithNamespace": False,
                "toolingApi": True,
                "sourceTracking": True,
                "metadataApi": True,
                "managedPackaging": False,
                "classicUnmanagedPackaging": False,
                "classicManagedPackaging": False,
                "changeSets": True,
                "apexMetadataApi": False,
            }
        },
        "Profile": {
            "channels": {
                "unlockedPackagingWithoutNamespace": True,
                "unlockedPackagingWithNamespace": True,
                "toolingApi": False,
                "sourceTracking": True,
                "metadataApi": True,
                "managedPackaging": True,
                "classicUnmanagedPackaging": True,
                "classicManagedPackaging": True,
                "changeSets": False,
                "apexMetadataApi": False,
            }
        },
    },
    "versions": {"selected": 51, "max": 52, "min": 43},
}


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class FakeCoverageSource:
    """In-memory ``CoverageMatrixSource`` recording the requested API versions."""

    def __init__(self, matrix: CoverageMatrix) -> None:
        self.matrix = matrix
        self.requested_versions: list[str | None] = []
        self.closed = False

    async def fetch(self, api_version: str | None = None) -> CoverageMatrix:
        self.requested_versions.append(api_version)
        return self.matrix

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def messages() -> Messages:
    return Messages()


@pytest.fixture
def coverage_matrix() -> CoverageMatrix:
    return {name: MetadataTypeCoverage.model_validate(value) for name, value in COVERAGE_REPORT_JSON["types"].items()}


@pytest.fixture
def coverage_source(coverage_matrix: CoverageMatrix) -> FakeCoverageSource:
    return FakeCoverageSource(coverage_matrix)


@pytest.fixture
def force_app(tmp_path: Path) -> Path:
    """A package directory with one assignment rules and one Apex class descriptor."""
    root = tmp_path / "force-app"
    write_file(root / "main" / "default" / "assignmentRules" / "Case.assignmentRules-meta.xml", ASSIGNMENT_RULES_XML)
    write_file(root / "main" / "default" / "classes" / "ClsOne.cls-meta.xml", APEX_CLASS_XML)
    write_file(root / "main" / "default" / "classes" / "ClsOne.cls", "public class ClsOne {}\n")
    return root
