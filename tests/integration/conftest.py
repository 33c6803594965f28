"""Fixtures for end-to-end runs of the report command against a mocked coverage service."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import httpx
import pytest

from mdcoverage.coverage.client import DEFAULT_COVERAGE_URL, HttpCoverageMatrixClient
from tests.conftest import APEX_CLASS_XML, ASSIGNMENT_RULES_XML, COVERAGE_REPORT_JSON, PROFILE_XML, write_file


class CoverageService:
    """Records requests made to the mocked coverage report endpoint."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.body: dict[str, Any] = COVERAGE_REPORT_JSON

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json=self.body)

    def client(self) -> HttpCoverageMatrixClient:
        transport = httpx.MockTransport(self.handler)
        return HttpCoverageMatrixClient(base_url=DEFAULT_COVERAGE_URL, client=httpx.AsyncClient(transport=transport))


@pytest.fixture
def coverage_service() -> Iterator[CoverageService]:
    service = CoverageService()
    with patch("mdcoverage.cli.report._get_coverage_source", side_effect=service.client):
        yield service


@pytest.fixture
def sfdx_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A project with two package directories."""
    (tmp_path / "sfdx-project.json").write_text(
        json.dumps(
            {
                "packageDirectories": [{"path": "force-app", "default": True}, {"path": "unpackaged"}],
                "namespace": "",
                "sourceApiVersion": "52.0",
            }
        ),
        encoding="utf-8",
    )
    default = tmp_path / "force-app" / "main" / "default"
    write_file(default / "assignmentRules" / "Case.assignmentRules-meta.xml", ASSIGNMENT_RULES_XML)
    write_file(default / "classes" / "ClsOne.cls-meta.xml", APEX_CLASS_XML)
    write_file(default / "classes" / "ClsOne.cls", "public class ClsOne {}\n")
    write_file(tmp_path / "unpackaged" / "profiles" / "Admin.profile-meta.xml", PROFILE_XML)
    monkeypatch.chdir(tmp_path)
    return tmp_path
