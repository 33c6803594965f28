import logging
import os

import httpx

from mdcoverage.models import CoverageMatrix, CoverageReportResponse

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "51"
DEFAULT_COVERAGE_URL = "https://mdcoverage.secure.force.com/services/apexrest/report"


def get_coverage_url() -> str:
    return os.getenv("MDCOVERAGE_URL", DEFAULT_COVERAGE_URL)


def major_api_version(api_version: str | None) -> str:
    """Return the part of ``api_version`` before the first dot ("52.0" -> "52")."""
    if not api_version:
        return DEFAULT_API_VERSION
    return api_version.split(".", 1)[0]


def coverage_report_url(api_version: str | None, base_url: str | None = None) -> str:
    return f"{base_url or get_coverage_url()}?version={major_api_version(api_version)}"


class HttpCoverageMatrixClient:
    """Fetch the metadata coverage matrix from the coverage report service.

    Implements the ``CoverageMatrixSource`` protocol. Errors are not retried
    and propagate unchanged.
    """

    def __init__(self, base_url: str | None = None, client: httpx.AsyncClient | None = None) -> None:
        self._base_url = base_url or get_coverage_url()
        self._client = client or httpx.AsyncClient()
        self._owns_client = client is None

    async def fetch(self, api_version: str | None = None) -> CoverageMatrix:
        url = coverage_report_url(api_version, self._base_url)
        logger.debug("Fetching metadata coverage report from %s", url)
        response = await self._client.get(url)
        response.raise_for_status()
        report = CoverageReportResponse.model_validate(response.json())
        logger.debug("Received coverage information for %d metadata type(s)", len(report.types))
        return report.types

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
