from mdcoverage.coverage.client import (
    DEFAULT_API_VERSION,
    DEFAULT_COVERAGE_URL,
    HttpCoverageMatrixClient,
    coverage_report_url,
    get_coverage_url,
    major_api_version,
)

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_COVERAGE_URL",
    "HttpCoverageMatrixClient",
    "coverage_report_url",
    "get_coverage_url",
    "major_api_version",
]
