from typing import Protocol

from mdcoverage.models import CoverageMatrix


class CoverageMatrixSource(Protocol):
    async def fetch(self, api_version: str | None = None) -> CoverageMatrix: ...

    async def aclose(self) -> None: ...
