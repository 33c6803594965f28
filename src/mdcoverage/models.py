from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MetadataFile(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    file_name: str = Field(alias="fileName")
    folder: str
    type: str = Field(min_length=1)


class MetadataTypeCoverage(BaseModel):
    channels: dict[str, bool] | None = None


CoverageMatrix = dict[str, MetadataTypeCoverage | None]


class CoverageReportResponse(BaseModel):
    """Body returned by the metadata coverage report service.

    Only ``types`` is read; ``versions`` and any other keys are ignored.
    """

    types: CoverageMatrix


class MetadataFileCoverage(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: MetadataFile
    coverage: dict[str, bool]

    @property
    def covered(self) -> bool:
        """True when every selected channel supports the file's type."""
        return all(self.coverage.values())

    def to_response(self) -> dict[str, Any]:
        return {"file": self.file.model_dump(by_alias=True), **self.coverage}
