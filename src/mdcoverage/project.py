import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from mdcoverage.core.errors import ProjectNotFoundError

PROJECT_FILE_NAME = "sfdx-project.json"


class PackageDirectory(BaseModel):
    model_config = ConfigDict(extra="allow")

    path: str
    default: bool = False


class SfdxProjectJson(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    package_directories: list[PackageDirectory] = Field(default_factory=list, alias="packageDirectories")
    source_api_version: str | None = Field(default=None, alias="sourceApiVersion")


class SfdxProject:
    """A Salesforce DX project rooted at the directory holding ``sfdx-project.json``."""

    def __init__(self, root: Path, config: SfdxProjectJson) -> None:
        self.root = root
        self.config = config

    @classmethod
    def load(cls, root: str | Path) -> "SfdxProject":
        root = Path(root)
        data = json.loads((root / PROJECT_FILE_NAME).read_text(encoding="utf-8"))
        return cls(root, SfdxProjectJson.model_validate(data))

    @classmethod
    def resolve(cls, start: str | Path | None = None) -> "SfdxProject":
        """Load the nearest project at or above ``start`` (default: the working directory)."""
        start_dir = Path(start or Path.cwd()).resolve()
        for candidate in (start_dir, *start_dir.parents):
            if (candidate / PROJECT_FILE_NAME).is_file():
                return cls.load(candidate)
        raise ProjectNotFoundError(start_dir)

    @property
    def source_api_version(self) -> str | None:
        return self.config.source_api_version

    def unique_package_directories(self) -> list[str]:
        paths: list[str] = []
        for package_directory in self.config.package_directories:
            full_path = self.root / package_directory.path
            try:
                path = os.path.relpath(full_path)
            except ValueError:
                path = str(full_path)
            if path not in paths:
                paths.append(path)
        return paths
