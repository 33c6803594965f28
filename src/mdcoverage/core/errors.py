from pathlib import Path


class MetadataCoverageError(Exception):
    """Base class for errors that abort a coverage report run."""


class ConfigurationError(MetadataCoverageError):
    pass


class ProjectNotFoundError(MetadataCoverageError):
    def __init__(self, start: str | Path) -> None:
        self.start = str(start)
        super().__init__(f"no sfdx-project.json found in {self.start} or any parent directory")


class DirectoryNotFoundError(MetadataCoverageError):
    def __init__(self, path: str | Path, cause: str | None = None) -> None:
        self.path = str(path)
        self.cause = cause
        message = f"could not read directory {self.path}"
        if cause:
            message += f" - caused by: {cause}"
        super().__init__(message)


class MetadataFileReadError(MetadataCoverageError):
    def __init__(self, path: str | Path, cause: str | None = None) -> None:
        self.path = str(path)
        self.cause = cause
        message = f"could not read metadata file {self.path}"
        if cause:
            message += f" - caused by: {cause}"
        super().__init__(message)
