"""Data models for the resolved package document."""

from pydantic import BaseModel, ConfigDict, Field


class ResourceEntry(BaseModel):
    """Manifest item: full archive path and media type."""

    model_config = ConfigDict(frozen=True)

    path: str  # root_base + href
    media_type: str


class Package(BaseModel):
    """Resources, reading order and metadata read from the package file."""

    model_config = ConfigDict(frozen=True)

    root_file: str
    root_base: str
    resources: dict[str, ResourceEntry] = Field(default_factory=dict)
    spine: tuple[str, ...] = ()
    metadata: dict[str, str] = Field(default_factory=dict)
