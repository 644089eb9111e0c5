from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from errors import DocLinksError
from links.synthesize import DOC_BASE, SRC_BASE, LinkBases

CONFIG_FILENAME = "doclinks.toml"


class DocLinksConfig(BaseModel):
    """Configuration for link synthesis and output writing."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    doc_base: str = Field(
        default=DOC_BASE,
        description="Root URL of the rustdoc site",
    )
    src_base: str = Field(
        default=SRC_BASE,
        description="Root URL of the source-browsing site",
    )
    workers: int = Field(
        default=1,
        ge=1,
        description="Worker threads used to synthesize links for one document",
    )
    output_suffix: str = Field(
        default=".out",
        min_length=1,
        description="Suffix appended to an input path to name its output file",
    )

    @field_validator("doc_base", "src_base")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and normalize it to end with a slash."""
        if not v.startswith(("http://", "https://")):
            msg = f"base URL must start with http:// or https://, got {v!r}"
            raise ValueError(msg)
        return v if v.endswith("/") else f"{v}/"

    def link_bases(self) -> LinkBases:
        return LinkBases(doc_base=self.doc_base, src_base=self.src_base)


class ConfigError(DocLinksError):
    """Raised when config file exists but cannot be parsed."""


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> DocLinksConfig:
    """Load configuration.

    An explicit ``path`` must exist. Without one, ``doclinks.toml`` in ``cwd``
    (default: the working directory) is used when present, otherwise defaults.
    """
    if path is None:
        config_path = (cwd or Path.cwd()) / CONFIG_FILENAME
        if not config_path.is_file():
            return DocLinksConfig()
    else:
        config_path = path
        if not config_path.is_file():
            msg = f"Config file not found: {config_path}"
            raise ConfigError(msg)

    try:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {config_path}: {e}"
        raise ConfigError(msg) from e

    try:
        return DocLinksConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid config in {config_path}: {e}"
        raise ConfigError(msg) from e
