"""Pydantic schemas for runtime validation of command inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from leveldbutil.types import DumpMode


class DumpCommandConfig(BaseModel):
    """Validated form of a ``--dump`` command line."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: DumpMode
    files: tuple[str, ...] = ()
    target_dir: str | None = None

    @model_validator(mode="after")
    def _validate_mode(self) -> DumpCommandConfig:
        if self.mode == "directory" and self.target_dir is None:
            raise ValueError("--path requires a target directory.")
        if self.mode == "directory" and not self.files:
            raise ValueError("--path requires at least one input file.")
        if self.mode == "console" and self.target_dir is not None:
            raise ValueError("console mode does not take a target directory.")
        return self


class DecoderResolutionConfig(BaseModel):
    """Validated input for decoder registry lookups."""

    model_config = ConfigDict(extra="forbid")

    decoder_name: str

    @field_validator("decoder_name")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("decoder name cannot be empty.")
        return value
