"""Slug data models: candidates, resolution attempts and check state."""

from pydantic import BaseModel, Field, field_validator

from src.utils.slug import is_valid_slug, normalize_slug, suffixed_slug


class CandidateIdentifier(BaseModel):
    """Slug candidate derived from a display name."""

    raw: str = Field(description="Source display name")
    normalized: str = Field(description="Normalized slug (may be empty)")

    @field_validator("normalized")
    @classmethod
    def validate_normalized(cls, v: str) -> str:
        """Validate that normalized is a slug or empty."""
        if v and not is_valid_slug(v):
            raise ValueError(f"normalized must be a valid slug or empty, got {v!r}")
        return v

    @classmethod
    def from_name(cls, name: str) -> "CandidateIdentifier":
        return cls(raw=name, normalized=normalize_slug(name))

    @property
    def is_empty(self) -> bool:
        return not self.normalized


class ResolutionAttempt(BaseModel):
    """One probe of the suffix search: ``base`` or ``base-N``."""

    base: str = Field(min_length=1, description="Normalized base slug")
    suffix: int | None = Field(default=None, ge=1, description="Numeric suffix (None on first try)")

    @property
    def slug(self) -> str:
        return suffixed_slug(self.base, self.suffix)


class ResolutionResult(BaseModel):
    """Result of automatic slug resolution."""

    slug: str = Field(description="Slug the oracle reported as free")
    base: str = Field(description="Base slug the probing started from")
    attempts: int = Field(ge=1, description="Oracle queries issued")
    fallback_used: bool = Field(default=False, description="Whether the fallback policy supplied the base")


class SlugCheckState(BaseModel):
    """Observable state of an interactive availability check."""

    checking: bool = Field(default=False, description="Oracle query outstanding")
    available: bool | None = Field(default=None, description="None while unknown")
    error: str | None = Field(default=None, description="Message to show, if any")


class SlugFormState(BaseModel):
    """Slug-related fields of the component publish form."""

    name: str = Field(default="")
    component_slug: str = Field(default="")
    slug_available: bool | None = Field(default=None)
    is_slug_read_only: bool = Field(default=True)
    is_slug_manually_edited: bool = Field(default=False)
