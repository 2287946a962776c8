"""
Core domain models for the Branch Content Engine.

A GenerationJob is one run of the generator: the source article, the
requested stance and one content pair per political branch. Jobs are
written once and never updated.

Models use snake_case attributes and camelCase JSON keys, which is the
format stored in Redis and served to the admin UI.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.constants.branches import REQUIRED_PAIR_COUNT


class Stance(str, Enum):
    """Political stance the generated content takes."""

    PRO = "PRO"
    ANTI = "ANTI"

    @classmethod
    def parse(cls, value: str) -> "Stance":
        """Parse a stance case-insensitively, raising ValueError if unknown."""
        return cls(value.upper())


class CamelModel(BaseModel):
    """Base model serialising attributes as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ContentPair(CamelModel):
    """A Facebook post and a tweet written for a single branch."""

    branch: str = Field(..., min_length=1, description="Branch the content targets")
    facebook_post: str = Field(..., min_length=1, description="Facebook post text")
    tweet: str = Field(..., min_length=1, description="Tweet text")


class GenerationJob(CamelModel):
    """
    A persisted content generation run.

    Always carries exactly one content pair per political branch.
    """

    id: str = Field(..., description="Job ID (e.g., gen_1718000000000_k3j9x2a)")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
    source_url: str = Field(..., description="News article URL the content is based on")
    stance: Stance = Field(..., description="Requested stance")
    content_pairs: List[ContentPair] = Field(..., description="One pair per branch")

    @field_validator("content_pairs")
    @classmethod
    def require_all_branches(cls, v: List[ContentPair]) -> List[ContentPair]:
        """Reject jobs that do not cover every branch."""
        if len(v) != REQUIRED_PAIR_COUNT:
            raise ValueError(
                f"expected {REQUIRED_PAIR_COUNT} content pairs, got {len(v)}"
            )
        return v

    @property
    def created_at_ms(self) -> int:
        """Creation time in epoch milliseconds, used as the history index score."""
        return int(self.created_at.timestamp() * 1000)

    def to_json(self) -> str:
        """Serialise to the camelCase JSON stored in Redis."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str) -> "GenerationJob":
        """Deserialise a job previously written with ``to_json``."""
        return cls.model_validate_json(data)
