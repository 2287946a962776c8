"""
API Request Models for the content endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.models.domain import Stance


class GenerateContentRequest(BaseModel):
    """
    Request model for POST /api/generate.

    Both fields are required and must be non-blank; stance is accepted in
    any letter case.
    """

    url: Optional[str] = Field(
        None,
        description="News article URL",
        examples=["https://example.com/news/article"],
    )
    stance: Optional[str] = Field(
        None,
        description="Political stance (PRO or ANTI)",
        examples=["PRO"],
    )

    @model_validator(mode="after")
    def require_url_and_stance(self) -> "GenerateContentRequest":
        """Reject missing URLs and unknown stances."""
        if not self.url or not self.url.strip():
            raise ValueError("url is required")
        if not self.stance or not self.stance.strip():
            raise ValueError("stance is required")
        # Raises ValueError for anything other than PRO/ANTI
        Stance.parse(self.stance)
        self.url = self.url.strip()
        return self

    @property
    def parsed_stance(self) -> Stance:
        """The validated stance as an enum member."""
        return Stance.parse(self.stance or "")

    model_config = {
        "json_schema_extra": {
            "example": {
                "url": "https://example.com/news/article",
                "stance": "PRO",
            }
        }
    }
