"""Team models."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Team(BaseModel):
    """Static reference data for one team."""

    abbreviation: str = Field(..., min_length=1, description="Team abbreviation")
    name: str = Field(..., description="Team name")
    city: str | None = Field(None, description="City")
    state: str | None = Field(None, description="State")
    conference: str | None = Field(None, description="Conference")
    division: str | None = Field(None, description="Division")
    logo_url: str | None = Field(None, description="Logo URL")
    primary_color: str | None = Field(None, description="Primary color (hex)")
    secondary_color: str | None = Field(None, description="Secondary color (hex)")
    defunct: bool = Field(default=False, description="Team no longer plays")

    @field_validator("defunct", mode="before")
    @classmethod
    def blank_defunct(cls, v: Any) -> Any:
        # A missing flag in exported tables means the team is still active.
        if v is None or (isinstance(v, str) and not v.strip()):
            return False
        return v

    class Config:
        """Pydantic configuration."""

        frozen = True
        from_attributes = True
