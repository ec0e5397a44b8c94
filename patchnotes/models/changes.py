"""
Change record models for Patchnotes.

These are the published output structures. Field aliases match the JSON
shape of the historical archive.
"""

from datetime import date as Date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Published in English whatever the host locale
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class ChangeRecord(BaseModel):
    """
    One discrete change statement with its date and category path.
    """

    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = Field(
        default=None,
        alias="URL",
        description="Base URL of the document the change was found in"
    )

    date: Date = Field(
        ...,
        alias="Date",
        description="Calendar date the change applies to"
    )

    weekday: str = Field(
        ...,
        alias="Weekday",
        description="English weekday name derived from the date"
    )

    tags: List[str] = Field(
        default_factory=list,
        alias="Tags",
        description="Category path in document order; duplicates permitted"
    )

    text: str = Field(
        ...,
        alias="Text",
        description="The whitespace-normalized change statement"
    )

    @classmethod
    def create(cls, date: Date, tags: List[str], text: str,
               url: Optional[str] = None) -> "ChangeRecord":
        """Build a record, deriving the weekday from the date."""
        return cls(url=url, date=date, weekday=WEEKDAYS[date.weekday()],
                   tags=list(tags), text=text)


class ChangeLog(BaseModel):
    """The document written for one run: every change record in order."""

    model_config = ConfigDict(populate_by_name=True)

    changes: List[ChangeRecord] = Field(
        default_factory=list,
        alias="Changes"
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)
