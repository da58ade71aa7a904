"""
Pydantic models for company records.

``CompanyBase`` holds the fields a client may send; ``CompanyCreate``
is the request body for new records and ``CompanyRead`` adds the
store‑assigned ``id`` and timestamps.  Field names are snake_case in
Python and camelCase on the wire (``logoIcon``, ``createdAt``,
``updatedAt``); both spellings are accepted on input.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_LOGO_ICON = "Briefcase"


def current_year() -> int:
    return date.today().year


class CompanyBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Acme"])
    ceo: str = Field(..., min_length=1, examples=["Jane Doe"])
    industry: str = Field(..., min_length=1, examples=["Technology"])
    location: str = Field(..., min_length=1, examples=["San Francisco"])
    employees: int = Field(0, ge=0, examples=[120])
    founded: int = Field(default_factory=current_year, examples=[2015])
    logo_icon: str = Field(DEFAULT_LOGO_ICON, alias="logoIcon", examples=["Cpu"])

    model_config = {
        "populate_by_name": True,
    }


class CompanyCreate(CompanyBase):
    """Schema for creating a company."""


class CompanyRead(CompanyBase):
    """Schema for reading a company from the API."""

    id: str
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class CompanyUpdate(BaseModel):
    """Schema for updating a company.

    All fields are optional; only provided fields will be updated.
    Provided text fields must still be non‑empty.
    """

    name: str | None = Field(None, min_length=1)
    ceo: str | None = Field(None, min_length=1)
    industry: str | None = Field(None, min_length=1)
    location: str | None = Field(None, min_length=1)
    employees: int | None = Field(None, ge=0)
    founded: int | None = None
    logo_icon: str | None = Field(None, alias="logoIcon")

    model_config = {
        "populate_by_name": True,
    }
