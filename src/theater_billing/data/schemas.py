"""
Input schemas for plays and invoices.

Validates basic shape only (non-blank strings, non-negative audience).
Play types are checked by the engine when a statement is computed.
"""
from pydantic import BaseModel, ConfigDict, Field


class PlayRecord(BaseModel):
    """A play entry in plays.json / plays.csv."""
    play_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)


class PerformanceRecord(BaseModel):
    """A performance entry on an invoice."""
    model_config = ConfigDict(populate_by_name=True)

    play_id: str = Field(alias="playID", min_length=1)
    audience: int = Field(ge=0, strict=True)  # no bool or numeric-string coercion


class InvoiceRecord(BaseModel):
    """An invoice entry in invoices.json."""
    customer: str = Field(min_length=1)
    performances: list[PerformanceRecord] = Field(default_factory=list)
