"""Computer Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ComputerWrite.name: 1-255 chars, stripped, non-empty
    - ComputerWrite.company_id: positive and within the id column range when present
    - introduced/discontinued are ISO dates; their order is not checked
    - ComputerWrite never carries an id (the path or the store supplies it)
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from computer_db.core.enforce_requests import MAX_ID
from computer_db.core.records import Computer


class ComputerWrite(BaseModel):
    """Body of POST /computers and PUT /computers/{id}."""
    name: str = Field(min_length=1, max_length=255)
    introduced: date | None = None
    discontinued: date | None = None
    company_id: int | None = Field(None, gt=0, le=MAX_ID)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    def to_record(self, computer_id: int | None = None) -> Computer:
        return Computer(
            id=computer_id,
            name=self.name,
            introduced=self.introduced,
            discontinued=self.discontinued,
            company_id=self.company_id,
        )


class ComputerResponse(BaseModel):
    """Computer as shown on the dashboard."""
    id: int
    name: str
    introduced: date | None = None
    discontinued: date | None = None
    company_id: int | None = None
    company_name: str | None = None

    @classmethod
    def from_record(cls, computer: Computer) -> "ComputerResponse":
        return cls(
            id=computer.id,
            name=computer.name,
            introduced=computer.introduced,
            discontinued=computer.discontinued,
            company_id=computer.company_id,
            company_name=computer.company_name,
        )


class ComputerSelection(BaseModel):
    """Body of POST /computers/delete — the dashboard's multi-select."""
    ids: list[int] = Field(default_factory=list, max_length=1000)
