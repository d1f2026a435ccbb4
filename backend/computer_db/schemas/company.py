"""Company Schemas — public-facing company data."""

from pydantic import BaseModel

from computer_db.core.records import Company


class CompanyResponse(BaseModel):
    id: int
    name: str

    @classmethod
    def from_record(cls, company: Company) -> "CompanyResponse":
        return cls(id=company.id, name=company.name)
