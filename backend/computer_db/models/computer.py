"""Computer ORM — persists one inventory record.

Invariants:
    - id assigned by the database on insert
    - name is non-nullable
    - company_id is nullable; when set it must reference an existing company
      (FK enforced by the database, also checked by the service)
    - introduced / discontinued are plain dates with no ordering constraint
"""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from computer_db.db.base import Base


class Computer(Base):
    """Computer entity."""
    __tablename__ = "computer"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    introduced: Mapped[date | None] = mapped_column(Date, nullable=True)
    discontinued: Mapped[date | None] = mapped_column(Date, nullable=True)
    company_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("company.id"), nullable=True, index=True,
    )

    company: Mapped["Company"] = relationship(
        "Company", back_populates="computers",
    )
