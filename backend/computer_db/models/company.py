"""Company ORM — persists a computer manufacturer.

Invariants:
    - id is an autoincrement integer primary key
    - name is non-nullable

Design Decisions:
    - No ORM-level cascade to computers: the company service deletes dependents
      explicitly inside the same unit of work
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from computer_db.db.base import Base


class Company(Base):
    """Company entity — weak owner of computers."""
    __tablename__ = "company"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    computers: Mapped[list["Computer"]] = relationship(
        "Computer", back_populates="company", passive_deletes="all",
    )
