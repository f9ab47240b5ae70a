from sqlalchemy import String, Integer, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from realestate.database.base import Base


class Realtor(Base):
    """
    An agency realtor.

    Email and phone are unique among realtors. The service checks this before
    writing; the unique constraints are the last line for concurrent writers.
    """

    __tablename__ = "realtors"
    __table_args__ = (
        CheckConstraint("experience_years BETWEEN 0 AND 100", name="experience_range"),
    )

    id: Mapped[int] = mapped_column("id_realtor", Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    middle_name: Mapped[str | None] = mapped_column(String(100))
    phone: Mapped[str | None] = mapped_column(String(20), unique=True)
    email: Mapped[str | None] = mapped_column(String(100), unique=True)
    experience_years: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Realtor id={self.id} last_name={self.last_name!r}>"
