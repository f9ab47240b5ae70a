from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from realestate.database.base import Base


class Client(Base):
    """An agency client (buyer, seller, tenant or landlord)."""

    __tablename__ = "clients"

    id: Mapped[int] = mapped_column("id_client", Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    middle_name: Mapped[str | None] = mapped_column(String(100))
    phone: Mapped[str | None] = mapped_column(String(20), index=True)
    email: Mapped[str | None] = mapped_column(String(100), index=True)

    def __repr__(self) -> str:
        return f"<Client id={self.id} last_name={self.last_name!r}>"
