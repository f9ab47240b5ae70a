from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Integer, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from realestate.database.base import Base


class Deal(Base):
    """A closed deal: one property, one realtor, one client, one deal type."""

    __tablename__ = "deals"

    id: Mapped[int] = mapped_column("id_deal", Integer, primary_key=True, autoincrement=True)
    deal_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    deal_cost: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)

    id_property: Mapped[int] = mapped_column(ForeignKey("properties.id_property"), nullable=False, index=True)
    id_realtor: Mapped[int] = mapped_column(ForeignKey("realtors.id_realtor"), nullable=False, index=True)
    id_client: Mapped[int] = mapped_column(ForeignKey("clients.id_client"), nullable=False, index=True)
    id_deal_type: Mapped[int] = mapped_column(ForeignKey("deal_types.id_deal_type"), nullable=False)

    def __repr__(self) -> str:
        return f"<Deal id={self.id} date={self.deal_date}>"


class Payment(Base):
    """A payment made against a deal."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column("id_payment", Integer, primary_key=True, autoincrement=True)
    payment_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    id_deal: Mapped[int] = mapped_column(ForeignKey("deals.id_deal"), nullable=False, index=True)
