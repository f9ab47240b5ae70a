from decimal import Decimal

from sqlalchemy import String, Integer, Numeric, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from realestate.database.base import Base


class Property(Base):
    """
    A property on the agency's books.

    The address is stored as references into the geography hierarchy plus the
    free-form house parts (number, letter, building, apartment).
    """

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column("id_property", Integer, primary_key=True, autoincrement=True)
    area: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    cost: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text)
    postal_code: Mapped[str | None] = mapped_column(String(10))
    house_number: Mapped[str] = mapped_column(String(10), nullable=False)
    house_letter: Mapped[str | None] = mapped_column(String(5))
    building_number: Mapped[str | None] = mapped_column(String(10))
    apartment_number: Mapped[str | None] = mapped_column(String(10))

    id_property_type: Mapped[int] = mapped_column(ForeignKey("property_types.id_property_type"), nullable=False, index=True)
    id_country: Mapped[int] = mapped_column(ForeignKey("countries.id_country"), nullable=False)
    id_region: Mapped[int] = mapped_column(ForeignKey("regions.id_region"), nullable=False)
    id_city: Mapped[int] = mapped_column(ForeignKey("cities.id_city"), nullable=False, index=True)
    id_district: Mapped[int] = mapped_column(ForeignKey("districts.id_district"), nullable=False)
    id_street: Mapped[int] = mapped_column(ForeignKey("streets.id_street"), nullable=False)

    def __repr__(self) -> str:
        return f"<Property id={self.id} cost={self.cost}>"
