"""Lookup tables. Read-only from the application's point of view."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from realestate.database.base import Base


class PropertyType(Base):
    __tablename__ = "property_types"

    id: Mapped[int] = mapped_column("id_property_type", Integer, primary_key=True, autoincrement=True)
    property_type_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class DealType(Base):
    __tablename__ = "deal_types"

    id: Mapped[int] = mapped_column("id_deal_type", Integer, primary_key=True, autoincrement=True)
    deal_type_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
