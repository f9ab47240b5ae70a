"""
Geographic reference hierarchy.

Country 1-N Region 1-N City 1-N District, and City 1-N Street. Districts and
streets both hang off a city; a street is not tied to a district.
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from realestate.database.base import Base


class Country(Base):
    __tablename__ = "countries"

    id: Mapped[int] = mapped_column("id_country", Integer, primary_key=True, autoincrement=True)
    country_name: Mapped[str] = mapped_column(String(100), nullable=False)


class Region(Base):
    __tablename__ = "regions"

    id: Mapped[int] = mapped_column("id_region", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    # official region code, e.g. "77"
    code: Mapped[str | None] = mapped_column(String(10), index=True)
    id_country: Mapped[int] = mapped_column(ForeignKey("countries.id_country"), nullable=False, index=True)


class City(Base):
    __tablename__ = "cities"

    id: Mapped[int] = mapped_column("id_city", Integer, primary_key=True, autoincrement=True)
    city_name: Mapped[str] = mapped_column(String(150), nullable=False)
    id_region: Mapped[int] = mapped_column(ForeignKey("regions.id_region"), nullable=False, index=True)


class District(Base):
    __tablename__ = "districts"

    id: Mapped[int] = mapped_column("id_district", Integer, primary_key=True, autoincrement=True)
    district_name: Mapped[str] = mapped_column(String(150), nullable=False)
    id_city: Mapped[int] = mapped_column(ForeignKey("cities.id_city"), nullable=False, index=True)


class Street(Base):
    __tablename__ = "streets"

    id: Mapped[int] = mapped_column("id_street", Integer, primary_key=True, autoincrement=True)
    street_name: Mapped[str] = mapped_column(String(200), nullable=False)
    id_city: Mapped[int] = mapped_column(ForeignKey("cities.id_city"), nullable=False, index=True)
