"""
SQL display expressions shared by the joined read queries.

String `+` compiles to `||` on both PostgreSQL and SQLite. `x || NULL` is NULL,
so `coalesce(sep + optional, '')` appends an optional part only when present.
"""

from sqlalchemy import func, literal


def _optional_suffix(separator: str, column):
    return func.coalesce(literal(separator) + column, "")


def full_name(last_name, first_name, middle_name):
    """'Ivanov Ivan Ivanovich', or 'Ivanov Ivan' when there is no middle name."""
    return last_name + " " + first_name + _optional_suffix(" ", middle_name)


def short_address(street_name, house_number, apartment_number):
    """'Lenina, 10-25', or 'Lenina, 10' when there is no apartment."""
    return street_name + ", " + house_number + _optional_suffix("-", apartment_number)


def city_address(city_name, street_name, house_number, apartment_number):
    """'Moscow, Lenina, 10-25'."""
    return city_name + ", " + short_address(street_name, house_number, apartment_number)


def truncated(column, length: int):
    return func.substr(column, 1, length)
