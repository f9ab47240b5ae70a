"""Partial-update field registry: which keys are touched and how values convert."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from realestate.exceptions import FieldCoercionError
from realestate.models import Deal, Realtor
from realestate.repositories.fields import (
    FieldRegistry,
    FieldSpec,
    decimal,
    int_in_range,
    integer,
    iso_date,
    optional_text,
    positive_decimal,
    required_text,
)
from realestate.repositories.realtor_repository import RealtorRepository


@pytest.fixture
def registry() -> FieldRegistry:
    return FieldRegistry({
        "firstName": FieldSpec(Realtor.first_name, required_text),
        "middleName": FieldSpec(Realtor.middle_name, optional_text),
        "experienceYears": FieldSpec(Realtor.experience_years, int_in_range(0, 100)),
    })


class TestFieldRegistry:

    def test_only_present_keys_are_prepared(self, registry):
        """
        Behavior:
            - A map with one recognized key produces exactly that column.

        Importance:
            - Partial updates must never touch columns the caller did not send.
        """
        assert registry.prepare({"firstName": "Анна"}) == {"first_name": "Анна"}

    @pytest.mark.parametrize("updates", [None, {}])
    def test_empty_or_absent_map_prepares_nothing(self, registry, updates):
        assert registry.prepare(updates) == {}

    def test_unknown_keys_are_ignored(self, registry):
        assert registry.prepare({"salary": 100, "hackerField": "x"}) == {}
        assert registry.prepare({"salary": 100, "middleName": "Ивановна"}) == {"middle_name": "Ивановна"}

    def test_explicit_null_clears_optional_column(self, registry):
        assert registry.prepare({"middleName": None}) == {"middle_name": None}
        assert registry.prepare({"middleName": "   "}) == {"middle_name": None}

    def test_all_conversion_failures_are_reported_together(self, registry):
        """
        Behavior:
            - Two bad values raise one FieldCoercionError naming both fields.

        Importance:
            - The user fixes every problem in one round trip.
        """
        with pytest.raises(FieldCoercionError) as exc_info:
            registry.prepare({"firstName": "", "experienceYears": 150, "middleName": "ok"})

        assert set(exc_info.value.field_errors) == {"firstName", "experienceYears"}

    def test_coerce_returns_values_by_wire_name(self, registry):
        values, errors = registry.coerce({"experienceYears": "7", "firstName": " Олег "})

        assert errors == {}
        assert values == {"experienceYears": 7, "firstName": "Олег"}
        assert registry.to_columns(values) == {"experience_years": 7, "first_name": "Олег"}

    def test_coercion_is_idempotent(self):
        """Services coerce for validation and the repository prepares the same map again."""
        fields = RealtorRepository.update_fields
        values, errors = fields.coerce({"experienceYears": "12", "email": " a@b.ru "})

        assert errors == {}
        assert fields.coerce(values) == (values, {})

    def test_membership_and_columns(self, registry):
        assert "firstName" in registry
        assert "first_name" not in registry
        assert list(registry) == ["firstName", "middleName", "experienceYears"]
        assert registry.column_for("experienceYears") is Realtor.experience_years


class TestCoercers:

    def test_required_text(self):
        assert required_text("  Иван ") == "Иван"
        with pytest.raises(ValueError):
            required_text("  ")
        with pytest.raises(ValueError):
            required_text(None)

    def test_optional_text_converts_non_strings(self):
        assert optional_text(25) == "25"
        assert optional_text("") is None

    @pytest.mark.parametrize("raw, expected", [(5, 5), ("5", 5), (" 12 ", 12)])
    def test_integer_accepts_numbers_and_numeric_strings(self, raw, expected):
        assert integer(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "1.5", True, None, ""])
    def test_integer_rejects(self, raw):
        with pytest.raises(ValueError):
            integer(raw)

    def test_int_in_range_bounds_are_inclusive(self):
        check = int_in_range(0, 100)
        assert check(0) == 0
        assert check(100) == 100
        with pytest.raises(ValueError):
            check(-1)
        with pytest.raises(ValueError):
            check(101)

    def test_decimal_accepts_russian_notation(self):
        assert decimal("1 250 000,50") == Decimal("1250000.50")
        assert decimal(10.5) == Decimal("10.5")

    @pytest.mark.parametrize("raw", ["NaN", "Infinity", "дорого", False])
    def test_decimal_rejects_non_finite_and_garbage(self, raw):
        with pytest.raises(ValueError):
            decimal(raw)

    def test_positive_decimal(self):
        assert positive_decimal("0.01") == Decimal("0.01")
        with pytest.raises(ValueError):
            positive_decimal("0")
        with pytest.raises(ValueError):
            positive_decimal(-5)

    def test_iso_date(self):
        assert iso_date("2024-03-15") == date(2024, 3, 15)
        assert iso_date(date(2024, 3, 15)) == date(2024, 3, 15)
        assert iso_date(datetime(2024, 3, 15, 12, 30)) == date(2024, 3, 15)
        with pytest.raises(ValueError):
            iso_date("15.03.2024")


def test_deal_registry_uses_wire_names():
    from realestate.repositories.deal_repository import DealRepository

    prepared = DealRepository.update_fields.prepare({"dealCost": "100", "idDealType": "2"})

    assert prepared == {"deal_cost": Decimal("100"), "id_deal_type": 2}
    assert DealRepository.update_fields.column_for("dealDate") is Deal.deal_date
