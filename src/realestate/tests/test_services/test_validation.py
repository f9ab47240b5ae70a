from datetime import date

import pytest

from realestate.exceptions import DataValidationError
from realestate.repositories.realtor_repository import RealtorRepository
from realestate.services.validation import (
    check_date_range,
    check_email,
    check_not_future,
    check_phone,
    check_value_range,
    coerce_fields,
    raise_if_errors,
    require_updates,
)


class TestFieldRules:

    @pytest.mark.parametrize("email", ["agent@example.com", "a.b+c@mail.co.uk", "user_1@sub-domain.ru"])
    def test_valid_emails_pass(self, email):
        errors = {}
        check_email(errors, {"email": email})
        assert errors == {}

    @pytest.mark.parametrize("email", ["agent", "agent@", "agent@example", "agent@example.c", "a b@example.com"])
    def test_malformed_emails_are_reported(self, email):
        errors = {}
        check_email(errors, {"email": email})
        assert "email" in errors

    def test_blank_email_is_not_checked(self):
        errors = {}
        check_email(errors, {"email": None})
        assert errors == {}

    def test_phone_counts_digits_ignoring_punctuation(self):
        """
        Behavior:
            - "+7 (900) 123-45-67" has 11 digits and passes.
            - "123-45-67" has 7 digits and is rejected.
        """
        ok, short = {}, {}
        check_phone(ok, {"phone": "+7 (900) 123-45-67"})
        check_phone(short, {"phone": "123-45-67"})

        assert ok == {}
        assert "phone" in short

    def test_field_that_already_failed_keeps_its_first_reason(self):
        errors = {"email": "first"}
        check_email(errors, {"email": "broken"})
        assert errors == {"email": "first"}

    def test_future_date_is_rejected(self):
        errors = {}
        check_not_future(errors, {"dealDate": date(2024, 1, 2)}, "dealDate", today=date(2024, 1, 1))
        assert "dealDate" in errors

    def test_today_is_not_future(self):
        errors = {}
        check_not_future(errors, {"dealDate": date(2024, 1, 1)}, "dealDate", today=date(2024, 1, 1))
        assert errors == {}


class TestRanges:

    def test_start_after_end_is_a_validation_error(self):
        with pytest.raises(DataValidationError) as exc_info:
            check_date_range(date(2024, 2, 1), date(2024, 1, 1))
        assert "startDate" in exc_info.value.field_errors

    def test_open_or_equal_ranges_pass(self):
        check_date_range(None, date(2024, 1, 1))
        check_date_range(date(2024, 1, 1), date(2024, 1, 1))
        check_value_range(5, None)
        check_value_range(5, 5)

    def test_min_above_max_names_the_low_field(self):
        with pytest.raises(DataValidationError) as exc_info:
            check_value_range(10, 1, "minPrice", "maxPrice")
        assert list(exc_info.value.field_errors) == ["minPrice"]


class TestCollectAll:

    def test_every_failing_field_is_reported_together(self):
        """
        Behavior:
            - Coercion failures and rule failures land in one error map.

        Importance:
            - The form shows every problem after a single submit.
        """
        errors = {}
        values = coerce_fields(
            RealtorRepository.update_fields,
            {"firstName": " ", "experienceYears": "200", "email": "nope"},
            errors,
        )
        check_email(errors, values)

        with pytest.raises(DataValidationError) as exc_info:
            raise_if_errors(errors)

        assert set(exc_info.value.field_errors) == {"firstName", "experienceYears", "email"}

    def test_no_errors_does_not_raise(self):
        raise_if_errors({})

    @pytest.mark.parametrize("updates", [None, {}])
    def test_empty_update_map_is_rejected(self, updates):
        with pytest.raises(DataValidationError) as exc_info:
            require_updates(updates)
        assert "updates" in exc_info.value.field_errors
