import csv
import io
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from realestate.services.csv_export import (
    BOM,
    CLIENT_COLUMNS,
    DEAL_COLUMNS,
    PAYMENT_COLUMNS,
    REALTOR_COLUMNS,
    CsvExportService,
    format_date,
    format_number,
    report_filename,
)


def _parse(payload: bytes) -> list[list[str]]:
    text = payload.decode("utf-8")
    assert text.startswith(BOM)
    return list(csv.reader(io.StringIO(text[len(BOM):]), delimiter=";"))


class TestFormatting:

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Decimal("1234567.50"), "1 234 567,5"),
            (Decimal("1000"), "1 000"),
            (Decimal("0.05"), "0,05"),
            (Decimal("999.999"), "1 000"),
            (12, "12"),
            (None, ""),
        ],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_format_date(self):
        assert format_date(date(2024, 3, 5)) == "05.03.2024"
        assert format_date(None) == ""

    def test_report_filename(self):
        assert report_filename("deals", date(2024, 12, 31)) == "deals_report_2024-12-31.csv"


class TestExport:

    def test_header_and_rows_are_quoted_and_semicolon_separated(self):
        """
        Behavior:
            - The file starts with a UTF-8 byte-order mark.
            - Every field is quoted and fields are separated by ";".

        Importance:
            - That is what a Russian-locale Excel opens without an import wizard.
        """
        realtor = SimpleNamespace(
            id=7,
            first_name="Петр",
            last_name="Петров",
            middle_name=None,
            phone="+79001234567",
            email="p@example.com",
            experience_years=5,
        )

        payload = CsvExportService().export([realtor], REALTOR_COLUMNS)

        lines = payload.decode("utf-8").lstrip(BOM).splitlines()
        assert lines[0].startswith('"ID";"Имя";"Фамилия"')
        assert lines[1] == '"7";"Петр";"Петров";"";"+79001234567";"p@example.com";"5"'

    def test_client_report_has_no_experience_column(self):
        assert [c.title for c in CLIENT_COLUMNS][-1] == "Email"

    def test_deal_report_formats_money_and_dates(self):
        row = SimpleNamespace(
            id_deal=3,
            deal_date=date(2024, 3, 15),
            deal_cost=Decimal("11500000.00"),
            property_address="Тверская, 10-25",
            realtor_name="Петров Петр",
            client_name="Иванов Иван",
            deal_type_name="Продажа",
        )

        header, line = _parse(CsvExportService().export([row], DEAL_COLUMNS))

        assert header[0] == "ID СДЕЛКИ"
        assert line == ["3", "15.03.2024", "11 500 000", "Тверская, 10-25", "Петров Петр", "Иванов Иван", "Продажа"]

    def test_values_containing_delimiter_and_quotes_survive(self):
        row = SimpleNamespace(
            id_payment=1,
            payment_date=date(2024, 1, 2),
            amount=Decimal("10.10"),
            client_name='ООО "Ромашка"; филиал',
            deal_type_name="Аренда",
            deal_cost=Decimal("20"),
        )

        _, line = _parse(CsvExportService().export([row], PAYMENT_COLUMNS))

        assert line[3] == 'ООО "Ромашка"; филиал'
        assert line[2] == "10,1"

    def test_empty_report_is_header_only(self):
        assert len(_parse(CsvExportService().export([], PAYMENT_COLUMNS))) == 1
