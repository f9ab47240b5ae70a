"""
CSV report export.

Reports open cleanly in a Russian-locale Excel: UTF-8 with a byte-order mark,
`;` as the delimiter, every field quoted, money as `1 234 567,5`.

A report is a list of `Column(title, getter)`; `export(rows, columns)` writes
the header row of titles and one line per row.
"""

import csv
import io
import logging
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Any, Callable, Iterable, Sequence

logger = logging.getLogger(__name__)

BOM = "\ufeff"
DELIMITER = ";"
REPORT_DATE_FORMAT = "%d.%m.%Y"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def format_number(value: Decimal | int | float | None) -> str:
    """
    Russian-locale number, pattern `#,##0.##`: space thousands separator,
    comma decimal separator, at most two fraction digits, no trailing zeros.

        format_number(Decimal("1234567.50")) == "1 234 567,5"
    """
    if value is None:
        return ""
    number = Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)
    text = f"{number:,.2f}".rstrip("0").rstrip(".")
    return text.replace(",", " ").replace(".", ",")


def format_date(value: date | None) -> str:
    return value.strftime(REPORT_DATE_FORMAT) if value is not None else ""


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Decimal):
        return format_number(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class Column:
    title: str
    getter: Callable[[Any], Any]

    def render(self, row: Any) -> str:
        return _text(self.getter(row))


def attr(name: str, formatter: Callable[[Any], str] | None = None) -> Callable[[Any], Any]:
    def get(row: Any) -> Any:
        value = getattr(row, name)
        return formatter(value) if formatter else value
    return get


def report_filename(entity: str, today: date | None = None) -> str:
    return f"{entity}_report_{(today or date.today()).isoformat()}.csv"


# ---------------------------------------------------------------- report layouts

REALTOR_COLUMNS = (
    Column("ID", attr("id")),
    Column("Имя", attr("first_name")),
    Column("Фамилия", attr("last_name")),
    Column("Отчество", attr("middle_name")),
    Column("Телефон", attr("phone")),
    Column("Email", attr("email")),
    Column("Опыт работы (лет)", attr("experience_years")),
)

CLIENT_COLUMNS = REALTOR_COLUMNS[:-1]

PROPERTY_COLUMNS = (
    Column("ID", attr("id_property")),
    Column("ПЛОЩАДЬ, М2", attr("area")),
    Column("СТОИМОСТЬ, РУБ.", attr("cost")),
    Column("ОПИСАНИЕ", attr("description")),
    Column("ТИП НЕДВИЖИМОСТИ", attr("property_type_name")),
    Column("ПОЧТОВЫЙ ИНДЕКС", attr("postal_code")),
    Column("НОМЕР ДОМА", attr("house_number")),
    Column("ЛИТЕРА ДОМА", attr("house_letter")),
    Column("НОМЕР КОРПУСА", attr("building_number")),
    Column("НОМЕР КВАРТИРЫ", attr("apartment_number")),
    Column("УЛИЦА", attr("street_name")),
    Column("РАЙОН", attr("district_name")),
    Column("ГОРОД", attr("city_name")),
    Column("КОД РЕГИОНА", attr("region_code")),
    Column("РЕГИОН", attr("region_name")),
    Column("СТРАНА", attr("country_name")),
)

DEAL_COLUMNS = (
    Column("ID СДЕЛКИ", attr("id_deal")),
    Column("ДАТА СДЕЛКИ", attr("deal_date", format_date)),
    Column("СТОИМОСТЬ СДЕЛКИ, РУБ.", attr("deal_cost")),
    Column("АДРЕС НЕДВИЖИМОСТИ", attr("property_address")),
    Column("ФИО РИЕЛТОРА", attr("realtor_name")),
    Column("ФИО КЛИЕНТА", attr("client_name")),
    Column("ТИП СДЕЛКИ", attr("deal_type_name")),
)

PAYMENT_COLUMNS = (
    Column("ID ПЛАТЕЖА", attr("id_payment")),
    Column("ДАТА ПЛАТЕЖА", attr("payment_date", format_date)),
    Column("СУММА ПЛАТЕЖА, РУБ.", attr("amount")),
    Column("ФИО КЛИЕНТА", attr("client_name")),
    Column("ТИП СДЕЛКИ", attr("deal_type_name")),
    Column("СТОИМОСТЬ СДЕЛКИ, РУБ.", attr("deal_cost")),
)


class CsvExportService:
    """Stateless; safe to share."""

    def export(self, rows: Iterable[Any], columns: Sequence[Column]) -> bytes:
        buffer = io.StringIO()
        buffer.write(BOM)
        writer = csv.writer(buffer, delimiter=DELIMITER, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow([column.title for column in columns])

        count = 0
        for row in rows:
            writer.writerow([column.render(row) for column in columns])
            count += 1

        logger.info("csv.export", extra={"rows": count, "columns": len(columns)})
        return buffer.getvalue().encode("utf-8")

    format_number = staticmethod(format_number)
