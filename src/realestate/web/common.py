"""
Helpers shared by the server-rendered pages.

Pages are plain Jinja2 templates rendered with the same services the REST
API uses. Form posts redirect back to the list page (303); the in-page
edit and delete actions are same-origin AJAX calls that get an empty 200.
"""

from datetime import date
from pathlib import Path
from typing import Any, Sequence, TypeVar

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, ValidationError

from realestate.exceptions import DataValidationError, EntityNotFoundError
from realestate.exceptions.handler import GENERAL_FIELD
from realestate.services.csv_export import CSV_MEDIA_TYPE, Column, CsvExportService, format_number, report_filename
from realestate.validators.text import blank_to_none

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)
templates.env.filters["money"] = format_number

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def render(request: Request, template: str, page_title: str, **context: Any):
    return templates.TemplateResponse(request, template, {"page_title": page_title, **context})


def has_any(*values: Any) -> bool:
    """True when at least one search parameter was supplied."""
    return any(value is not None for value in values)


async def form_payload(request: Request, schema: type[SchemaT]) -> SchemaT:
    """
    Parse a submitted HTML form into `schema`.

    Empty inputs count as absent, so the service reports missing required
    fields itself. Values of the wrong type (a letter in a number input)
    become a `DataValidationError` keyed by the form field name.
    """
    form = await request.form()
    data = {key: blank_to_none(value) for key, value in form.items()}
    data = {key: value for key, value in data.items() if value is not None}
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error.get("loc", ())) or GENERAL_FIELD
            errors.setdefault(field, error.get("msg", "invalid"))
        raise DataValidationError(errors) from exc


def redirect_to(path: str) -> RedirectResponse:
    return RedirectResponse(url=path, status_code=303)


def done_or_404(done: bool, entity_type: str, entity_id: int) -> Response:
    if not done:
        raise EntityNotFoundError(entity_type, entity_id)
    return Response(status_code=200)


def csv_response(
    exporter: CsvExportService,
    rows: Sequence[Any],
    columns: Sequence[Column],
    entity: str,
    today: date | None = None,
) -> Response:
    filename = report_filename(entity, today)
    return Response(
        content=exporter.export(rows, columns),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
