"""Payment business logic."""

import logging
from datetime import date
from typing import Any, Mapping

from realestate.models import Payment
from realestate.repositories import DealRepository, PaymentRepository
from realestate.schemas.entities import PaymentCreate
from realestate.schemas.views import PaymentReportRow, PaymentTableRow

from .base_service import BaseService
from .validation import check_date_range, coerce_fields, raise_if_errors, require_updates

logger = logging.getLogger(__name__)


class PaymentService(BaseService[PaymentRepository]):
    entity_type = "Payment"
    repository_cls = PaymentRepository

    def __init__(self, db):
        super().__init__(db)
        self.deals = DealRepository(db)

    async def validate(self, data: Mapping[str, Any]) -> dict[str, Any]:
        errors: dict[str, str] = {}
        values = coerce_fields(self.repo.update_fields, data, errors)
        await self.check_related(errors, [("idDeal", self.deals, values.get("idDeal"))])
        raise_if_errors(errors)
        return values

    async def save(self, data: PaymentCreate) -> int:
        async with self.errors("INSERT", description="сохранение платежа"):
            values = await self.validate(data.model_dump(by_alias=True))
            entity = await self.repo.create(**self.repo.update_fields.to_columns(values))
            await self.commit("INSERT", entity.id)

        logger.info("service.created", extra={"entity": self.entity_type, "id": entity.id})
        return entity.id

    async def update(self, payment_id: int, updates: Mapping[str, Any] | None) -> bool:
        async with self.errors("UPDATE", payment_id, "обновление платежа"):
            require_updates(updates)
            await self.repo.find_by_id(payment_id)
            values = await self.validate(updates)
            updated = await self.repo.update(payment_id, values)
            if updated:
                await self.commit("UPDATE", payment_id)
            return updated

    async def find_by_deal_id(self, deal_id: int) -> list[Payment]:
        async with self.errors("SELECT", description="платежи по сделке"):
            return await self.repo.find_by_deal_id(deal_id)

    async def find_all_with_details(self) -> list[PaymentTableRow]:
        async with self.errors("SELECT"):
            return await self.repo.find_all_with_details()

    async def search(
        self,
        deal_id: int | None = None,
        start: date | None = None,
        end: date | None = None,
    ) -> list[PaymentTableRow]:
        async with self.errors("SELECT", description="поиск платежей"):
            check_date_range(start, end)
            return await self.repo.search(deal_id, start, end)

    async def find_all_for_report(self) -> list[PaymentReportRow]:
        async with self.errors("SELECT", description="отчет по платежам"):
            return await self.repo.find_all_for_report()
