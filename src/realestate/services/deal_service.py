"""Deal business logic."""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Mapping

from realestate.models import Deal
from realestate.repositories import (
    ClientRepository,
    DealRepository,
    DealTypeRepository,
    PropertyRepository,
    RealtorRepository,
)
from realestate.schemas.entities import DealCreate
from realestate.schemas.views import DealReportRow, DealTableRow, DealWithDetails

from .base_service import BaseService
from .validation import (
    check_date_range,
    check_not_future,
    check_value_range,
    coerce_fields,
    raise_if_errors,
    require_updates,
)

logger = logging.getLogger(__name__)


class DealService(BaseService[DealRepository]):
    entity_type = "Deal"
    repository_cls = DealRepository

    def __init__(self, db):
        super().__init__(db)
        self.properties = PropertyRepository(db)
        self.realtors = RealtorRepository(db)
        self.clients = ClientRepository(db)
        self.deal_types = DealTypeRepository(db)

    async def validate(self, data: Mapping[str, Any]) -> dict[str, Any]:
        errors: dict[str, str] = {}
        values = coerce_fields(self.repo.update_fields, data, errors)
        check_not_future(errors, values, "dealDate")
        await self.check_related(errors, [
            ("idProperty", self.properties, values.get("idProperty")),
            ("idRealtor", self.realtors, values.get("idRealtor")),
            ("idClient", self.clients, values.get("idClient")),
            ("idDealType", self.deal_types, values.get("idDealType")),
        ])
        raise_if_errors(errors)
        return values

    # =================================================================================================================
    # Writes
    # =================================================================================================================

    async def save(self, data: DealCreate) -> int:
        async with self.errors("INSERT", description="сохранение сделки"):
            values = await self.validate(data.model_dump(by_alias=True))
            entity = await self.repo.create(**self.repo.update_fields.to_columns(values))
            await self.commit("INSERT", entity.id)

        logger.info("service.created", extra={"entity": self.entity_type, "id": entity.id})
        return entity.id

    async def update(self, deal_id: int, updates: Mapping[str, Any] | None) -> bool:
        async with self.errors("UPDATE", deal_id, "обновление сделки"):
            require_updates(updates)
            await self.repo.find_by_id(deal_id)
            values = await self.validate(updates)
            updated = await self.repo.update(deal_id, values)
            if updated:
                await self.commit("UPDATE", deal_id)
            return updated

    # =================================================================================================================
    # Reads
    # =================================================================================================================

    async def find_by_date(self, deal_date: date) -> list[Deal]:
        async with self.errors("SELECT", description="поиск сделок по дате"):
            return await self.repo.find_by_date(deal_date)

    async def find_by_date_range(self, start: date, end: date) -> list[Deal]:
        async with self.errors("SELECT", description="поиск сделок по периоду"):
            check_date_range(start, end)
            return await self.repo.find_by_date_range(start, end)

    async def find_by_realtor_id(self, realtor_id: int) -> list[Deal]:
        async with self.errors("SELECT"):
            return await self.repo.find_by_realtor_id(realtor_id)

    async def find_by_client_id(self, client_id: int) -> list[Deal]:
        async with self.errors("SELECT"):
            return await self.repo.find_by_client_id(client_id)

    async def find_by_property_id(self, property_id: int) -> list[Deal]:
        async with self.errors("SELECT"):
            return await self.repo.find_by_property_id(property_id)

    async def find_by_deal_type_id(self, deal_type_id: int) -> list[Deal]:
        async with self.errors("SELECT"):
            return await self.repo.find_by_deal_type_id(deal_type_id)

    async def find_by_cost_range(self, min_cost: Decimal, max_cost: Decimal) -> list[Deal]:
        async with self.errors("SELECT", description="поиск сделок по стоимости"):
            check_value_range(min_cost, max_cost, "minCost", "maxCost")
            return await self.repo.find_by_cost_range(min_cost, max_cost)

    async def total_amount(self) -> Decimal:
        async with self.errors("SELECT", description="общая сумма сделок"):
            return await self.repo.total_amount()

    async def find_all_with_details(self) -> list[DealWithDetails]:
        async with self.errors("SELECT"):
            return await self.repo.find_all_with_details()

    async def find_by_id_with_details(self, deal_id: int) -> DealWithDetails:
        async with self.errors("SELECT", deal_id):
            return await self.repo.find_by_id_with_details(deal_id)

    async def find_by_date_with_details(self, deal_date: date) -> list[DealWithDetails]:
        async with self.errors("SELECT"):
            return await self.repo.find_by_date_with_details(deal_date)

    async def find_by_date_range_with_details(self, start: date, end: date) -> list[DealWithDetails]:
        async with self.errors("SELECT"):
            check_date_range(start, end)
            return await self.repo.find_by_date_range_with_details(start, end)

    async def find_by_realtor_id_with_details(self, realtor_id: int) -> list[DealWithDetails]:
        async with self.errors("SELECT"):
            return await self.repo.find_by_realtor_id_with_details(realtor_id)

    async def find_by_client_id_with_details(self, client_id: int) -> list[DealWithDetails]:
        async with self.errors("SELECT"):
            return await self.repo.find_by_client_id_with_details(client_id)

    async def find_all_for_table(self) -> list[DealTableRow]:
        async with self.errors("SELECT"):
            return await self.repo.find_all_for_table()

    async def search(
        self,
        start: date | None = None,
        end: date | None = None,
        realtor_id: int | None = None,
        client_id: int | None = None,
        deal_type_id: int | None = None,
    ) -> list[DealTableRow]:
        async with self.errors("SELECT", description="поиск сделок"):
            check_date_range(start, end)
            return await self.repo.search(start, end, realtor_id, client_id, deal_type_id)

    async def find_all_for_report(self) -> list[DealReportRow]:
        async with self.errors("SELECT", description="отчет по сделкам"):
            return await self.repo.find_all_for_report()
