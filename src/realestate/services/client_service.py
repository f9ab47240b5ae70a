"""Client business logic."""

from realestate.models import Client
from realestate.repositories import ClientRepository

from .person_service import PersonService


class ClientService(PersonService[ClientRepository]):
    entity_type = "Client"
    repository_cls = ClientRepository
    related_deals_rule = "CLIENT_HAS_RELATED_DEALS"
    related_deals_message = "Нельзя удалить клиента с ID {id}, так как у него есть связанные сделки"

    async def has_deals(self, client_id: int) -> bool:
        return await self.deals.exists_for_client(client_id)

    async def search(
        self,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> list[Client]:
        async with self.errors("SELECT", description="поиск клиентов"):
            return await self.repo.search(last_name, email, phone)
