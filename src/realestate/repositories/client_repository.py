"""Client data access."""

from realestate.models import Client

from .fields import FieldRegistry
from .person_repository import PersonRepository, person_fields


class ClientRepository(PersonRepository[Client]):
    model = Client
    default_order = (Client.last_name, Client.first_name)
    update_fields = FieldRegistry(person_fields(Client))

    async def search(
        self,
        last_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> list[Client]:
        """
        Clients matching every given criterion: last name is a case-insensitive
        partial match, email and phone are exact. No criteria returns everyone.
        """
        return await self.find_where(self.search_statement(last_name, email, phone))
