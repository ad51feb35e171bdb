"""SQLAlchemy Client Repository Implementation"""

from typing import List, Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from repair_shop.app.repositories.client_repository import ClientRepository
from repair_shop.domain.client import Client


class SqlAlchemyClientRepository(ClientRepository):
    """
    SQLAlchemy implementation of ClientRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, client: Client) -> Client:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def get_by_id(self, client_id: str) -> Optional[Client]:
        statement = select(Client).where(Client.id == client_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, client_ids: List[str]) -> List[Client]:
        if not client_ids:
            return []
        statement = select(Client).where(Client.id.in_(client_ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_all(self, ascending: bool = True) -> List[Client]:
        order = Client.name.asc() if ascending else Client.name.desc()
        statement = select(Client).order_by(order)
        result = await self.session.execute(statement)
        return list(result.scalars().all())
