"""Base repository with shared Supabase client and table CRUD."""
from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel
from supabase._async.client import AsyncClient

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseRepository(Generic[ModelT]):
    """Base class for all repositories.

    Subclasses set `table` and `model`; rows come back as model instances.
    All methods use await with the async client.
    """

    table: ClassVar[str]
    model: ClassVar[type]

    def __init__(self, client: AsyncClient) -> None:
        self.client = client

    def _query(self):
        return self.client.table(self.table)

    def _to_model(self, row: dict) -> ModelT:
        return self.model(**row)

    async def list_all(self, order_by: Optional[str] = None, desc: bool = False) -> list[ModelT]:
        query = self._query().select("*")
        if order_by:
            query = query.order(order_by, desc=desc)
        result = await query.execute()
        return [self._to_model(row) for row in result.data or []]

    async def get_by_id(self, record_id: str) -> Optional[ModelT]:
        result = await self._query().select("*").eq("id", record_id).execute()
        return self._to_model(result.data[0]) if result.data else None

    async def create(self, data: dict[str, Any]) -> ModelT:
        result = await self._query().insert(data).execute()
        return self._to_model(result.data[0])

    async def update(self, record_id: str, data: dict[str, Any]) -> Optional[ModelT]:
        """Update a row; None when no row has that id."""
        result = await self._query().update(data).eq("id", record_id).execute()
        return self._to_model(result.data[0]) if result.data else None

    async def delete(self, record_id: str) -> bool:
        """Delete a row; False when no row has that id."""
        result = await self._query().delete().eq("id", record_id).execute()
        return bool(result.data)

    async def count(self) -> int:
        result = await self._query().select("id", count="exact").execute()
        return result.count or 0
