from datetime import date
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.checkin import CheckIn
from app.repositories.async_base import AsyncBaseRepository
from app.schemas.checkin import CheckInCreate, CheckInUpdate


class CheckInRepository(AsyncBaseRepository[CheckIn, CheckInCreate, CheckInUpdate]):

    async def get_all(self, db: AsyncSession) -> List[CheckIn]:
        return await self.get_multi(db, order_by="timestamp", descending=True)

    async def get_by_member(self, db: AsyncSession, member_id: str) -> List[CheckIn]:
        return await self.get_multi(
            db,
            filters={"member_id": member_id},
            order_by="timestamp",
            descending=True
        )

    async def get_between(self, db: AsyncSession, start: date, end: date) -> List[CheckIn]:
        return await self.get_multi(
            db,
            range_field="date",
            range_start=start,
            range_end=end,
            order_by="timestamp",
            descending=True
        )


check_in_repository = CheckInRepository(CheckIn)
