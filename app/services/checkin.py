"""
CheckInService - Registro de visitas de socios al gimnasio.
"""

from datetime import datetime
from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.dates import get_current_time_in_gym_timezone
from app.core.exceptions import NotFoundError
from app.models.checkin import CheckIn
from app.repositories.checkin import check_in_repository
from app.repositories.member import member_repository
from app.schemas.checkin import CheckInUpdate

logger = logging.getLogger(__name__)


class CheckInService:

    async def list_check_ins(self, db: AsyncSession) -> List[CheckIn]:
        """Todos los check-ins, del más reciente al más antiguo."""
        return await check_in_repository.get_all(db)

    async def list_member_check_ins(self, db: AsyncSession, member_id: str) -> List[CheckIn]:
        return await check_in_repository.get_by_member(db, member_id)

    async def create_check_in(
        self,
        db: AsyncSession,
        member_id: str,
        now: Optional[datetime] = None
    ) -> CheckIn:
        """
        Registrar la entrada de un socio.

        Args:
            db: Sesión async de base de datos
            member_id: ID del socio
            now: Momento del check-in (default: ahora en la zona del gimnasio)

        Raises:
            NotFoundError: Si el socio no existe

        Note:
            date, time y timestamp los asigna el servidor; timestamp es epoch
            en milisegundos y se usa para ordenar.
        """
        if not await member_repository.exists(db, member_id):
            raise NotFoundError("Socio", member_id)

        now = now or get_current_time_in_gym_timezone(get_settings().GYM_TIMEZONE)
        check_in = await check_in_repository.create(
            db,
            obj_in={
                "member_id": member_id,
                "date": now.date(),
                "time": now.strftime("%H:%M:%S"),
                "timestamp": int(now.timestamp() * 1000),
            }
        )
        await db.commit()
        logger.info(f"Check-in {check_in.id} del socio {member_id} a las {check_in.time}")
        return check_in

    async def update_check_in(self, db: AsyncSession, check_in_id: str, check_in_in: CheckInUpdate) -> CheckIn:
        check_in = await check_in_repository.get(db, id=check_in_id)
        if not check_in:
            raise NotFoundError("Check-in", check_in_id)
        check_in = await check_in_repository.update(
            db, db_obj=check_in, obj_in=check_in_in.model_dump(exclude_unset=True)
        )
        await db.commit()
        return check_in

    async def delete_check_in(self, db: AsyncSession, check_in_id: str) -> str:
        check_in = await check_in_repository.remove(db, id=check_in_id)
        if not check_in:
            raise NotFoundError("Check-in", check_in_id)
        await db.commit()
        return check_in_id


check_in_service = CheckInService()
