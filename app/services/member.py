"""
MemberService - Alta, consulta, edición y baja de socios.
"""

from typing import List
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.member import Member
from app.repositories.member import member_repository
from app.schemas.member import MemberCreate, MemberUpdate

logger = logging.getLogger(__name__)


class MemberService:

    async def list_members(self, db: AsyncSession) -> List[Member]:
        return await member_repository.get_all(db)

    async def get_member(self, db: AsyncSession, member_id: str) -> Member:
        member = await member_repository.get(db, id=member_id)
        if not member:
            raise NotFoundError("Socio", member_id)
        return member

    async def create_member(self, db: AsyncSession, member_in: MemberCreate) -> Member:
        """
        Crear un socio.

        Note:
            last_payment_date y next_payment_date quedan en NULL hasta el
            primer pago registrado.
        """
        member = await member_repository.create(
            db, obj_in=member_in.model_dump(exclude_unset=True)
        )
        await db.commit()
        logger.info(f"Socio creado: {member.name} (ID: {member.id})")
        return member

    async def update_member(self, db: AsyncSession, member_id: str, member_in: MemberUpdate) -> Member:
        member = await self.get_member(db, member_id)
        member = await member_repository.update(
            db, db_obj=member, obj_in=member_in.model_dump(exclude_unset=True)
        )
        await db.commit()
        return member

    async def delete_member(self, db: AsyncSession, member_id: str) -> str:
        """
        Eliminar un socio.

        Los pagos y check-ins del socio se conservan.
        """
        member = await member_repository.remove(db, id=member_id)
        if not member:
            raise NotFoundError("Socio", member_id)
        await db.commit()
        logger.info(f"Socio {member_id} eliminado")
        return member_id


member_service = MemberService()
