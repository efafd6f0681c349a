"""
Base repository async para operaciones CRUD genéricas.
Cada colección (socios, entrenadores, planes, pagos, check-ins) la extiende.
"""
from typing import TypeVar, Generic, Optional, List, Dict, Any, Type, Union
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from pydantic import BaseModel
import enum
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


def _storable(value: Any) -> Any:
    # Los enums se guardan por su valor ("active", "pix", ...)
    if isinstance(value, enum.Enum):
        return value.value
    return value


class AsyncBaseRepository(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Repositorio base genérico con operaciones CRUD async.

    Características:
    - Operaciones CRUD completamente async
    - Filtros por igualdad y por rango inclusivo sobre un campo
    - Ordenamiento ascendente/descendente por un campo
    - Compatible con SQLAlchemy 2.0

    Uso:
        class MemberRepository(AsyncBaseRepository[Member, MemberCreate, MemberUpdate]):
            # Métodos específicos del modelo
            pass

    Note:
        Los métodos de escritura hacen flush() pero no commit(); la transacción
        la cierra el servicio que orquesta la operación.
    """

    def __init__(self, model: Type[ModelType]):
        """
        Inicializar repositorio con el modelo SQLAlchemy.

        Args:
            model: Clase del modelo SQLAlchemy (ej: Member, Payment, etc)
        """
        self.model = model

    def _column(self, field: str):
        if not hasattr(self.model, field):
            raise ValueError(f"{self.model.__name__} no tiene campo '{field}'")
        return getattr(self.model, field)

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        Obtener un objeto por ID.

        Returns:
            El objeto encontrado o None si no existe
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_multi(
        self,
        db: AsyncSession,
        *,
        skip: int = 0,
        limit: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
        range_field: Optional[str] = None,
        range_start: Any = None,
        range_end: Any = None,
        order_by: Optional[str] = None,
        descending: bool = False
    ) -> List[ModelType]:
        """
        Obtener múltiples objetos con filtros, rango y ordenamiento opcionales.

        Args:
            db: Sesión async de base de datos
            skip: Número de registros a omitir (paginación)
            limit: Número máximo de registros a devolver (None = todos)
            filters: Diccionario de filtros de igualdad {campo: valor}
            range_field: Campo sobre el que se aplica el rango inclusivo
            range_start: Límite inferior del rango (inclusivo)
            range_end: Límite superior del rango (inclusivo)
            order_by: Campo de ordenamiento
            descending: Orden descendente si es True

        Example:
            payments = await payment_repository.get_multi(
                db,
                range_field="date",
                range_start=date(2024, 1, 1),
                range_end=date(2024, 1, 31),
                order_by="date",
                descending=True
            )
        """
        stmt = select(self.model)

        if filters:
            for field, value in filters.items():
                stmt = stmt.where(self._column(field) == value)

        if range_field is not None:
            column = self._column(range_field)
            if range_start is not None:
                stmt = stmt.where(column >= range_start)
            if range_end is not None:
                stmt = stmt.where(column <= range_end)

        if order_by is not None:
            column = self._column(order_by)
            stmt = stmt.order_by(column.desc() if descending else column.asc())

        if skip:
            stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def count(
        self,
        db: AsyncSession,
        *,
        filters: Optional[Dict[str, Any]] = None
    ) -> int:
        stmt = select(func.count(self.model.id))
        if filters:
            for field, value in filters.items():
                stmt = stmt.where(self._column(field) == value)
        result = await db.execute(stmt)
        return result.scalar() or 0

    async def create(
        self,
        db: AsyncSession,
        *,
        obj_in: Union[CreateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Crear un nuevo objeto en la base de datos.

        Args:
            db: Sesión async de base de datos
            obj_in: Datos del objeto a crear (schema Pydantic o dict)

        Returns:
            El objeto creado con ID asignado
        """
        if isinstance(obj_in, dict):
            obj_in_data = obj_in
        else:
            obj_in_data = obj_in.model_dump(exclude_unset=True)

        # Filtrar solo los campos que existen en el modelo
        valid_fields = {}
        for field, value in obj_in_data.items():
            if hasattr(self.model, field):
                valid_fields[field] = _storable(value)
            else:
                logger.warning(
                    f"Campo ignorado en create: {self.model.__name__} no tiene campo '{field}'"
                )

        db_obj = self.model(**valid_fields)

        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)

        return db_obj

    async def update(
        self,
        db: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, Dict[str, Any]]
    ) -> ModelType:
        """
        Actualizar un objeto existente mezclando solo los campos recibidos.

        Args:
            db: Sesión async de base de datos
            db_obj: Objeto existente a actualizar
            obj_in: Datos de actualización (schema Pydantic o dict)

        Returns:
            El objeto actualizado
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            if field == "id":
                continue
            if hasattr(db_obj, field):
                setattr(db_obj, field, _storable(value))
            else:
                logger.warning(
                    f"Campo ignorado en update: {self.model.__name__} no tiene campo '{field}'"
                )

        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)

        return db_obj

    async def remove(self, db: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """
        Eliminar un objeto de la base de datos.

        Returns:
            El objeto eliminado o None si no existía
        """
        obj = await self.get(db, id=id)
        if not obj:
            return None

        await db.delete(obj)
        await db.flush()

        return obj

    async def exists(self, db: AsyncSession, id: Any) -> bool:
        """Verificar si un objeto existe en la base de datos."""
        stmt = select(self.model.id).where(self.model.id == id)
        result = await db.execute(stmt)
        return result.scalar_one_or_none() is not None
