"""
Endpoints del panel principal.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import Database, get_async_db, get_database
from app.schemas.dashboard import DashboardData, MonthlyReport
from app.services.dashboard import dashboard_service

router = APIRouter()


@router.get("", response_model=DashboardData)
async def read_dashboard(
    database: Database = Depends(get_database),
) -> DashboardData:
    """
    Foto del gimnasio: socios, entrenadores, pagos y check-ins del mes actual
    comparados con el mes anterior.

    Las consultas se ejecutan en paralelo, cada una con su propia sesión.
    """
    return await dashboard_service.get_dashboard_data(database)


@router.get("/monthly", response_model=MonthlyReport)
async def read_monthly_report(
    year: int = Query(..., ge=1, le=9999, description="Año"),
    month: int = Query(..., ge=1, le=12, description="Mes (1-12)"),
    db: AsyncSession = Depends(get_async_db),
) -> MonthlyReport:
    return await dashboard_service.get_monthly_report(db, year, month)
