from fastapi import APIRouter, Depends

from app.api.v1.endpoints import checkins, dashboard, members, payments, plans, trainers
from app.core.auth import get_current_user

# Todas las rutas del back office requieren usuario autenticado
api_router = APIRouter(dependencies=[Depends(get_current_user)])

# Members module
api_router.include_router(members.router, prefix="/members", tags=["members"])

# Trainers module
api_router.include_router(trainers.router, prefix="/trainers", tags=["trainers"])

# Plans module
api_router.include_router(plans.router, prefix="/plans", tags=["plans"])

# Payments module
api_router.include_router(payments.router, prefix="/payments", tags=["payments"])

# Check-ins module
api_router.include_router(checkins.router, prefix="/check-ins", tags=["check-ins"])

# Dashboard module
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
