"""
Services module

Servicios con la lógica de negocio del back office: socios, entrenadores,
planes, pagos, check-ins, reportes mensuales y panel principal.
"""

from app.services.member import member_service
from app.services.trainer import trainer_service
from app.services.plan import plan_service
from app.services.payment import payment_service
from app.services.checkin import check_in_service
from app.services.reporting import reporting_service
from app.services.dashboard import dashboard_service
