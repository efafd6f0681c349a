from app.schemas.member import Member, MemberCreate, MemberUpdate
from app.schemas.trainer import Trainer, TrainerCreate, TrainerUpdate
from app.schemas.plan import Plan, PlanCreate, PlanUpdate
from app.schemas.payment import Payment, PaymentCreate, PaymentUpdate
from app.schemas.checkin import CheckIn, CheckInCreate, CheckInUpdate
from app.schemas.dashboard import DashboardData, MonthlyReport
