from app.models.member import Member, MemberStatus
from app.models.trainer import Trainer, TrainerStatus
from app.models.plan import Plan
from app.models.payment import Payment, PaymentMethod, PaymentStatus
from app.models.checkin import CheckIn
