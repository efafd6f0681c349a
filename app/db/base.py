# Importar todos los modelos para que create_all los detecte
from app.db.base_class import Base  # noqa
from app.models.member import Member  # noqa
from app.models.trainer import Trainer  # noqa
from app.models.plan import Plan  # noqa
from app.models.payment import Payment  # noqa
from app.models.checkin import CheckIn  # noqa
