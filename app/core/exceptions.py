class NotFoundError(Exception):
    """Raised when a referenced member, trainer, plan, payment or check-in does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} con ID {entity_id} no encontrado")
