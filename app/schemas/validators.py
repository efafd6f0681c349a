from typing import Any


def reject_null(value: Any) -> Any:
    """
    Rechaza un `null` explícito en actualizaciones parciales.

    Omitir el campo lo deja sin cambios; enviarlo como null intentaría vaciar
    una columna obligatoria.
    """
    if value is None:
        raise ValueError("El campo no puede ser nulo")
    return value
