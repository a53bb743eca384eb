"""
Errores de dominio de la reserva de canchas.

Los routers no los capturan: main.py registra un handler que los traduce
a respuestas HTTP con el mismo formato que HTTPException.
"""


class TennisClubError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(TennisClubError):
    """El id no corresponde a un registro vivo (no borrado)."""

    status_code = 404


class InvalidArgumentError(TennisClubError):
    """Falta una referencia obligatoria o la ventana de tiempo es inválida."""

    status_code = 400


class ConflictError(TennisClubError):
    """La ventana pedida se solapa con otra reserva de la misma cancha."""

    status_code = 409
