# minitwit/core/errors.py
"""
Errores de dominio del simulador.

Los servicios los lanzan; `SimulatorService` los convierte en `Error`
(ver `minitwit.core.results`) y el router los entrega como JSON
`{"error_msg": ..., "status_code": ...}`.
"""
from __future__ import annotations


class SimulatorError(Exception):
    status_code: int = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(SimulatorError):
    """Campo ausente o con formato inválido."""


class ConflictError(SimulatorError):
    """El username ya existe."""


class NotFoundError(SimulatorError):
    """El username no corresponde a ningún usuario."""


class StateError(SimulatorError):
    """Unfollow de alguien a quien no se sigue (y follow repetido si así se configura)."""


class AuthError(SimulatorError):
    status_code = 401


class ForbiddenError(SimulatorError):
    status_code = 403
