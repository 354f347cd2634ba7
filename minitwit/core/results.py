# minitwit/core/results.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from starlette.responses import Response

from minitwit.core.errors import SimulatorError
from minitwit.core.json import UTF8JSONResponse


@dataclass(frozen=True)
class Success:
    data: Any = None
    status_code: int = 204

    @classmethod
    def ok(cls, data: Any) -> "Success":
        return cls(data=data, status_code=200)


@dataclass(frozen=True)
class Error:
    error_msg: str
    status_code: int = 400

    @classmethod
    def from_exception(cls, exc: SimulatorError) -> "Error":
        return cls(error_msg=exc.message, status_code=exc.status_code)

    def body(self) -> dict:
        return {"error_msg": self.error_msg, "status_code": self.status_code}


Result = Union[Success, Error]


def to_response(result: Result) -> Response:
    """
    Traduce el resultado de una operación a la respuesta HTTP:
    - Success sin data  → 204 sin cuerpo
    - Success con data  → JSON con su status (200)
    - Error             → JSON {error_msg, status_code} con ese status
    """
    if isinstance(result, Error):
        return UTF8JSONResponse(result.body(), status_code=result.status_code)
    if result.data is None:
        return Response(status_code=result.status_code)
    return UTF8JSONResponse(result.data, status_code=result.status_code)
