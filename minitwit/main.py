# minitwit/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from minitwit.core.config import settings
from minitwit.core.json import UTF8JSONResponse
from minitwit.core.results import Error
from minitwit.db.init_db import init_models
from minitwit.db.session import engine

# routers
from minitwit.simulator.router import router as simulator_router

log = logging.getLogger("uvicorn")


def describe_validation_errors(errors) -> str:
    """Primer error de validación como "Invalid request: body -> username: ..."."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    where = " -> ".join(str(loc) for loc in first.get("loc", ()))
    msg = first.get("msg", "invalid value")
    return f"Invalid request: {where}: {msg}" if where else f"Invalid request: {msg}"


app = FastAPI(
    title="MiniTwit Simulator API",
    default_response_class=UTF8JSONResponse,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allow_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def invalid_request(request: Request, exc: RequestValidationError):
    """
    Body ausente, JSON roto o campos con tipo incorrecto: 400 con
    {error_msg, status_code} en vez del 422 de FastAPI.
    """
    err = Error(describe_validation_errors(exc.errors()), status_code=400)
    log.info(f"↩️ {request.method} {request.url.path} rechazado (400): {err.error_msg}")
    return UTF8JSONResponse(err.body(), status_code=err.status_code)


@app.exception_handler(SQLAlchemyError)
async def database_error(request: Request, exc: SQLAlchemyError):
    """
    Cualquier fallo de DB que no sea un error de dominio: 500 con el mismo
    formato {error_msg, status_code} que el resto de errores.
    """
    log.error(f"❌ {request.method} {request.url.path}: {exc!r}")
    err = Error("internal error", status_code=500)
    return UTF8JSONResponse(err.body(), status_code=err.status_code)


@app.on_event("startup")
async def on_startup():
    log.info("🚀 Iniciando servicio…")
    await init_models(engine)
    log.info("✅ Startup listo.")


@app.on_event("shutdown")
async def on_shutdown():
    await engine.dispose()


@app.get("/api/health/")
async def health():
    return {"ok": True, "service": "minitwit", "msg": "healthy"}


app.include_router(simulator_router)   # /latest, /register, /login, /msgs, /fllws
