# minitwit/simulator/service.py
"""
Operaciones del API del simulador.

`SimulatorService` recibe la sesión y la configuración en el constructor:
la app le pasa la sesión de cada request y los tests una DB en memoria
desechable. Cada operación es una unidad de trabajo (validar → escribir →
commit) y devuelve un `Success` o un `Error`; nunca lanza errores de dominio.
"""
from __future__ import annotations

import functools
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from minitwit.core.config import Settings, settings as default_settings
from minitwit.core.errors import SimulatorError
from minitwit.core.results import Error, Result, Success
from minitwit.followers import service as follow_svc
from minitwit.followers.schemas import FollowRequest
from minitwit.messages import service as msg_svc
from minitwit.messages.schemas import MessageCreate
from minitwit.simulator import repository as latest_repo
from minitwit.simulator.validation import validate_page_size
from minitwit.users import service as users_svc
from minitwit.users.schemas import LoginRequest, RegisterRequest

log = logging.getLogger("uvicorn")


def _operation(func):
    """
    Convierte los SimulatorError en Error (con rollback, sin escrituras
    parciales). Los errores de DB inesperados hacen rollback y siguen subiendo.
    """
    name = func.__name__

    @functools.wraps(func)
    async def wrapper(self: "SimulatorService", *args, **kwargs) -> Result:
        try:
            return await func(self, *args, **kwargs)
        except SimulatorError as e:
            await self.db.rollback()
            log.info(f"↩️ {name} rechazado ({e.status_code}): {e.message}")
            return Error.from_exception(e)
        except SQLAlchemyError:
            await self.db.rollback()
            log.exception(f"❌ {name}: fallo de base de datos")
            raise

    return wrapper


class SimulatorService:
    def __init__(self, db: AsyncSession, settings: Settings | None = None):
        self.db = db
        self.settings = settings or default_settings

    async def _record_latest(self, latest: int | None) -> None:
        # se guarda aunque la operación luego falle
        if latest is None:
            return
        await latest_repo.set_latest(self.db, latest)
        await self.db.commit()

    # ---------- latest ----------
    @_operation
    async def get_latest(self) -> Result:
        value = await latest_repo.get_latest(self.db)
        return Success.ok({"latest": value if value is not None else -1})

    # ---------- usuarios ----------
    @_operation
    async def register_user(self, request: RegisterRequest, latest: int | None = None) -> Result:
        await self._record_latest(latest)
        user = await users_svc.register_user(self.db, request)
        await self.db.commit()
        log.info(f"✅ usuario registrado: {user.username} (id={user.id})")
        return Success()

    @_operation
    async def login(self, request: LoginRequest) -> Result:
        body = await users_svc.login_user(
            self.db,
            request.username,
            request.pwd,
            secret_key=self.settings.SECRET_KEY,
            expires_minutes=self.settings.ACCESS_TOKEN_EXPIRE_MIN,
        )
        return Success.ok(body)

    # ---------- follows ----------
    @_operation
    async def add_follower(
        self,
        username: str,
        request: FollowRequest,
        latest: int | None = None,
    ) -> Result:
        await self._record_latest(latest)
        await follow_svc.change_follow(
            self.db,
            username,
            request,
            allow_self_follow=self.settings.ALLOW_SELF_FOLLOW,
            duplicate_is_error=self.settings.DUPLICATE_FOLLOW_IS_ERROR,
        )
        await self.db.commit()
        return Success()

    @_operation
    async def get_follows(
        self,
        username: str,
        no: int | None = None,
        latest: int | None = None,
    ) -> Result:
        await self._record_latest(latest)
        limit = validate_page_size(no, self.settings.PER_PAGE)
        return Success.ok(await follow_svc.follows_of(self.db, username, limit))

    # ---------- mensajes ----------
    @_operation
    async def add_message(
        self,
        username: str,
        request: MessageCreate,
        latest: int | None = None,
    ) -> Result:
        await self._record_latest(latest)
        await msg_svc.post_message(self.db, username, request.content)
        await self.db.commit()
        return Success()

    @_operation
    async def get_messages(self, no: int | None = None, latest: int | None = None) -> Result:
        await self._record_latest(latest)
        limit = validate_page_size(no, self.settings.PER_PAGE)
        return Success.ok(await msg_svc.public_messages(self.db, limit))

    @_operation
    async def get_user_messages(
        self,
        username: str,
        no: int | None = None,
        latest: int | None = None,
    ) -> Result:
        await self._record_latest(latest)
        limit = validate_page_size(no, self.settings.PER_PAGE)
        return Success.ok(await msg_svc.public_messages(self.db, limit, username=username))
