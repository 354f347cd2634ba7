# minitwit/simulator/router.py
from fastapi import APIRouter, Depends, Header, Query
from sqlalchemy.ext.asyncio import AsyncSession

from minitwit.core.config import Settings, get_settings
from minitwit.core.errors import ForbiddenError
from minitwit.core.json import UTF8JSONResponse
from minitwit.core.results import Error, to_response
from minitwit.db.session import get_session
from minitwit.followers.schemas import FollowRequest
from minitwit.messages.schemas import MessageCreate
from minitwit.simulator.service import SimulatorService
from minitwit.users.schemas import LoginRequest, RegisterRequest

router = APIRouter(tags=["simulator"], default_response_class=UTF8JSONResponse)

NOT_AUTHORIZED = "You are not authorized to use this resource!"


def get_simulator(
    db: AsyncSession = Depends(get_session),
    cfg: Settings = Depends(get_settings),
) -> SimulatorService:
    return SimulatorService(db, cfg)


def _forbidden(authorization: str | None, cfg: Settings):
    """
    Devuelve la respuesta 403 si el simulador exige Authorization y no
    coincide; None si puede pasar.
    """
    expected = cfg.SIMULATOR_AUTHORIZATION
    if expected and authorization != expected:
        return to_response(Error.from_exception(ForbiddenError(NOT_AUTHORIZED)))
    return None


@router.get("/latest")
async def latest(sim: SimulatorService = Depends(get_simulator)):
    return to_response(await sim.get_latest())


@router.post("/register")
async def register(
    payload: RegisterRequest,
    latest: int | None = Query(None),
    sim: SimulatorService = Depends(get_simulator),
    cfg: Settings = Depends(get_settings),
    authorization: str | None = Header(None),
):
    denied = _forbidden(authorization, cfg)
    if denied is not None:
        return denied
    return to_response(await sim.register_user(payload, latest))


@router.post("/login")
async def login(
    payload: LoginRequest,
    sim: SimulatorService = Depends(get_simulator),
    cfg: Settings = Depends(get_settings),
    authorization: str | None = Header(None),
):
    denied = _forbidden(authorization, cfg)
    if denied is not None:
        return denied
    return to_response(await sim.login(payload))


@router.get("/msgs")
async def messages(
    no: int | None = Query(None),
    latest: int | None = Query(None),
    sim: SimulatorService = Depends(get_simulator),
    cfg: Settings = Depends(get_settings),
    authorization: str | None = Header(None),
):
    denied = _forbidden(authorization, cfg)
    if denied is not None:
        return denied
    return to_response(await sim.get_messages(no, latest))


@router.get("/msgs/{username}")
async def user_messages(
    username: str,
    no: int | None = Query(None),
    latest: int | None = Query(None),
    sim: SimulatorService = Depends(get_simulator),
    cfg: Settings = Depends(get_settings),
    authorization: str | None = Header(None),
):
    denied = _forbidden(authorization, cfg)
    if denied is not None:
        return denied
    return to_response(await sim.get_user_messages(username, no, latest))


@router.post("/msgs/{username}")
async def post_message(
    username: str,
    payload: MessageCreate,
    latest: int | None = Query(None),
    sim: SimulatorService = Depends(get_simulator),
    cfg: Settings = Depends(get_settings),
    authorization: str | None = Header(None),
):
    denied = _forbidden(authorization, cfg)
    if denied is not None:
        return denied
    return to_response(await sim.add_message(username, payload, latest))


@router.get("/fllws/{username}")
async def follows(
    username: str,
    no: int | None = Query(None),
    latest: int | None = Query(None),
    sim: SimulatorService = Depends(get_simulator),
    cfg: Settings = Depends(get_settings),
    authorization: str | None = Header(None),
):
    denied = _forbidden(authorization, cfg)
    if denied is not None:
        return denied
    return to_response(await sim.get_follows(username, no, latest))


@router.post("/fllws/{username}")
async def follow(
    username: str,
    payload: FollowRequest,
    latest: int | None = Query(None),
    sim: SimulatorService = Depends(get_simulator),
    cfg: Settings = Depends(get_settings),
    authorization: str | None = Header(None),
):
    denied = _forbidden(authorization, cfg)
    if denied is not None:
        return denied
    return to_response(await sim.add_follower(username, payload, latest))
