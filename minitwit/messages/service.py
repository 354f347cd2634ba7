# minitwit/messages/service.py
from __future__ import annotations

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from minitwit.core.errors import NotFoundError
from minitwit.messages.models import Message
from minitwit.messages.repository import create_message, list_public_messages
from minitwit.messages.schemas import MessageOut
from minitwit.simulator.validation import validate_message_content
from minitwit.users.repository import get_user_id_by_username


async def post_message(db: AsyncSession, username: str, content: str | None) -> Message:
    author_id = await get_user_id_by_username(db, username)
    if author_id is None:
        raise NotFoundError(f"User {username!r} does not exist")
    text = validate_message_content(content)
    # El commit lo hace el caller
    return await create_message(db, author_id, text)


async def public_messages(
    db: AsyncSession,
    limit: int,
    username: str | None = None,
) -> List[dict]:
    """
    Listado en el formato del simulador: [{content, pub_date, user}].
    """
    author_id = None
    if username is not None:
        author_id = await get_user_id_by_username(db, username)
        if author_id is None:
            raise NotFoundError(f"User {username!r} does not exist")

    rows = await list_public_messages(db, limit=limit, author_id=author_id)
    return [
        MessageOut(content=msg.content, pub_date=msg.created_at, user=user.username).model_dump()
        for msg, user in rows
    ]
