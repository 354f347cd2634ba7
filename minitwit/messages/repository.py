# minitwit/messages/repository.py
from sqlalchemy import select, desc
from sqlalchemy.ext.asyncio import AsyncSession
from minitwit.messages.models import Message
from minitwit.users.models import User


async def create_message(db: AsyncSession, author_id: int, content: str) -> Message:
    msg = Message(author_id=author_id, content=content)
    db.add(msg)
    await db.flush()
    await db.refresh(msg)
    return msg


async def list_public_messages(
    db: AsyncSession,
    limit: int = 100,
    author_id: int | None = None,
) -> list[tuple[Message, User]]:
    """
    Mensajes no marcados, del más nuevo al más viejo, con su autor.
    Si llega author_id, solo los de ese usuario.
    """
    q = (
        select(Message, User)
        .join(User, User.id == Message.author_id)
        .where(Message.flagged.is_(False))
    )
    if author_id is not None:
        q = q.where(Message.author_id == author_id)
    # id como desempate: created_at tiene resolución de segundos en SQLite
    q = q.order_by(desc(Message.created_at), desc(Message.id)).limit(limit)
    res = await db.execute(q)
    return [(msg, user) for msg, user in res.all()]
