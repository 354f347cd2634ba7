# minitwit/messages/models.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Boolean, Integer, DateTime, func, false, ForeignKey
from sqlalchemy.types import UnicodeText
from minitwit.db.base import Base


class Message(Base):
    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    content: Mapped[str] = mapped_column(UnicodeText, nullable=False)

    # los mensajes marcados no salen en los listados públicos
    flagged: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    created_at: Mapped["DateTime"] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )
