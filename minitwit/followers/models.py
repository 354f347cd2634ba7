# minitwit/followers/models.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, DateTime, func, ForeignKey, UniqueConstraint
from minitwit.db.base import Base


class Follower(Base):
    """
    Arista "user_id sigue a follows_id".
    La pareja es única: el constraint evita duplicados aunque dos
    requests hagan follow a la vez.
    """
    __tablename__ = "followers"
    __table_args__ = (
        UniqueConstraint("user_id", "follows_id", name="uq_follower_edge"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    follows_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    created_at: Mapped["DateTime"] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
