# minitwit/users/models.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, DateTime, func
from minitwit.db.base import Base
from minitwit.simulator.validation import USERNAME_MAX_LENGTH, EMAIL_MAX_LENGTH


class User(Base):
    __tablename__ = "users"
    # ids crecientes que no se reutilizan (SQLite necesita AUTOINCREMENT)
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(USERNAME_MAX_LENGTH), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(EMAIL_MAX_LENGTH), nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now())
