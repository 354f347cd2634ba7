# minitwit/simulator/models.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, DateTime, func
from minitwit.db.base import Base


class Latest(Base):
    """
    Último valor de `?latest=` que mandó el simulador. Una sola fila (id=1);
    vive en la DB para que todos los workers vean el mismo valor.
    """
    __tablename__ = "latest"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    value: Mapped[int] = mapped_column(Integer, nullable=False)
    updated_at: Mapped["DateTime"] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
