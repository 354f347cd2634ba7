# minitwit/messages/schemas.py
from datetime import datetime

from pydantic import BaseModel


class MessageCreate(BaseModel):
    content: str | None = None


class MessageOut(BaseModel):
    content: str
    pub_date: datetime
    user: str
