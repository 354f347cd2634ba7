# minitwit/followers/schemas.py
from pydantic import BaseModel
from typing import List


class FollowRequest(BaseModel):
    """Exactamente uno de los dos: {"follow": "x"} o {"unfollow": "x"}."""
    follow: str | None = None
    unfollow: str | None = None


class FollowsOut(BaseModel):
    follows: List[str]
