# minitwit/users/schemas.py
from pydantic import BaseModel, Field, AliasChoices


class RegisterRequest(BaseModel):
    # Sin min_length: las reglas del simulador responden 400, no 422
    username: str | None = None
    email: str | None = None
    # Acepta pwd | password
    pwd: str | None = Field(
        default=None,
        validation_alias=AliasChoices("pwd", "password"),
    )


class LoginRequest(BaseModel):
    username: str | None = None
    pwd: str | None = Field(
        default=None,
        validation_alias=AliasChoices("pwd", "password"),
    )


class LoginOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    username: str
