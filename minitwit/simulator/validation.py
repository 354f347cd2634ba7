# minitwit/simulator/validation.py
"""
Reglas de validación del simulador. Funciones puras: no tocan la DB.
Cada una lanza `ValidationError` con el mensaje que ve el cliente.
"""
from __future__ import annotations

from minitwit.core.errors import ValidationError

# mismos largos que las columnas de users
USERNAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255


def require_username(username: str | None) -> None:
    if not username:
        raise ValidationError("You have to enter a username")
    if len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(f"The username can have at most {USERNAME_MAX_LENGTH} characters")


def require_valid_email(email: str | None) -> None:
    if not email or "@" not in email:
        raise ValidationError("You have to enter a valid email address")
    if len(email) > EMAIL_MAX_LENGTH:
        raise ValidationError(f"The email address can have at most {EMAIL_MAX_LENGTH} characters")


def require_password(password: str | None) -> None:
    if not password:
        raise ValidationError("You have to enter a password")


def validate_registration(username: str | None, email: str | None, password: str | None) -> None:
    # el orden importa: gana la primera regla que falla
    require_username(username)
    require_valid_email(email)
    require_password(password)


def validate_follow_action(follow: str | None, unfollow: str | None) -> tuple[str, str]:
    """
    Devuelve ("follow", username) o ("unfollow", username).
    El body debe traer exactamente uno de los dos campos.
    """
    if follow and unfollow:
        raise ValidationError("Provide either follow or unfollow, not both")
    if follow:
        return "follow", follow
    if unfollow:
        return "unfollow", unfollow
    raise ValidationError("You have to provide a username to follow or unfollow")


def validate_message_content(content: str | None) -> str:
    if content is None:
        raise ValidationError("You have to enter a message")
    return content


def validate_page_size(no: int | None, default: int) -> int:
    if no is None:
        return default
    if no < 0:
        raise ValidationError("no must be a non-negative number")
    return no
