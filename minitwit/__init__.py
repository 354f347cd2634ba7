"""
Paquete `minitwit`: backend del simulador de MiniTwit.

Registro, login, follow/unfollow y mensajes sobre SQLAlchemy (async),
expuestos con FastAPI en `minitwit.main:app`.
"""
