"""correlation_id por comando, guardado em ContextVar.

Cada login roda com o seu próprio id; dois logins sobrepostos em
tasks diferentes não se misturam nos logs.

    token = set_correlation_id()
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_current: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


def get_correlation_id() -> str:
    """Id do contexto atual; string vazia fora de um comando."""
    return _current.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Ativa `correlation_id` (ou um novo) e devolve o token de reset."""
    return _current.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _current.reset(token)
