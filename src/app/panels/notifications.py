"""Conteúdo da bandeja de notificações.

Sequência somente-leitura fornecida por um colaborador externo; o
coordenador de painéis só guarda o flag de aberto.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload


@dataclass(frozen=True, slots=True)
class Notification:
    """Item da bandeja.

    Attributes:
        id: Chave estável do item
        title: Título curto
        message: Texto do aviso
        time: Rótulo relativo já formatado (ex: "há 5 minutos")
        unread: Ainda não lida
    """

    id: int
    title: str
    message: str
    time: str
    unread: bool = False


class NotificationFeed(Sequence[Notification]):
    """Sequência imutável de notificações."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Notification] = ()) -> None:
        self._items: tuple[Notification, ...] = tuple(items)

    @overload
    def __getitem__(self, index: int) -> Notification: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Notification]: ...

    def __getitem__(self, index: int | slice) -> Notification | Sequence[Notification]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Notification]:
        return iter(self._items)

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self._items if n.unread)


def sample_feed() -> NotificationFeed:
    """Feed de demonstração (três itens, dois não lidos)."""
    return NotificationFeed(
        (
            Notification(
                id=1,
                title="Nova sessão agendada",
                message="Sessão marcada para amanhã às 10h",
                time="há 5 minutos",
                unread=True,
            ),
            Notification(
                id=2,
                title="Pagamento recebido",
                message="Pagamento de sessão confirmado",
                time="há 1 hora",
                unread=True,
            ),
            Notification(
                id=3,
                title="Novo paciente cadastrado",
                message="Cadastro concluído pela recepção",
                time="há 2 horas",
                unread=False,
            ),
        )
    )
