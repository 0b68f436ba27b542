"""
Notificações de Domínio - Validação sem exceções.

Objetos de domínio não lançam exceções ao serem construídos com dados
inválidos. Em vez disso, acumulam notificações (chave, mensagem) que
o chamador consulta antes de prosseguir.

Componentes:
- Notification: Falha de validação registrada (imutável)
- Notifications: Coleção mutável pertencente a cada objeto validado
- Validatable: Contrato (Protocol) de objetos que expõem notificações

Example:
    notificacoes = Notifications()
    notificacoes.add("Name.FirstName", "Name must have 3 characters minimum")
    notificacoes.extend(documento, email)

    if notificacoes:
        return CommandResult.fail("...", notificacoes)
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class Notification:
    """
    Falha de validação registrada.

    Attributes:
        key: Campo ou regra que falhou (ex: "Document.Number")
        message: Mensagem legível
    """

    key: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "message": self.message}


@runtime_checkable
class Validatable(Protocol):
    """
    Interface de objetos auto-validáveis.

    Usando Protocol para duck typing: value objects, entidades,
    comandos e contratos satisfazem sem herança explícita.
    """

    @property
    def notifications(self) -> Sequence[Notification]:
        ...

    @property
    def is_valid(self) -> bool:
        ...

    @property
    def is_invalid(self) -> bool:
        ...


class Notifications:
    """
    Coleção ordenada de notificações.

    Cada entidade possui a sua (composição). A ordem de inserção é
    preservada para que mensagens apareçam na ordem em que as regras
    foram avaliadas.
    """

    def __init__(self, initial: Iterable[Notification] = ()):
        self._items: List[Notification] = list(initial)

    def add(self, key: str, message: str) -> None:
        """Registra uma nova notificação."""
        self._items.append(Notification(key, message))

    def extend(self, *sources: Any) -> None:
        """
        Agrega notificações de outras fontes.

        Args:
            sources: Notification, iterável de Notification ou qualquer
                objeto com atributo ``notifications``. ``None`` é ignorado.
        """
        for source in sources:
            if source is None:
                continue
            if isinstance(source, Notification):
                self._items.append(source)
            elif hasattr(source, "notifications"):
                self._items.extend(source.notifications)
            else:
                self._items.extend(source)

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> List[Dict[str, str]]:
        """Serializa para lista de dicionários (útil para APIs)."""
        return [item.to_dict() for item in self._items]

    def messages(self) -> List[str]:
        return [item.message for item in self._items]

    def __iter__(self) -> Iterator[Notification]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"Notifications({self._items!r})"
