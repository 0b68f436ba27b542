"""
Classes base para Entidades e Value Objects.

- Entity: identidade por UUID e notificações próprias (mutáveis)
- ValueObject: igualdade por valor; notificações derivadas de validate()

Ambas satisfazem o protocolo Validatable.
"""

from dataclasses import dataclass, field
from typing import Any, Tuple, Type, TypeVar
import uuid

from .notifications import Notification, Notifications


VO = TypeVar("VO", bound="ValueObject")


class ValueObject:
    """
    Base para value objects imutáveis.

    Subclasses são dataclasses frozen e implementam ``validate()``,
    uma função pura dos próprios campos. Como o objeto não muda,
    as notificações são sempre recalculáveis.
    """

    def validate(self) -> Tuple[Notification, ...]:
        return ()

    @classmethod
    def create(cls: Type[VO], *args: Any, **kwargs: Any) -> Tuple[VO, Tuple[Notification, ...]]:
        """
        Constrói o value object e retorna (valor, notificações).

        O valor é retornado mesmo se inválido.
        """
        value = cls(*args, **kwargs)
        return value, value.notifications

    @property
    def notifications(self) -> Tuple[Notification, ...]:
        return self.validate()

    @property
    def is_valid(self) -> bool:
        return not self.notifications

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid


@dataclass(eq=False)
class Entity:
    """
    Base para entidades de domínio.

    Attributes:
        id: Identificador único (UUID)
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()), kw_only=True)
    _notifications: Notifications = field(
        default_factory=Notifications, init=False, repr=False, compare=False
    )

    def add_notification(self, key: str, message: str) -> None:
        self._notifications.add(key, message)

    def add_notifications(self, *sources: Any) -> None:
        self._notifications.extend(*sources)

    @property
    def notifications(self) -> Tuple[Notification, ...]:
        return tuple(self._notifications)

    @property
    def is_valid(self) -> bool:
        return not self._notifications

    @property
    def is_invalid(self) -> bool:
        return bool(self._notifications)

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, Entity):
            return False
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
