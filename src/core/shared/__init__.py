"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Notificações e contrato fluente de validação
- Classes base de Entidade e Value Object
- Exceções de borda
"""

from .exceptions import DomainException, ValidationError
from .notifications import Notification, Notifications, Validatable
from .contract import Contract
from .entity import Entity, ValueObject

__all__ = [
    "DomainException",
    "ValidationError",
    "Notification",
    "Notifications",
    "Validatable",
    "Contract",
    "Entity",
    "ValueObject",
]
