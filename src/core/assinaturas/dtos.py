"""
Data Transfer Objects (Comandos e Resultados) do Domínio de Assinaturas.

Tipos:
- Commands: Entrada plana por meio de pagamento (campos de aluno,
  pagador e endereço compartilhados + campos do meio)
- CommandResult: Saída padronizada {success, message, notifications}

Comandos são imutáveis (frozen=True) e se auto-validam com o mesmo
contrato fluente das entidades.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple, Type

from src.core.shared.contract import Contract
from src.core.shared.exceptions import ValidationError
from src.core.shared.notifications import Notification, Notifications

from .value_objects import DocumentType


# =============================================================================
# COMMANDS (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateSubscriptionCommand:
    """
    Campos comuns a todos os comandos de assinatura.

    Attributes:
        first_name / last_name: Nome do aluno
        document: CPF do aluno
        email: E-mail do aluno
        paid_date / expire_date: Datas do pagamento
        total / total_paid: Valores do pagamento
        payer: Nome do pagador
        payer_document / payer_document_type: Documento do pagador
        payer_email: E-mail do pagador (opcional)
        street ... zip_code: Endereço de cobrança
    """

    first_name: str = ""
    last_name: str = ""
    document: str = ""
    email: str = ""

    paid_date: datetime = field(default_factory=datetime.now)
    expire_date: datetime = field(default_factory=datetime.now)
    total: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    payer: str = ""
    payer_document: str = ""
    payer_document_type: DocumentType = DocumentType.CPF
    payer_email: Optional[str] = None

    street: str = ""
    number: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    zip_code: str = ""

    def validate(self) -> Tuple[Notification, ...]:
        """Validação rápida (fail fast) antes de consultar o repositório."""
        return (
            Contract()
            .requires()
            .has_min_len(self.first_name, 3, "Name.FirstName",
                         "Name must have 3 characters minimum")
            .has_max_len(self.first_name, 40, "Name.FirstName",
                         "Name must have 40 characters maximum")
            .has_min_len(self.last_name, 3, "Name.LastName",
                         "Last Name must have 3 characters minimum")
            .has_max_len(self.last_name, 40, "Name.LastName",
                         "Last Name must have 40 characters maximum")
            .notifications
        )

    @property
    def notifications(self) -> Tuple[Notification, ...]:
        return self.validate()

    @property
    def is_valid(self) -> bool:
        return not self.notifications

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid


@dataclass(frozen=True)
class CreateBoletoSubscriptionCommand(CreateSubscriptionCommand):
    bar_code: str = ""
    boleto_number: str = ""


@dataclass(frozen=True)
class CreatePayPalSubscriptionCommand(CreateSubscriptionCommand):
    transaction_code: str = ""


@dataclass(frozen=True)
class CreateCreditCardSubscriptionCommand(CreateSubscriptionCommand):
    card_holder_name: str = ""
    card_number: str = ""
    last_transaction_number: str = ""


COMMANDS: Dict[str, Type[CreateSubscriptionCommand]] = {
    "boleto": CreateBoletoSubscriptionCommand,
    "paypal": CreatePayPalSubscriptionCommand,
    "cartao": CreateCreditCardSubscriptionCommand,
}


def _parse_datetime(name: str, value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"Data inválida: {value}", field=name)


def _parse_decimal(name: str, value: Any) -> Decimal:
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"Valor inválido: {value}", field=name)

    if not amount.is_finite():
        raise ValidationError(f"Valor inválido: {value}", field=name)

    return amount


def command_from_dict(method: str, data: Dict[str, Any]) -> CreateSubscriptionCommand:
    """
    Constrói o comando do meio de pagamento a partir de dados planos.

    Campos desconhecidos são ignorados; ausentes assumem o default.

    Args:
        method: "boleto", "paypal" ou "cartao"
        data: Dicionário vindo de JSON/formulário

    Returns:
        Comando correspondente

    Raises:
        ValidationError: Se método desconhecido ou valores ilegíveis
    """
    command_cls = COMMANDS.get((method or "").lower())
    if command_cls is None:
        raise ValidationError(f"Método de pagamento inválido: {method}", field="metodo")

    kwargs: Dict[str, Any] = {}
    for f in fields(command_cls):
        if f.name not in data or data[f.name] is None:
            continue
        value = data[f.name]

        if f.name in ("paid_date", "expire_date"):
            value = _parse_datetime(f.name, value)
        elif f.name in ("total", "total_paid"):
            value = _parse_decimal(f.name, value)
        elif f.name == "payer_document_type":
            try:
                value = DocumentType.from_string(value)
            except ValueError as e:
                raise ValidationError(str(e), field=f.name)
        else:
            value = str(value)

        kwargs[f.name] = value

    return command_cls(**kwargs)


# =============================================================================
# RESULT (Saída)
# =============================================================================

@dataclass
class CommandResult:
    """
    Resultado de um comando.

    Attributes:
        success: Se o comando foi executado
        message: Mensagem resumida
        notifications: Todas as notificações coletadas (vazia em sucesso)
    """

    success: bool
    message: str
    notifications: List[Notification] = field(default_factory=list)

    @classmethod
    def ok(cls, message: str) -> "CommandResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, message: str, notifications: Notifications) -> "CommandResult":
        return cls(success=False, message=message, notifications=list(notifications))

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "success": self.success,
            "message": self.message,
            "notifications": [n.to_dict() for n in self.notifications],
        }
