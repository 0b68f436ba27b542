"""
Entidades do Domínio de Assinaturas.

Este módulo define as entidades que encapsulam as regras de negócio
de alunos, assinaturas e pagamentos.

Entidades:
- StudentEntity: Agregado principal (aluno e suas assinaturas)
- SubscriptionEntity: Assinatura com seus pagamentos
- PaymentEntity: Pagamento base e subtipos (Boleto, PayPal, Cartão)

Regras de Negócio Encapsuladas:
- Um aluno tem no máximo uma assinatura ativa
- Assinatura é anexada ao aluno ainda sem pagamentos
- Total do pagamento maior que zero e valor pago cobrindo o total
- Valores finitos, com até 10 dígitos inteiros e 2 casas decimais

Violações não lançam exceção: viram notificações na entidade.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional
import uuid

from src.core.shared.contract import Contract
from src.core.shared.entity import Entity

from .value_objects import Address, Document, Email, Name


class PaymentMethod(Enum):
    """Meios de pagamento suportados."""

    BOLETO = "Boleto"
    PAYPAL = "PayPal"
    CREDIT_CARD = "Cartão de Crédito"


def _generate_payment_number() -> str:
    return uuid.uuid4().hex[:10].upper()


@dataclass(eq=False)
class PaymentEntity(Entity):
    """
    Entidade de Domínio: Pagamento.

    Base dos meios de pagamento. Não deve ser instanciada diretamente
    pelo handler; use um dos subtipos.

    Attributes:
        paid_date: Data do pagamento
        expire_date: Data de vencimento
        total: Valor devido
        total_paid: Valor efetivamente pago
        payer: Nome do pagador (pessoa ou empresa)
        document: Documento do pagador
        address: Endereço de cobrança
        email: E-mail do pagador
        number: Número do pagamento (gerado)
    """

    paid_date: datetime = field(default_factory=datetime.now)
    expire_date: datetime = field(default_factory=datetime.now)
    total: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    payer: str = ""
    document: Optional[Document] = None
    address: Optional[Address] = None
    email: Optional[Email] = None
    number: str = field(default_factory=_generate_payment_number)

    method = None

    # Limites da coluna DecimalField(max_digits=12, decimal_places=2)
    MAX_DIGITS = 12
    DECIMAL_PLACES = 2

    def __post_init__(self):
        self.total = Decimal(self.total)
        self.total_paid = Decimal(self.total_paid)

        self.add_notifications(
            Contract()
            .requires()
            .has_precision(self.total, self.MAX_DIGITS, self.DECIMAL_PLACES, "Payment.Total",
                           "Total must be a finite amount with at most 10 integer digits "
                           "and 2 decimal places")
            .has_precision(self.total_paid, self.MAX_DIGITS, self.DECIMAL_PLACES,
                           "Payment.TotalPaid",
                           "Total paid must be a finite amount with at most 10 integer digits "
                           "and 2 decimal places")
            .is_greater_than(self.total, Decimal("0"), "Payment.Total",
                             "Total must be greater than zero")
            .is_greater_or_equals_than(self.total_paid, self.total, "Payment.TotalPaid",
                                       "Total paid is less than the payment total")
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"number={self.number}, "
            f"total={self.total}, "
            f"payer='{self.payer}'"
            f")"
        )


@dataclass(eq=False)
class BoletoPaymentEntity(PaymentEntity):
    bar_code: str = ""
    boleto_number: str = ""

    method = PaymentMethod.BOLETO


@dataclass(eq=False)
class PayPalPaymentEntity(PaymentEntity):
    transaction_code: str = ""

    method = PaymentMethod.PAYPAL


@dataclass(eq=False)
class CreditCardPaymentEntity(PaymentEntity):
    card_holder_name: str = ""
    card_number: str = ""
    last_transaction_number: str = ""

    method = PaymentMethod.CREDIT_CARD


@dataclass(eq=False)
class SubscriptionEntity(Entity):
    """
    Entidade de Domínio: Assinatura.

    Ativa quando não tem data de expiração ou quando ela ainda está
    no futuro no momento da criação.

    Attributes:
        expire_date: Fim da assinatura (None = sem expiração)
        create_date: Data/hora de criação
        last_update_date: Data/hora da última alteração
        active: Se está ativa
        payments: Pagamentos em ordem de inclusão
    """

    expire_date: Optional[datetime] = None
    create_date: datetime = field(default_factory=datetime.now)
    last_update_date: datetime = field(default_factory=datetime.now)
    active: Optional[bool] = None
    payments: List[PaymentEntity] = field(default_factory=list)

    def __post_init__(self):
        if self.active is None:
            self.active = self.expire_date is None or self.expire_date > self.create_date

    def add_payment(self, payment: PaymentEntity) -> None:
        """Inclui pagamento na assinatura."""
        self.payments.append(payment)
        self._touch()

    def activate(self) -> None:
        self.active = True
        self._touch()

    def inactivate(self) -> None:
        self.active = False
        self._touch()

    def _touch(self) -> None:
        """Atualiza timestamp de modificação."""
        self.last_update_date = datetime.now()

    def __repr__(self) -> str:
        return (
            f"SubscriptionEntity("
            f"id={self.id[:8]}..., "
            f"active={self.active}, "
            f"payments={len(self.payments)}"
            f")"
        )


@dataclass(eq=False)
class StudentEntity(Entity):
    """
    Entidade de Domínio: Aluno.

    Agregado principal do contexto. Na construção, herda as
    notificações de nome, documento e e-mail.

    Invariantes:
    - No máximo uma assinatura ativa
    - Assinatura anexada sem pagamentos (pagamentos entram depois)

    Example:
        aluno = StudentEntity(name, document, email)
        aluno.add_subscription(SubscriptionEntity(expire_date=None))

        if aluno.is_invalid:
            ...
    """

    name: Optional[Name] = None
    document: Optional[Document] = None
    email: Optional[Email] = None
    address: Optional[Address] = None
    subscriptions: List[SubscriptionEntity] = field(default_factory=list)

    def __post_init__(self):
        self.add_notifications(self.name, self.document, self.email)

    def add_subscription(self, subscription: SubscriptionEntity) -> None:
        """
        Anexa assinatura ao aluno.

        Regras:
        - Rejeitada se o aluno já tem assinatura ativa
        - Rejeitada se a assinatura já possui pagamentos

        Assinaturas rejeitadas não são anexadas; a violação fica
        registrada nas notificações do aluno.
        """
        contract = (
            Contract()
            .requires()
            .is_false(self.has_active_subscription, "Student.Subscriptions",
                      "You already have a subscription active")
            .are_equals(len(subscription.payments), 0, "Student.Subscriptions.Payments",
                        "This subscription must have no payments when attached")
        )

        if contract.is_invalid:
            self.add_notifications(contract)
            return

        self.subscriptions.append(subscription)

    @property
    def has_active_subscription(self) -> bool:
        return any(sub.active for sub in self.subscriptions)

    @property
    def active_subscription(self) -> Optional[SubscriptionEntity]:
        for sub in self.subscriptions:
            if sub.active:
                return sub
        return None

    def __repr__(self) -> str:
        return (
            f"StudentEntity("
            f"id={self.id[:8]}..., "
            f"name='{self.name}', "
            f"subscriptions={len(self.subscriptions)}"
            f")"
        )
