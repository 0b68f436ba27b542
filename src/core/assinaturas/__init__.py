"""
Domínio de Assinaturas - Alunos, Assinaturas e Pagamentos.

Este módulo contém toda a lógica de negócio relacionada ao cadastro
de alunos assinantes, incluindo:
- Value Objects (Name, Document, Email, Address)
- Entidades (StudentEntity, SubscriptionEntity, pagamentos)
- Comandos e resultado (DTOs)
- Ports (StudentRepository, EmailService)
- Use Case (SubscriptionHandler)

Características do Domínio:
- Objetos auto-validáveis que acumulam notificações
- Uma assinatura ativa por aluno
- Handler como único ponto que transforma notificações em falha
"""

from .value_objects import Name, Document, DocumentType, Email, Address
from .entities import (
    PaymentMethod,
    PaymentEntity,
    BoletoPaymentEntity,
    PayPalPaymentEntity,
    CreditCardPaymentEntity,
    SubscriptionEntity,
    StudentEntity,
)
from .dtos import (
    CreateSubscriptionCommand,
    CreateBoletoSubscriptionCommand,
    CreatePayPalSubscriptionCommand,
    CreateCreditCardSubscriptionCommand,
    CommandResult,
    command_from_dict,
)
from .ports import StudentRepository, EmailService
from .use_cases import SubscriptionHandler

__all__ = [
    # Value Objects
    "Name",
    "Document",
    "DocumentType",
    "Email",
    "Address",
    # Entities
    "PaymentMethod",
    "PaymentEntity",
    "BoletoPaymentEntity",
    "PayPalPaymentEntity",
    "CreditCardPaymentEntity",
    "SubscriptionEntity",
    "StudentEntity",
    # DTOs
    "CreateSubscriptionCommand",
    "CreateBoletoSubscriptionCommand",
    "CreatePayPalSubscriptionCommand",
    "CreateCreditCardSubscriptionCommand",
    "CommandResult",
    "command_from_dict",
    # Ports
    "StudentRepository",
    "EmailService",
    # Use Cases
    "SubscriptionHandler",
]
