"""
Use Cases (Application Services) do Domínio de Assinaturas.

SubscriptionHandler orquestra o cadastro de uma assinatura:

Fluxo:
1. Validar comando (falha imediata se inválido)
2. Verificar unicidade de documento e e-mail no repositório
3. Construir value objects
4. Construir aluno, assinatura e pagamento
5. Anexar assinatura ao aluno (ainda sem pagamentos)
6. Anexar pagamento à assinatura
7. Agregar notificações de todas as partes
8. Se houver qualquer notificação: resultado de falha, nada persistido
9. Persistir via repositório
10. Enviar e-mail de boas-vindas
11. Retornar resultado de sucesso

Princípios:
- Erros de domínio são notificações, nunca exceções
- Dependências injetadas (DI)
- Nenhum estado compartilhado entre execuções
"""

import calendar
import logging
from datetime import datetime
from typing import Callable, Dict, Type

from src.core.shared.notifications import Notifications

from .dtos import (
    CommandResult,
    CreateBoletoSubscriptionCommand,
    CreateCreditCardSubscriptionCommand,
    CreatePayPalSubscriptionCommand,
    CreateSubscriptionCommand,
)
from .entities import (
    BoletoPaymentEntity,
    CreditCardPaymentEntity,
    PaymentEntity,
    PayPalPaymentEntity,
    StudentEntity,
    SubscriptionEntity,
)
from .ports import EmailService, StudentRepository
from .value_objects import Address, Document, DocumentType, Email, Name

logger = logging.getLogger(__name__)


WELCOME_BODY = "Your subscription has been approved. Go ahead and create your study plan."


def add_months(moment: datetime, months: int) -> datetime:
    """Soma meses a uma data, ajustando o dia ao fim do mês quando preciso."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class SubscriptionHandler:
    """
    Use Case: Cadastrar aluno com assinatura e pagamento.

    Attributes:
        student_repository: Repositório de alunos
        email_service: Serviço de e-mail
        subscription_months: Duração da assinatura criada
        clock: Fonte da data/hora atual

    Example:
        handler = SubscriptionHandler(student_repo, email_service)
        result = handler.handle(CreateBoletoSubscriptionCommand(...))

        if not result.success:
            for n in result.notifications:
                print(n.key, n.message)
    """

    SUCCESS_MESSAGE = "Subscription successfully added"
    FAILURE_MESSAGE = "Subscription register failed"

    def __init__(
        self,
        student_repository: StudentRepository,
        email_service: EmailService,
        subscription_months: int = 1,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.student_repository = student_repository
        self.email_service = email_service
        self.subscription_months = subscription_months
        self.clock = clock

    def handle(self, command: CreateSubscriptionCommand) -> CommandResult:
        """
        Despacha o comando para o método do meio de pagamento.

        Raises:
            TypeError: Se o tipo de comando não é suportado
        """
        handlers: Dict[Type[CreateSubscriptionCommand], Callable] = {
            CreateBoletoSubscriptionCommand: self.handle_boleto,
            CreatePayPalSubscriptionCommand: self.handle_paypal,
            CreateCreditCardSubscriptionCommand: self.handle_credit_card,
        }

        handler = handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Comando não suportado: {type(command).__name__}")

        return handler(command)

    def handle_boleto(self, command: CreateBoletoSubscriptionCommand) -> CommandResult:
        return self._register(
            command,
            lambda **common: BoletoPaymentEntity(
                bar_code=command.bar_code,
                boleto_number=command.boleto_number,
                **common,
            ),
        )

    def handle_paypal(self, command: CreatePayPalSubscriptionCommand) -> CommandResult:
        return self._register(
            command,
            lambda **common: PayPalPaymentEntity(
                transaction_code=command.transaction_code,
                **common,
            ),
        )

    def handle_credit_card(self, command: CreateCreditCardSubscriptionCommand) -> CommandResult:
        return self._register(
            command,
            lambda **common: CreditCardPaymentEntity(
                card_holder_name=command.card_holder_name,
                card_number=command.card_number,
                last_transaction_number=command.last_transaction_number,
                **common,
            ),
        )

    def _register(
        self,
        command: CreateSubscriptionCommand,
        build_payment: Callable[..., PaymentEntity],
    ) -> CommandResult:
        notifications = Notifications()

        # 1. Fail fast
        if command.is_invalid:
            notifications.extend(command)
            logger.info(f"Comando inválido para documento {command.document}: "
                        f"{notifications.messages()}")
            return CommandResult.fail(self.FAILURE_MESSAGE, notifications)

        # 2. Unicidade
        if self.student_repository.document_exists(command.document):
            notifications.add("Document", "Document already in use")

        if self.student_repository.email_exists(command.email):
            notifications.add("Email", "E-mail already in use")

        # 3. Value objects
        name = Name(command.first_name, command.last_name)
        document = Document(command.document, DocumentType.CPF)
        email = Email(command.email)
        address = Address(
            command.street,
            command.number,
            command.neighborhood,
            command.city,
            command.state,
            command.country,
            command.zip_code,
        )
        payer_document = Document(command.payer_document, command.payer_document_type)
        payer_email = Email(command.payer_email) if command.payer_email else email

        # 4. Entidades
        now = self.clock()
        student = StudentEntity(name=name, document=document, email=email, address=address)
        subscription = SubscriptionEntity(
            expire_date=add_months(now, self.subscription_months),
            create_date=now,
            last_update_date=now,
        )
        payment = build_payment(
            paid_date=command.paid_date,
            expire_date=command.expire_date,
            total=command.total,
            total_paid=command.total_paid,
            payer=command.payer,
            document=payer_document,
            address=address,
            email=payer_email,
        )

        # 5-6. Relacionamentos
        student.add_subscription(subscription)
        subscription.add_payment(payment)

        # 7. Agregar (student já carrega name/document/email)
        notifications.extend(student, address, subscription, payment, payer_document)
        if payer_email is not email:
            notifications.extend(payer_email)

        # 8. Abortar se houver notificações
        if notifications:
            logger.info(f"Cadastro de assinatura recusado para documento {command.document}: "
                        f"{notifications.messages()}")
            return CommandResult.fail(self.FAILURE_MESSAGE, notifications)

        # 9. Persistir
        self.student_repository.create_subscription(student)

        # 10. Boas-vindas
        self.email_service.send(
            str(student.name),
            student.email.address,
            f"Welcome {student.name}!",
            WELCOME_BODY,
        )

        logger.info(
            f"Assinatura {subscription.id} criada para aluno {student.id} "
            f"via {payment.method.value}"
        )

        return CommandResult.ok(self.SUCCESS_MESSAGE)
