"""
Mappers para conversão entre Entities (Core) e Models (Django).

Responsabilidades:
- Converter StudentEntity → StudentModel + SubscriptionModel + PaymentModel
- Converter models carregados do banco → StudentEntity (agregado completo)

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from datetime import datetime
from typing import List, Optional, Tuple

from django.utils import timezone

from src.core.assinaturas.entities import (
    BoletoPaymentEntity,
    CreditCardPaymentEntity,
    PaymentEntity,
    PaymentMethod,
    PayPalPaymentEntity,
    StudentEntity,
    SubscriptionEntity,
)
from src.core.assinaturas.value_objects import (
    Address,
    Document,
    DocumentType,
    Email,
    Name,
)

from .models import PaymentModel, StudentModel, SubscriptionModel


def _aware(value: Optional[datetime]) -> Optional[datetime]:
    """Datas do Core são ingênuas; o banco guarda com timezone."""
    if value is not None and timezone.is_naive(value):
        return timezone.make_aware(value)
    return value


class StudentMapper:
    """
    Mapper para o agregado Aluno.

    Responsável por:
    - to_models(): Entity → (StudentModel, [(SubscriptionModel, [PaymentModel])])
    - to_entity(): StudentModel (com relacionamentos) → Entity
    """

    @staticmethod
    def to_model(entity: StudentEntity) -> StudentModel:
        """
        Converte StudentEntity para StudentModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        address = entity.address
        return StudentModel(
            id=entity.id,
            first_name=entity.name.first_name,
            last_name=entity.name.last_name,
            document_number=entity.document.number,
            document_type=entity.document.type.value,
            email=entity.email.address,
            street=address.street if address else '',
            number=address.number if address else '',
            neighborhood=address.neighborhood if address else '',
            city=address.city if address else '',
            state=address.state if address else '',
            country=address.country if address else '',
            zip_code=address.zip_code if address else '',
        )

    @staticmethod
    def subscription_to_model(
        entity: SubscriptionEntity,
        student: StudentModel,
    ) -> SubscriptionModel:
        return SubscriptionModel(
            id=entity.id,
            student=student,
            create_date=_aware(entity.create_date),
            last_update_date=_aware(entity.last_update_date),
            expire_date=_aware(entity.expire_date),
            active=entity.active,
        )

    @staticmethod
    def payment_to_model(
        entity: PaymentEntity,
        subscription: SubscriptionModel,
    ) -> PaymentModel:
        model = PaymentModel(
            id=entity.id,
            subscription=subscription,
            method=entity.method.value,
            number=entity.number,
            paid_date=_aware(entity.paid_date),
            expire_date=_aware(entity.expire_date),
            total=entity.total,
            total_paid=entity.total_paid,
            payer=entity.payer,
            payer_document_number=entity.document.number,
            payer_document_type=entity.document.type.value,
            payer_email=entity.email.address,
            street=entity.address.street,
            address_number=entity.address.number,
            neighborhood=entity.address.neighborhood,
            city=entity.address.city,
            state=entity.address.state,
            country=entity.address.country,
            zip_code=entity.address.zip_code,
        )

        if isinstance(entity, BoletoPaymentEntity):
            model.bar_code = entity.bar_code
            model.boleto_number = entity.boleto_number
        elif isinstance(entity, PayPalPaymentEntity):
            model.transaction_code = entity.transaction_code
        elif isinstance(entity, CreditCardPaymentEntity):
            model.card_holder_name = entity.card_holder_name
            model.card_number = entity.card_number
            model.last_transaction_number = entity.last_transaction_number

        return model

    @classmethod
    def to_models(
        cls,
        entity: StudentEntity,
    ) -> Tuple[StudentModel, List[Tuple[SubscriptionModel, List[PaymentModel]]]]:
        """
        Converte o agregado completo em models não salvos.

        Returns:
            (student_model, [(subscription_model, [payment_models])])
        """
        student_model = cls.to_model(entity)
        children = []
        for subscription in entity.subscriptions:
            subscription_model = cls.subscription_to_model(subscription, student_model)
            payment_models = [
                cls.payment_to_model(payment, subscription_model)
                for payment in subscription.payments
            ]
            children.append((subscription_model, payment_models))
        return student_model, children

    @staticmethod
    def payment_to_entity(model: PaymentModel) -> PaymentEntity:
        method = PaymentMethod(model.method)
        common = dict(
            id=model.id,
            number=model.number,
            paid_date=model.paid_date,
            expire_date=model.expire_date,
            total=model.total,
            total_paid=model.total_paid,
            payer=model.payer,
            document=Document(model.payer_document_number, DocumentType(model.payer_document_type)),
            address=Address(
                model.street,
                model.address_number,
                model.neighborhood,
                model.city,
                model.state,
                model.country,
                model.zip_code,
            ),
            email=Email(model.payer_email),
        )

        if method is PaymentMethod.BOLETO:
            return BoletoPaymentEntity(
                bar_code=model.bar_code,
                boleto_number=model.boleto_number,
                **common,
            )
        if method is PaymentMethod.PAYPAL:
            return PayPalPaymentEntity(transaction_code=model.transaction_code, **common)
        return CreditCardPaymentEntity(
            card_holder_name=model.card_holder_name,
            card_number=model.card_number,
            last_transaction_number=model.last_transaction_number,
            **common,
        )

    @classmethod
    def subscription_to_entity(
        cls,
        model: SubscriptionModel,
        payments: List[PaymentModel],
    ) -> SubscriptionEntity:
        return SubscriptionEntity(
            id=model.id,
            expire_date=model.expire_date,
            create_date=model.create_date,
            last_update_date=model.last_update_date,
            active=model.active,
            payments=[cls.payment_to_entity(p) for p in payments],
        )

    @classmethod
    def to_entity(
        cls,
        model: StudentModel,
        subscriptions: List[Tuple[SubscriptionModel, List[PaymentModel]]] = (),
    ) -> StudentEntity:
        """
        Converte models para StudentEntity.

        Note:
            Assinaturas são atribuídas diretamente, sem passar por
            add_subscription(): dados já foram validados na criação.
        """
        address = None
        if model.street:
            address = Address(
                model.street,
                model.number,
                model.neighborhood,
                model.city,
                model.state,
                model.country,
                model.zip_code,
            )

        return StudentEntity(
            id=model.id,
            name=Name(model.first_name, model.last_name),
            document=Document(model.document_number, DocumentType(model.document_type)),
            email=Email(model.email),
            address=address,
            subscriptions=[
                cls.subscription_to_entity(sub, payments)
                for sub, payments in subscriptions
            ],
        )
