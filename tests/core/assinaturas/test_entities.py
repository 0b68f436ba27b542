"""
Testes Unitários para Entidades do Domínio de Assinaturas.

Coverage:
- StudentEntity: notificações herdadas, uma assinatura ativa
- SubscriptionEntity: ativação e pagamentos
- PaymentEntity e subtipos: regras de valores
"""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from src.core.assinaturas.entities import (
    BoletoPaymentEntity,
    CreditCardPaymentEntity,
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


@pytest.fixture
def address():
    return Address("Mountain Drive", "1007", "Bristol", "Gotham", "NJ", "US", "07001")


@pytest.fixture
def student():
    return StudentEntity(
        name=Name("Bruce", "Wayne"),
        document=Document("35111507795", DocumentType.CPF),
        email=Email("batman@dc.com"),
    )


@pytest.fixture
def make_payment(address):
    def factory(cls=PayPalPaymentEntity, **overrides):
        data = dict(
            paid_date=datetime.now(),
            expire_date=datetime.now() + timedelta(days=5),
            total=Decimal("10"),
            total_paid=Decimal("10"),
            payer="Wayne Corp",
            document=Document("35111507795", DocumentType.CPF),
            address=address,
            email=Email("batman@dc.com"),
        )
        data.update(overrides)
        return cls(**data)
    return factory


class TestStudentEntity:
    """Testes para o agregado Aluno."""

    def test_aluno_valido(self, student):
        assert student.is_valid
        assert student.subscriptions == []
        assert len(student.id) == 36

    def test_aluno_herda_notificacoes_dos_value_objects(self):
        student = StudentEntity(
            name=Name("Al", "Wayne"),
            document=Document("123"),
            email=Email("batman"),
        )

        assert student.is_invalid
        assert [n.key for n in student.notifications] == [
            "Name.FirstName",
            "Document.Number",
            "Email.Address",
        ]

    def test_adicionar_assinatura(self, student):
        subscription = SubscriptionEntity(expire_date=None)

        student.add_subscription(subscription)

        assert student.is_valid
        assert student.subscriptions == [subscription]
        assert student.active_subscription is subscription

    def test_erro_quando_ja_tem_assinatura_ativa(self, student, make_payment):
        subscription = SubscriptionEntity(expire_date=None)
        student.add_subscription(subscription)
        subscription.add_payment(make_payment())

        student.add_subscription(SubscriptionEntity(expire_date=None))

        assert student.is_invalid
        assert "You already have a subscription active" in [
            n.message for n in student.notifications
        ]
        assert len(student.subscriptions) == 1

    def test_segunda_assinatura_sem_pagamentos_tambem_e_rejeitada(self, student):
        student.add_subscription(SubscriptionEntity(expire_date=None))
        student.add_subscription(SubscriptionEntity(expire_date=None))

        assert student.is_invalid
        assert len(student.subscriptions) == 1

    def test_assinatura_com_pagamentos_e_rejeitada(self, student, make_payment):
        subscription = SubscriptionEntity(expire_date=None)
        subscription.add_payment(make_payment())

        student.add_subscription(subscription)

        assert student.is_invalid
        assert student.notifications[0].key == "Student.Subscriptions.Payments"
        assert student.subscriptions == []

    def test_nova_assinatura_apos_inativar_a_anterior(self, student):
        first = SubscriptionEntity(expire_date=None)
        student.add_subscription(first)
        first.inactivate()

        student.add_subscription(SubscriptionEntity(expire_date=None))

        assert student.is_valid
        assert len(student.subscriptions) == 2


class TestSubscriptionEntity:
    """Testes para Assinatura."""

    def test_sem_expiracao_e_ativa(self):
        assert SubscriptionEntity(expire_date=None).active is True

    def test_expiracao_futura_e_ativa(self):
        now = datetime.now()
        subscription = SubscriptionEntity(
            expire_date=now + timedelta(days=30), create_date=now
        )

        assert subscription.active is True

    def test_expiracao_passada_e_inativa(self):
        now = datetime.now()
        subscription = SubscriptionEntity(
            expire_date=now - timedelta(days=1), create_date=now
        )

        assert subscription.active is False

    def test_add_payment_atualiza_data(self, make_payment):
        subscription = SubscriptionEntity(
            expire_date=None, last_update_date=datetime(2000, 1, 1)
        )

        subscription.add_payment(make_payment())

        assert len(subscription.payments) == 1
        assert subscription.last_update_date > datetime(2000, 1, 1)

    def test_activate_inactivate(self):
        subscription = SubscriptionEntity(expire_date=None)

        subscription.inactivate()
        assert subscription.active is False

        subscription.activate()
        assert subscription.active is True


class TestPaymentEntity:
    """Testes para Pagamentos."""

    def test_pagamento_valido(self, make_payment):
        payment = make_payment()

        assert payment.is_valid
        assert payment.method is PaymentMethod.PAYPAL
        assert len(payment.number) == 10

    def test_total_zero_invalido(self, make_payment):
        payment = make_payment(total=Decimal("0"), total_paid=Decimal("0"))

        assert [n.key for n in payment.notifications] == ["Payment.Total"]
        assert payment.notifications[0].message == "Total must be greater than zero"

    def test_valor_pago_menor_que_total(self, make_payment):
        payment = make_payment(total=Decimal("60"), total_paid=Decimal("59.99"))

        assert [n.key for n in payment.notifications] == ["Payment.TotalPaid"]

    @pytest.mark.parametrize("amount", ["NaN", "sNaN", "Infinity"])
    def test_valor_nao_finito_vira_notificacao(self, make_payment, amount):
        payment = make_payment(total=Decimal(amount), total_paid=Decimal(amount))

        assert payment.is_invalid
        assert "Payment.Total" in [n.key for n in payment.notifications]
        assert "Payment.TotalPaid" in [n.key for n in payment.notifications]

    def test_total_acima_da_capacidade(self, make_payment):
        payment = make_payment(total=Decimal("1e12"), total_paid=Decimal("1e12"))

        assert [n.key for n in payment.notifications] == ["Payment.Total", "Payment.TotalPaid"]

    def test_mais_de_duas_casas_decimais(self, make_payment):
        payment = make_payment(total=Decimal("10"), total_paid=Decimal("10.001"))

        assert [n.key for n in payment.notifications] == ["Payment.TotalPaid"]

    def test_maior_valor_aceito(self, make_payment):
        amount = Decimal("9999999999.99")

        assert make_payment(total=amount, total_paid=amount).is_valid

    def test_valores_convertidos_para_decimal(self, make_payment):
        payment = make_payment(total=60, total_paid="60.00")

        assert payment.total == Decimal("60")
        assert isinstance(payment.total_paid, Decimal)

    def test_subtipos(self, make_payment):
        boleto = make_payment(BoletoPaymentEntity, bar_code="123", boleto_number="456")
        card = make_payment(CreditCardPaymentEntity, card_holder_name="BRUCE WAYNE",
                            card_number="4111111111111111")

        assert boleto.method is PaymentMethod.BOLETO
        assert boleto.bar_code == "123"
        assert card.method is PaymentMethod.CREDIT_CARD
        assert card.card_holder_name == "BRUCE WAYNE"

    def test_numeros_unicos(self, make_payment):
        assert make_payment().number != make_payment().number
