"""
Django Models para o domínio de Assinaturas.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/assinaturas/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Validação fica nas Entities e Value Objects do Core
- Models são mapeados para/de Entities via Mappers

Relacionamentos:
- StudentModel: Aluno (value objects achatados em colunas)
- SubscriptionModel: Assinaturas do aluno
- PaymentModel: Pagamentos (tabela única, colunas por meio de pagamento)
"""

from django.db import models
from django.utils import timezone


class DocumentTypeChoices(models.TextChoices):
    """Choices para tipo de documento (espelha DocumentType do Core)."""
    CPF = 'CPF', 'CPF'
    CNPJ = 'CNPJ', 'CNPJ'


class PaymentMethodChoices(models.TextChoices):
    """Choices para meio de pagamento (espelha PaymentMethod do Core)."""
    BOLETO = 'Boleto', 'Boleto'
    PAYPAL = 'PayPal', 'PayPal'
    CREDIT_CARD = 'Cartão de Crédito', 'Cartão de Crédito'


class StudentModel(models.Model):
    """
    Model Django para persistência de Alunos.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        first_name / last_name: Name
        document_number / document_type: Document
        email: Email (único)
        street ... zip_code: Address (opcional)
        created_at: Timestamp de criação
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do aluno"
    )

    first_name = models.CharField(max_length=40)
    last_name = models.CharField(max_length=40)

    document_number = models.CharField(
        max_length=14,
        unique=True,
        help_text="CPF/CNPJ sem formatação"
    )
    document_type = models.CharField(
        max_length=4,
        choices=DocumentTypeChoices.choices,
        default=DocumentTypeChoices.CPF,
    )

    email = models.CharField(
        max_length=254,
        unique=True,
        help_text="E-mail do aluno"
    )

    # Endereço (opcional)
    street = models.CharField(max_length=40, blank=True, default='')
    number = models.CharField(max_length=20, blank=True, default='')
    neighborhood = models.CharField(max_length=100, blank=True, default='')
    city = models.CharField(max_length=100, blank=True, default='')
    state = models.CharField(max_length=50, blank=True, default='')
    country = models.CharField(max_length=50, blank=True, default='')
    zip_code = models.CharField(max_length=20, blank=True, default='')

    created_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Data/hora de criação"
    )

    class Meta:
        db_table = 'students'
        verbose_name = 'Aluno'
        verbose_name_plural = 'Alunos'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.first_name} {self.last_name} ({self.document_number})"


class SubscriptionModel(models.Model):
    """Model Django para persistência de Assinaturas."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da assinatura"
    )

    student = models.ForeignKey(
        StudentModel,
        on_delete=models.CASCADE,
        related_name='subscriptions',
    )

    create_date = models.DateTimeField(default=timezone.now)
    last_update_date = models.DateTimeField(default=timezone.now)
    expire_date = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Fim da assinatura (vazio = sem expiração)"
    )
    active = models.BooleanField(default=True, db_index=True)

    class Meta:
        db_table = 'subscriptions'
        verbose_name = 'Assinatura'
        verbose_name_plural = 'Assinaturas'
        ordering = ['create_date']
        indexes = [
            models.Index(fields=['student', 'active'], name='subscriptions_student_active'),
        ]

    def __repr__(self):
        return f"<SubscriptionModel id={self.id[:8]} active={self.active}>"


class PaymentModel(models.Model):
    """
    Model Django para persistência de Pagamentos.

    Tabela única para todos os meios; colunas específicas ficam
    vazias nos meios que não as usam.
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do pagamento"
    )

    subscription = models.ForeignKey(
        SubscriptionModel,
        on_delete=models.CASCADE,
        related_name='payments',
    )

    method = models.CharField(
        max_length=30,
        choices=PaymentMethodChoices.choices,
        db_index=True,
    )
    number = models.CharField(max_length=10, db_index=True)
    paid_date = models.DateTimeField()
    expire_date = models.DateTimeField()
    total = models.DecimalField(max_digits=12, decimal_places=2)
    total_paid = models.DecimalField(max_digits=12, decimal_places=2)

    payer = models.CharField(max_length=200)
    payer_document_number = models.CharField(max_length=14)
    payer_document_type = models.CharField(
        max_length=4,
        choices=DocumentTypeChoices.choices,
        default=DocumentTypeChoices.CPF,
    )
    payer_email = models.CharField(max_length=254)

    # Endereço de cobrança
    street = models.CharField(max_length=40)
    address_number = models.CharField(max_length=20)
    neighborhood = models.CharField(max_length=100)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=50)
    country = models.CharField(max_length=50)
    zip_code = models.CharField(max_length=20)

    # Boleto
    bar_code = models.CharField(max_length=100, blank=True, default='')
    boleto_number = models.CharField(max_length=100, blank=True, default='')

    # PayPal
    transaction_code = models.CharField(max_length=100, blank=True, default='')

    # Cartão de crédito
    card_holder_name = models.CharField(max_length=200, blank=True, default='')
    card_number = models.CharField(max_length=30, blank=True, default='')
    last_transaction_number = models.CharField(max_length=100, blank=True, default='')

    class Meta:
        db_table = 'payments'
        verbose_name = 'Pagamento'
        verbose_name_plural = 'Pagamentos'
        ordering = ['paid_date']

    def __str__(self):
        return f"{self.method} {self.number} ({self.total})"
