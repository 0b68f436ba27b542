"""
Migration inicial para o domínio de Assinaturas.

Cria as tabelas:
- students: Alunos
- subscriptions: Assinaturas
- payments: Pagamentos (todos os meios)
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


DOCUMENT_TYPE_CHOICES = [
    ('CPF', 'CPF'),
    ('CNPJ', 'CNPJ'),
]


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabela: students
        # =================================================================
        migrations.CreateModel(
            name='StudentModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do aluno'
                )),
                ('first_name', models.CharField(max_length=40)),
                ('last_name', models.CharField(max_length=40)),
                ('document_number', models.CharField(
                    max_length=14,
                    unique=True,
                    help_text='CPF/CNPJ sem formatação'
                )),
                ('document_type', models.CharField(
                    max_length=4,
                    choices=DOCUMENT_TYPE_CHOICES,
                    default='CPF',
                )),
                ('email', models.CharField(
                    max_length=254,
                    unique=True,
                    help_text='E-mail do aluno'
                )),
                ('street', models.CharField(max_length=40, blank=True, default='')),
                ('number', models.CharField(max_length=20, blank=True, default='')),
                ('neighborhood', models.CharField(max_length=100, blank=True, default='')),
                ('city', models.CharField(max_length=100, blank=True, default='')),
                ('state', models.CharField(max_length=50, blank=True, default='')),
                ('country', models.CharField(max_length=50, blank=True, default='')),
                ('zip_code', models.CharField(max_length=20, blank=True, default='')),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                    help_text='Data/hora de criação'
                )),
            ],
            options={
                'verbose_name': 'Aluno',
                'verbose_name_plural': 'Alunos',
                'db_table': 'students',
                'ordering': ['-created_at'],
            },
        ),

        # =================================================================
        # Tabela: subscriptions
        # =================================================================
        migrations.CreateModel(
            name='SubscriptionModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único da assinatura'
                )),
                ('create_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('last_update_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('expire_date', models.DateTimeField(
                    null=True,
                    blank=True,
                    help_text='Fim da assinatura (vazio = sem expiração)'
                )),
                ('active', models.BooleanField(default=True, db_index=True)),
                ('student', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='subscriptions',
                    to='assinaturas.studentmodel',
                )),
            ],
            options={
                'verbose_name': 'Assinatura',
                'verbose_name_plural': 'Assinaturas',
                'db_table': 'subscriptions',
                'ordering': ['create_date'],
                'indexes': [
                    models.Index(fields=['student', 'active'], name='subscriptions_student_active'),
                ],
            },
        ),

        # =================================================================
        # Tabela: payments
        # =================================================================
        migrations.CreateModel(
            name='PaymentModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do pagamento'
                )),
                ('method', models.CharField(
                    max_length=30,
                    choices=[
                        ('Boleto', 'Boleto'),
                        ('PayPal', 'PayPal'),
                        ('Cartão de Crédito', 'Cartão de Crédito'),
                    ],
                    db_index=True,
                )),
                ('number', models.CharField(max_length=10, db_index=True)),
                ('paid_date', models.DateTimeField()),
                ('expire_date', models.DateTimeField()),
                ('total', models.DecimalField(max_digits=12, decimal_places=2)),
                ('total_paid', models.DecimalField(max_digits=12, decimal_places=2)),
                ('payer', models.CharField(max_length=200)),
                ('payer_document_number', models.CharField(max_length=14)),
                ('payer_document_type', models.CharField(
                    max_length=4,
                    choices=DOCUMENT_TYPE_CHOICES,
                    default='CPF',
                )),
                ('payer_email', models.CharField(max_length=254)),
                ('street', models.CharField(max_length=40)),
                ('address_number', models.CharField(max_length=20)),
                ('neighborhood', models.CharField(max_length=100)),
                ('city', models.CharField(max_length=100)),
                ('state', models.CharField(max_length=50)),
                ('country', models.CharField(max_length=50)),
                ('zip_code', models.CharField(max_length=20)),
                ('bar_code', models.CharField(max_length=100, blank=True, default='')),
                ('boleto_number', models.CharField(max_length=100, blank=True, default='')),
                ('transaction_code', models.CharField(max_length=100, blank=True, default='')),
                ('card_holder_name', models.CharField(max_length=200, blank=True, default='')),
                ('card_number', models.CharField(max_length=30, blank=True, default='')),
                ('last_transaction_number', models.CharField(max_length=100, blank=True, default='')),
                ('subscription', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='payments',
                    to='assinaturas.subscriptionmodel',
                )),
            ],
            options={
                'verbose_name': 'Pagamento',
                'verbose_name_plural': 'Pagamentos',
                'db_table': 'payments',
                'ordering': ['paid_date'],
            },
        ),
    ]
