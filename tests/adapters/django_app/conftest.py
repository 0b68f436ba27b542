"""
Configuração pytest para testes com Django.

Este arquivo configura:
- Django settings para testes (SQLite em memória, e-mail locmem)
- Container DI limpo a cada teste
- Fixtures compartilhadas
"""

import pytest


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'src.adapters.django_app.assinaturas',
            ],
            ROOT_URLCONF='src.config.urls',
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
            EMAIL_BACKEND='django.core.mail.backends.locmem.EmailBackend',
            DEFAULT_FROM_EMAIL='Balta <hello@balta.io>',
            EMAIL_SERVICE_MODE='sync',
            SUBSCRIPTION_DURATION_MONTHS=1,
        )
        django.setup()


@pytest.fixture(autouse=True)
def clean_container():
    """Cada teste inicia com container novo."""
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def in_memory_container():
    """
    Container global com adapters InMemory.

    Substitui repositório e e-mail para testar views sem banco.
    """
    from dependency_injector import providers

    from src.config.container import get_container
    from src.core.assinaturas.ports import InMemoryEmailService, InMemoryStudentRepository

    container = get_container()
    container.student_repository.override(providers.Singleton(InMemoryStudentRepository))
    container.email_service.override(providers.Singleton(InMemoryEmailService))

    yield container

    container.student_repository.reset_override()
    container.email_service.reset_override()


@pytest.fixture
def sample_student(boleto_command):
    """Aluno válido com assinatura e pagamento via boleto (sem banco)."""
    from src.core.assinaturas.ports import InMemoryEmailService, InMemoryStudentRepository
    from src.core.assinaturas.use_cases import SubscriptionHandler

    repository = InMemoryStudentRepository()
    SubscriptionHandler(repository, InMemoryEmailService()).handle(boleto_command)
    return repository.list_all()[0]
