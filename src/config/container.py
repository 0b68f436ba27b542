"""
Dependency Injection Container.

Configura e gerencia as dependências do serviço de Assinaturas.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories)
- Selector: Implementação escolhida por configuração (email_service)
- Factory: Nova instância por chamada (handlers)
"""

from importlib import import_module
from typing import Optional

from dependency_injector import containers, providers

from src.core.assinaturas.ports import InMemoryEmailService, InMemoryStudentRepository
from src.core.assinaturas.use_cases import SubscriptionHandler


def _lazy(module: str, name: str):
    """
    Adia o import de adapters Django até o provider ser chamado.

    Models só podem ser importados depois de django.setup().
    """
    def factory(*args, **kwargs):
        return getattr(import_module(module), name)(*args, **kwargs)
    factory.__name__ = name
    return factory


EMAIL_SERVICES = 'src.adapters.django_app.notifications.services'

EMAIL_SERVICE_MODES = ('sync', 'celery', 'logging')


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: email_mode, subscription_months
    - Repositories: Persistência
    - Infrastructure: Serviços externos (e-mail)
    - Handlers: Use Cases

    Example:
        container = Container()
        container.config.from_dict({'email_mode': 'logging'})

        handler = container.subscription_handler()
        result = handler.handle(command)
    """

    config = providers.Configuration()

    # =========================================================================
    # Repositories
    # =========================================================================

    student_repository = providers.Singleton(
        _lazy('src.adapters.django_app.assinaturas.repositories', 'DjangoStudentRepository')
    )

    # =========================================================================
    # Infrastructure
    # =========================================================================

    email_service = providers.Selector(
        config.email_mode,
        sync=providers.Singleton(_lazy(EMAIL_SERVICES, 'DjangoEmailService')),
        celery=providers.Singleton(_lazy(EMAIL_SERVICES, 'CeleryEmailService')),
        logging=providers.Singleton(_lazy(EMAIL_SERVICES, 'LoggingEmailService')),
    )

    # =========================================================================
    # Handlers (Factory - nova instância por chamada)
    # =========================================================================

    subscription_handler = providers.Factory(
        SubscriptionHandler,
        student_repository=student_repository,
        email_service=email_service,
        subscription_months=config.subscription_months,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir, lendo a configuração dos settings Django.

    Raises:
        ImproperlyConfigured: Se EMAIL_SERVICE_MODE não é suportado
    """
    global _container

    if _container is None:
        from django.conf import settings
        from django.core.exceptions import ImproperlyConfigured

        email_mode = getattr(settings, 'EMAIL_SERVICE_MODE', 'sync')
        if email_mode not in EMAIL_SERVICE_MODES:
            raise ImproperlyConfigured(
                f"EMAIL_SERVICE_MODE inválido: {email_mode!r} "
                f"(use {', '.join(EMAIL_SERVICE_MODES)})"
            )

        _container = Container()
        _container.config.from_dict({
            'email_mode': email_mode,
            'subscription_months': getattr(settings, 'SUBSCRIPTION_DURATION_MONTHS', 1),
        })

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

class TestingContainer(containers.DeclarativeContainer):
    """
    Container para testes, com implementações InMemory.

    Example:
        container = TestingContainer()
        handler = container.subscription_handler()
        handler.handle(command)
        assert container.email_service().sent
    """

    config = providers.Configuration(default={'subscription_months': 1})

    student_repository = providers.Singleton(InMemoryStudentRepository)

    email_service = providers.Singleton(InMemoryEmailService)

    subscription_handler = providers.Factory(
        SubscriptionHandler,
        student_repository=student_repository,
        email_service=email_service,
        subscription_months=config.subscription_months,
    )
