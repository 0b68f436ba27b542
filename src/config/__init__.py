"""
Configuração do serviço de Assinaturas.

Módulos:
- settings: Configurações Django
- urls: Rotas principais
- celery: Configuração Celery para tarefas assíncronas
- container: Dependency Injection Container
"""

# Carregar app Celery junto com o Django (shared_task usa esta app)
from .celery import app as celery_app

__all__ = ('celery_app',)
