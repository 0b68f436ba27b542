"""
Configuração do Django App para Assinaturas.
"""

from django.apps import AppConfig


class AssinaturasConfig(AppConfig):
    """Configuração do app Assinaturas."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.assinaturas'
    label = 'assinaturas'
    verbose_name = 'Gestão de Assinaturas'
