"""
URL patterns para o domínio de Assinaturas.

Endpoints API JSON:
- POST /assinaturas/api/<method>/ - Cadastrar assinatura (boleto, paypal, cartao)
"""

from django.urls import path

from . import api_views

app_name = 'assinaturas'

urlpatterns = [
    path(
        'api/<str:method>/',
        api_views.CreateSubscriptionAPIView.as_view(),
        name='api_create',
    ),
]
