"""
URL Configuration do serviço de Assinaturas.

Estrutura:
- /assinaturas/ - API de Assinaturas
- /health/ - Health check
"""

from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    path('assinaturas/', include('src.adapters.django_app.assinaturas.urls')),
    path('health/', health, name='health'),
]
