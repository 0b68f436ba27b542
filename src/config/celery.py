"""
Configuração do Celery para processamento assíncrono.

O Celery é usado para:
- Envio de e-mails de boas-vindas fora do request/response

Arquitetura:
- Broker: RabbitMQ (mensagens entre Django e Workers)
- Backend: Redis (resultados de tarefas)

Uso:
    celery -A src.config.celery worker -Q default,notifications -l INFO
"""

import os
from celery import Celery
from kombu import Queue, Exchange

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

app = Celery('assinaturas')

# Configurações CELERY_* vindas do Django
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.task_default_queue = 'default'

app.conf.task_queues = (
    Queue('default', Exchange('default'), routing_key='default'),
    Queue('notifications', Exchange('notifications'), routing_key='notifications.#'),
)

app.conf.task_routes = {
    'src.adapters.django_app.notifications.tasks.*': {'queue': 'notifications'},
}

app.autodiscover_tasks([
    'src.adapters.django_app.notifications',
])
