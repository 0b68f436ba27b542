"""
Tarefas Celery de notificação.

Executadas pelo worker na fila "notifications":
    celery -A src.config.celery worker -Q notifications -l INFO
"""

import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    max_retries=3,
    default_retry_delay=60,
    autoretry_for=(Exception,),
    acks_late=True,
)
def send_email_task(self, to_name: str, to_address: str, subject: str, body: str) -> None:
    """
    Envia e-mail via DjangoEmailService.

    Args:
        to_name: Nome do destinatário
        to_address: E-mail do destinatário
        subject: Assunto
        body: Corpo em texto puro
    """
    from .services import DjangoEmailService

    logger.info(
        f"[TASK] Enviando e-mail para {to_address} "
        f"(tentativa {self.request.retries + 1})"
    )

    DjangoEmailService().send(to_name, to_address, subject, body)
