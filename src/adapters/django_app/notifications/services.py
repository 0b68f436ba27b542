"""
E-mail Services - Implementações do port EmailService.

Implementações:
- DjangoEmailService: Envia na hora via django.core.mail (SMTP configurado)
- CeleryEmailService: Enfileira envio para worker Celery (produção)
- LoggingEmailService: Apenas loga (desenvolvimento)

Seleção feita no container conforme EMAIL_SERVICE_MODE.
"""

from email.utils import formataddr
from typing import Optional
import logging

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)


class DjangoEmailService:
    """
    Envio síncrono usando o backend de e-mail do Django.

    Example:
        service = DjangoEmailService()
        service.send("Bruce Wayne", "batman@dc.com", "Welcome!", "...")
    """

    def __init__(self, from_email: Optional[str] = None):
        """
        Args:
            from_email: Remetente (default: settings.DEFAULT_FROM_EMAIL)
        """
        self._from_email = from_email

    @property
    def from_email(self) -> str:
        return self._from_email or settings.DEFAULT_FROM_EMAIL

    def send(self, to_name: str, to_address: str, subject: str, body: str) -> None:
        recipient = formataddr((to_name, to_address))

        try:
            send_mail(
                subject,
                body,
                self.from_email,
                [recipient],
                fail_silently=False,
            )
        except Exception as e:
            logger.error(f"Falha ao enviar e-mail para {to_address}: {e}")
            raise

        logger.info(f"[EMAIL] '{subject}' enviado para {to_address}")


class CeleryEmailService:
    """
    Envio assíncrono: publica tarefa na fila de notificações.

    O handler não espera o SMTP; falhas são tratadas com retry
    pelo worker.
    """

    def send(self, to_name: str, to_address: str, subject: str, body: str) -> None:
        from .tasks import send_email_task

        send_email_task.delay(
            to_name=to_name,
            to_address=to_address,
            subject=subject,
            body=body,
        )

        logger.info(f"[EMAIL] '{subject}' enfileirado para {to_address}")


class LoggingEmailService:
    """E-mail service que apenas loga (desenvolvimento sem SMTP)."""

    def __init__(self, log_level: int = logging.INFO):
        self._log_level = log_level

    def send(self, to_name: str, to_address: str, subject: str, body: str) -> None:
        logger.log(
            self._log_level,
            f"[EMAIL] Para: {to_name} <{to_address}> | "
            f"Assunto: {subject} | Corpo: {body}"
        )
