"""
Repositórios Django para persistência de Alunos e Assinaturas.

Implementam as interfaces (Ports) definidas no Core.
São DRIVEN ADAPTERS - acionados pelo Core em resposta a operações.

Responsabilidades:
- Implementar StudentRepository protocol
- Mapear entities para models e vice-versa
- Gravar o agregado inteiro em uma transação
"""

from typing import Optional
import logging

from django.db import transaction

from src.core.assinaturas.entities import StudentEntity

from .mappers import StudentMapper
from .models import PaymentModel, StudentModel, SubscriptionModel

logger = logging.getLogger(__name__)


class DjangoStudentRepository:
    """
    Implementação Django do StudentRepository.

    Example:
        repo = DjangoStudentRepository()

        if not repo.document_exists("53020223385"):
            repo.create_subscription(student)
    """

    def __init__(self):
        """Inicializa repository."""
        self._mapper = StudentMapper()

    def document_exists(self, document: str) -> bool:
        return StudentModel.objects.filter(document_number=document).exists()

    def email_exists(self, email: str) -> bool:
        return StudentModel.objects.filter(email__iexact=email).exists()

    def create_subscription(self, student: StudentEntity) -> None:
        """
        Persiste aluno, assinaturas e pagamentos atomicamente.

        Args:
            student: Agregado validado pelo handler
        """
        logger.debug(f"Saving student: {student.id}")

        student_model, children = self._mapper.to_models(student)

        with transaction.atomic():
            student_model.save(force_insert=True)
            for subscription_model, payment_models in children:
                subscription_model.save(force_insert=True)
                for payment_model in payment_models:
                    payment_model.save(force_insert=True)

        logger.info(
            f"Student saved: {student.id} "
            f"({len(children)} assinatura(s))"
        )

    def get_by_document(self, document: str) -> Optional[StudentEntity]:
        """
        Busca aluno pelo documento, com assinaturas e pagamentos.

        Returns:
            Entidade encontrada ou None
        """
        try:
            model = StudentModel.objects.get(document_number=document)
        except StudentModel.DoesNotExist:
            logger.debug(f"Student not found: {document}")
            return None

        subscriptions = SubscriptionModel.objects.filter(student=model).prefetch_related('payments')
        children = [(sub, list(sub.payments.all())) for sub in subscriptions]

        return self._mapper.to_entity(model, children)

    def count(self) -> int:
        return StudentModel.objects.count()

    def count_payments(self) -> int:
        return PaymentModel.objects.count()
