"""
Ports (Interfaces) do Domínio de Assinaturas.

Define os contratos que os Adapters de infraestrutura devem implementar.

Tipos de Ports:
- StudentRepository: Persistência e checagem de unicidade de alunos
- EmailService: Envio de e-mails transacionais

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoStudentRepository:
        def create_subscription(self, student: StudentEntity) -> None:
            with transaction.atomic():
                ...
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import StudentEntity


@runtime_checkable
class StudentRepository(Protocol):
    """
    Interface para persistência de Alunos.

    Implementações:
    - DjangoStudentRepository (banco via ORM)
    - InMemoryStudentRepository (para testes)
    """

    def document_exists(self, document: str) -> bool:
        """
        Verifica se já existe aluno com o documento.

        Args:
            document: Número do documento (CPF)

        Returns:
            True se o documento já está em uso
        """
        ...

    def email_exists(self, email: str) -> bool:
        """
        Verifica se já existe aluno com o e-mail.

        Args:
            email: Endereço de e-mail

        Returns:
            True se o e-mail já está em uso
        """
        ...

    def create_subscription(self, student: StudentEntity) -> None:
        """
        Persiste aluno com assinaturas e pagamentos.

        Args:
            student: Agregado já validado
        """
        ...

    def get_by_document(self, document: str) -> Optional[StudentEntity]:
        """
        Busca aluno pelo número do documento.

        Returns:
            Entidade encontrada ou None
        """
        ...

    def count(self) -> int:
        """Conta total de alunos."""
        ...


@runtime_checkable
class EmailService(Protocol):
    """
    Interface para envio de e-mails.

    Implementações:
    - DjangoEmailService (síncrono, django.core.mail)
    - CeleryEmailService (assíncrono, via worker)
    - LoggingEmailService (desenvolvimento)
    - InMemoryEmailService (para testes)
    """

    def send(self, to_name: str, to_address: str, subject: str, body: str) -> None:
        """
        Envia e-mail.

        Args:
            to_name: Nome do destinatário
            to_address: E-mail do destinatário
            subject: Assunto
            body: Corpo em texto puro
        """
        ...


class InMemoryStudentRepository:
    """
    Implementação em memória do StudentRepository.

    Útil para:
    - Testes unitários
    - Prototipagem
    - Desenvolvimento local

    Não usar em produção!
    """

    def __init__(self):
        self._students: Dict[str, StudentEntity] = {}

    def document_exists(self, document: str) -> bool:
        return any(
            s.document is not None and s.document.number == document
            for s in self._students.values()
        )

    def email_exists(self, email: str) -> bool:
        return any(
            s.email is not None and s.email.address.lower() == (email or "").lower()
            for s in self._students.values()
        )

    def create_subscription(self, student: StudentEntity) -> None:
        self._students[student.id] = student

    def get_by_document(self, document: str) -> Optional[StudentEntity]:
        for student in self._students.values():
            if student.document is not None and student.document.number == document:
                return student
        return None

    def list_all(self) -> List[StudentEntity]:
        return list(self._students.values())

    def count(self) -> int:
        return len(self._students)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._students.clear()


@dataclass(frozen=True)
class SentEmail:
    to_name: str
    to_address: str
    subject: str
    body: str


class InMemoryEmailService:
    """E-mail service que apenas guarda as mensagens (para testes)."""

    def __init__(self):
        self.sent: List[SentEmail] = []

    def send(self, to_name: str, to_address: str, subject: str, body: str) -> None:
        self.sent.append(SentEmail(to_name, to_address, subject, body))

    def clear(self) -> None:
        self.sent.clear()
