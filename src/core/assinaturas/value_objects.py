"""
Value Objects do domínio de Assinaturas.

Imutáveis, com igualdade por valor e auto-validação. Dados inválidos
não impedem a construção: o objeto é retornado com notificações, e
quem o construiu decide se prossegue.

Value Objects:
- Name: Nome e sobrenome (3 a 40 caracteres cada)
- DocumentType / Document: CPF (11) ou CNPJ (14)
- Email: Endereço de e-mail bem formado
- Address: Endereço postal completo
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from src.core.shared.contract import Contract
from src.core.shared.entity import ValueObject
from src.core.shared.notifications import Notification


class DocumentType(Enum):
    """
    Tipos de documento aceitos.

    Tamanhos:
        CPF: 11 dígitos (pessoa física)
        CNPJ: 14 dígitos (pessoa jurídica)
    """

    CPF = "CPF"
    CNPJ = "CNPJ"

    @property
    def length(self) -> int:
        """Quantidade de caracteres exigida para o tipo."""
        length_map = {
            DocumentType.CPF: 11,
            DocumentType.CNPJ: 14,
        }
        return length_map[self]

    @classmethod
    def from_string(cls, value: str) -> "DocumentType":
        """
        Converte string para enum.

        Raises:
            ValueError: Se valor inválido
        """
        try:
            return cls[value.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(f"Tipo de documento inválido: {value}")


@dataclass(frozen=True)
class Name(ValueObject):
    """Nome completo do aluno ou pagador."""

    first_name: str
    last_name: str

    MIN_LENGTH = 3
    MAX_LENGTH = 40

    def validate(self) -> Tuple[Notification, ...]:
        return (
            Contract()
            .requires()
            .has_min_len(self.first_name, self.MIN_LENGTH, "Name.FirstName",
                         f"Name must have {self.MIN_LENGTH} characters minimum")
            .has_max_len(self.first_name, self.MAX_LENGTH, "Name.FirstName",
                         f"Name must have {self.MAX_LENGTH} characters maximum")
            .has_min_len(self.last_name, self.MIN_LENGTH, "Name.LastName",
                         f"Last Name must have {self.MIN_LENGTH} characters minimum")
            .has_max_len(self.last_name, self.MAX_LENGTH, "Name.LastName",
                         f"Last Name must have {self.MAX_LENGTH} characters maximum")
            .notifications
        )

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Document(ValueObject):
    """
    Documento fiscal.

    Válido somente se o número tiver exatamente o tamanho do tipo.
    Dígitos verificadores não são conferidos.
    """

    number: str
    type: DocumentType = DocumentType.CPF

    def validate(self) -> Tuple[Notification, ...]:
        return (
            Contract()
            .requires()
            .has_len(self.number, self.type.length, "Document.Number", "Document invalid")
            .notifications
        )

    def __str__(self) -> str:
        return self.number


@dataclass(frozen=True)
class Email(ValueObject):
    address: str

    def validate(self) -> Tuple[Notification, ...]:
        return (
            Contract()
            .requires()
            .is_email(self.address, "Email.Address", "Invalid e-mail")
            .notifications
        )

    def __str__(self) -> str:
        return self.address


@dataclass(frozen=True)
class Address(ValueObject):
    """
    Endereço postal.

    Todos os campos são obrigatórios; a rua deve ter entre 3 e 40
    caracteres.
    """

    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    country: str
    zip_code: str

    STREET_MIN_LENGTH = 3
    STREET_MAX_LENGTH = 40

    def validate(self) -> Tuple[Notification, ...]:
        contract = Contract().requires()

        required = (
            ("Street", self.street),
            ("Number", self.number),
            ("Neighborhood", self.neighborhood),
            ("City", self.city),
            ("State", self.state),
            ("Country", self.country),
            ("ZipCode", self.zip_code),
        )
        for field_name, value in required:
            contract.is_not_null_or_empty(
                value, f"Address.{field_name}", f"{field_name} is required"
            )

        if self.street and self.street.strip():
            contract.has_min_len(
                self.street.strip(), self.STREET_MIN_LENGTH, "Address.Street",
                f"Street must have {self.STREET_MIN_LENGTH} characters minimum",
            ).has_max_len(
                self.street.strip(), self.STREET_MAX_LENGTH, "Address.Street",
                f"Street must have {self.STREET_MAX_LENGTH} characters maximum",
            )

        return contract.notifications
