"""
Testes Unitários para Value Objects do Domínio de Assinaturas.

Coverage:
- Name: limites de 3 a 40 caracteres
- Document: CPF (11) e CNPJ (14)
- Email: formato
- Address: campos obrigatórios
"""

import pytest

from src.core.assinaturas.value_objects import (
    Address,
    Document,
    DocumentType,
    Email,
    Name,
)


def make_address(**overrides):
    data = dict(
        street="Mountain Drive",
        number="1007",
        neighborhood="Bristol",
        city="Gotham",
        state="NJ",
        country="US",
        zip_code="07001",
    )
    data.update(overrides)
    return Address(**data)


class TestDocument:
    """Testes para Document."""

    def test_cnpj_invalido_com_tamanho_errado(self):
        assert Document("123", DocumentType.CNPJ).is_invalid

    def test_cnpj_valido_com_14_digitos(self):
        assert Document("34110468000150", DocumentType.CNPJ).is_valid

    def test_cpf_invalido_com_tamanho_errado(self):
        doc = Document("123", DocumentType.CPF)

        assert doc.is_invalid
        assert doc.notifications[0].key == "Document.Number"
        assert doc.notifications[0].message == "Document invalid"

    @pytest.mark.parametrize("number", ["34225545806", "54139739347", "01077284608"])
    def test_cpf_valido_com_11_digitos(self, number):
        assert Document(number, DocumentType.CPF).is_valid

    def test_cpf_e_o_tipo_padrao(self):
        assert Document("53020223385").type is DocumentType.CPF

    def test_cnpj_com_11_digitos_e_invalido(self):
        assert Document("53020223385", DocumentType.CNPJ).is_invalid

    def test_tipo_from_string(self):
        assert DocumentType.from_string(" cnpj ") is DocumentType.CNPJ

        with pytest.raises(ValueError):
            DocumentType.from_string("RG")

    def test_igualdade_por_valor(self):
        assert Document("53020223385") == Document("53020223385", DocumentType.CPF)


class TestName:
    """Testes para Name."""

    def test_nome_valido(self):
        name = Name("Bruce", "Wayne")

        assert name.is_valid
        assert str(name) == "Bruce Wayne"

    def test_nome_curto_invalido(self):
        name = Name("Al", "Wayne")

        assert name.is_invalid
        assert [n.key for n in name.notifications] == ["Name.FirstName"]

    def test_sobrenome_longo_invalido(self):
        name = Name("Bruce", "W" * 41)

        assert [n.key for n in name.notifications] == ["Name.LastName"]

    def test_limites_inclusivos(self):
        assert Name("abc", "x" * 40).is_valid

    def test_create_retorna_notificacoes(self):
        name, notifications = Name.create("", "")

        assert name.first_name == ""
        assert len(notifications) == 2


class TestEmail:
    """Testes para Email."""

    def test_email_valido(self):
        assert Email("batman@dc.com").is_valid

    @pytest.mark.parametrize("address", [
        "", "batman", "batman@", "@dc.com", "batman@dc.com\n", " batman@dc.com",
    ])
    def test_email_invalido(self, address):
        email = Email(address)

        assert email.is_invalid
        assert email.notifications[0].message == "Invalid e-mail"


class TestAddress:
    """Testes para Address."""

    def test_endereco_valido(self):
        assert make_address().is_valid

    def test_campo_obrigatorio_vazio(self):
        address = make_address(city="")

        assert [n.key for n in address.notifications] == ["Address.City"]
        assert address.notifications[0].message == "City is required"

    def test_rua_curta(self):
        address = make_address(street="Ab")

        assert [n.key for n in address.notifications] == ["Address.Street"]

    def test_todos_os_campos_vazios(self):
        address = Address("", "", "", "", "", "", "")

        assert len(address.notifications) == 7
