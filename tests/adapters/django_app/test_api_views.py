"""
Testes da API JSON de Assinaturas.

Views são exercitadas com RequestFactory e container InMemory,
sem banco de dados.
"""

import json
from unittest.mock import patch

import pytest
from django.test import RequestFactory

from src.adapters.django_app.assinaturas.api_views import CreateSubscriptionAPIView
from src.config.urls import health


@pytest.fixture
def rf():
    return RequestFactory()


@pytest.fixture
def payload():
    return {
        "first_name": "Bruce",
        "last_name": "Wayne",
        "document": "53020223385",
        "email": "batman@dc.com",
        "paid_date": "2024-01-31T10:00:00",
        "expire_date": "2024-02-05T10:00:00",
        "total": "60.00",
        "total_paid": "60.00",
        "payer": "Wayne Corp",
        "payer_document": "12345678911",
        "payer_document_type": "CPF",
        "payer_email": "batman@dc.com",
        "street": "Mountain Drive",
        "number": "1007",
        "neighborhood": "Bristol",
        "city": "Gotham",
        "state": "NJ",
        "country": "US",
        "zip_code": "07001",
        "bar_code": "23790504004188802001",
        "boleto_number": "1234554321",
    }


def post(rf, method, body):
    data = body if isinstance(body, (str, bytes)) else json.dumps(body)
    request = rf.post(f"/assinaturas/api/{method}/", data=data, content_type="application/json")
    return CreateSubscriptionAPIView.as_view()(request, method=method)


class TestCreateSubscriptionAPIView:

    def test_cria_assinatura(self, rf, payload, in_memory_container):
        response = post(rf, "boleto", payload)

        assert response.status_code == 201
        body = json.loads(response.content)
        assert body == {
            "success": True,
            "message": "Subscription successfully added",
            "notifications": [],
        }
        assert in_memory_container.student_repository().count() == 1
        assert len(in_memory_container.email_service().sent) == 1

    def test_documento_em_uso_retorna_422(self, rf, payload, in_memory_container):
        post(rf, "boleto", payload)

        payload["email"] = "robin@dc.com"
        response = post(rf, "paypal", payload)

        assert response.status_code == 422
        body = json.loads(response.content)
        assert body["success"] is False
        assert body["message"] == "Subscription register failed"
        assert body["notifications"] == [
            {"key": "Document", "message": "Document already in use"}
        ]

    def test_metodo_desconhecido_retorna_400(self, rf, payload, in_memory_container):
        response = post(rf, "pix", payload)

        assert response.status_code == 400
        body = json.loads(response.content)
        assert body["success"] is False
        assert body["meta"] == {"field": "metodo"}

    def test_json_invalido_retorna_400(self, rf, in_memory_container):
        response = post(rf, "boleto", "{not json")

        assert response.status_code == 400
        assert "JSON" in json.loads(response.content)["error"]

    def test_json_nao_objeto_retorna_400(self, rf, in_memory_container):
        response = post(rf, "boleto", "[1, 2]")

        assert response.status_code == 400

    def test_data_ilegivel_retorna_400(self, rf, payload, in_memory_container):
        payload["paid_date"] = "ontem"

        response = post(rf, "boleto", payload)

        assert response.status_code == 400
        assert json.loads(response.content)["meta"] == {"field": "paid_date"}

    @pytest.mark.parametrize("amount", ["NaN", "sNaN", "Infinity", "-Infinity"])
    def test_valor_nao_finito_retorna_400(self, rf, payload, in_memory_container, amount):
        payload["total"] = amount
        payload["total_paid"] = amount

        response = post(rf, "boleto", payload)

        assert response.status_code == 400
        assert json.loads(response.content)["meta"] == {"field": "total"}
        assert in_memory_container.student_repository().count() == 0

    def test_nan_literal_no_json_retorna_400(self, rf, payload, in_memory_container):
        body = json.dumps(payload).replace('"total": "60.00"', '"total": NaN')

        response = post(rf, "boleto", body)

        assert response.status_code == 400
        assert in_memory_container.student_repository().count() == 0

    def test_total_acima_da_capacidade_retorna_422(self, rf, payload, in_memory_container):
        payload["total"] = "1e12"
        payload["total_paid"] = "1e12"

        response = post(rf, "boleto", payload)

        assert response.status_code == 422
        keys = [n["key"] for n in json.loads(response.content)["notifications"]]
        assert keys == ["Payment.Total", "Payment.TotalPaid"]
        assert in_memory_container.student_repository().count() == 0
        assert in_memory_container.email_service().sent == []

    def test_erro_inesperado_retorna_500(self, rf, payload, in_memory_container):
        with patch.object(
            in_memory_container.student_repository(),
            "create_subscription",
            side_effect=RuntimeError("db down"),
        ):
            response = post(rf, "boleto", payload)

        assert response.status_code == 500
        assert json.loads(response.content)["error"] == "Erro interno do servidor"

    def test_get_nao_permitido(self, rf):
        request = rf.get("/assinaturas/api/boleto/")

        response = CreateSubscriptionAPIView.as_view()(request, method="boleto")

        assert response.status_code == 405


def test_health(rf):
    response = health(rf.get("/health/"))

    assert response.status_code == 200
    assert json.loads(response.content) == {"status": "ok"}
