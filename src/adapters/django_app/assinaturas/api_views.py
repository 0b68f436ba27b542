"""
API Views JSON para o domínio de Assinaturas.

Endpoints:
- POST /assinaturas/api/boleto/ - Assinatura paga com boleto
- POST /assinaturas/api/paypal/ - Assinatura paga com PayPal
- POST /assinaturas/api/cartao/ - Assinatura paga com cartão de crédito

Formato:
- Entrada: JSON plano com campos do aluno, pagador, endereço e meio
- Saída: JSON {success, message, notifications} ou {success, error, meta}

Status:
- 201: Assinatura criada
- 422: Cadastro recusado (notificações de domínio)
- 400: Entrada ilegível (JSON ou valores)
"""

import json
import logging
from typing import Any, Dict

from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.config.container import get_container
from src.core.assinaturas.dtos import command_from_dict
from src.core.shared.exceptions import DomainException, ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON de erro/infra padronizada.

    Returns:
        JsonResponse formatada
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValueError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("JSON deve ser um objeto")

    return data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        return get_container()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        if isinstance(e, ValidationError):
            return json_response(
                success=False,
                error=e.message,
                status=400,
                meta={'field': e.field}
            )

        if isinstance(e, DomainException):
            return json_response(success=False, error=str(e), status=400)

        if isinstance(e, ValueError):
            return json_response(success=False, error=str(e), status=400)

        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )


# =============================================================================
# Assinaturas API Views
# =============================================================================

class CreateSubscriptionAPIView(BaseAPIView):
    """
    POST /assinaturas/api/<method>/

    Example:
        curl -X POST /assinaturas/api/boleto/ -d '{"first_name": "Bruce", ...}'
    """

    http_method_names = ['post']

    def post(self, request: HttpRequest, method: str) -> JsonResponse:
        try:
            data = self.parse_body(request)
            command = command_from_dict(method, data)

            handler = self.get_container().subscription_handler()
            result = handler.handle(command)

        except Exception as e:
            return self.handle_exception(e)

        return JsonResponse(result.to_dict(), status=201 if result.success else 422)
