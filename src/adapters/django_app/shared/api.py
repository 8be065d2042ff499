"""
Base das API Views JSON.

Fornece:
- Respostas JSON (objetos e listas)
- Parsing de corpo JSON
- Acesso ao container DI
- Tradução de exceções de domínio para status HTTP

Mapeamento de erros:
- ValidationError, ConflictError, BulkImportError -> 400
- EntityNotFoundError -> 404
- Qualquer outra exceção -> 500 {"error": "Internal server error"}
"""

import json
import logging
from typing import Any

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.config.container import get_container
from src.core.shared.exceptions import (
    BulkImportError,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


# =============================================================================
# Helpers
# =============================================================================

def json_response(data: Any, status: int = 200) -> JsonResponse:
    """
    Cria resposta JSON.

    Listas são permitidas (safe=False): GET /tickets retorna array.
    """
    return JsonResponse(data, status=status, safe=False)


def error_response(message: str, status: int = 400, **extra: Any) -> JsonResponse:
    """Resposta de erro no formato {"error": "<mensagem>"}."""
    return json_response({"error": message, **extra}, status=status)


def no_content() -> HttpResponse:
    return HttpResponse(status=204)


def parse_json_body(request: HttpRequest) -> Any:
    """
    Parseia body JSON do request.

    Args:
        request: HTTP request

    Returns:
        Valor JSON decodificado (corpo vazio = {})

    Raises:
        ValidationError: Se JSON inválido
    """
    if not request.body:
        return {}

    try:
        return json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"Invalid JSON: {e}")


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Subclasses capturam exceções e delegam para handle_exception,
    que produz a resposta de erro padronizada.
    """

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service (ou validator) do container pelo nome do provider."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Any:
        return parse_json_body(request)

    def parse_object(self, request: HttpRequest) -> dict:
        """Corpo JSON que precisa ser um objeto."""
        data = self.parse_body(request)

        if not isinstance(data, dict):
            raise ValidationError("Invalid request: body must be an object")

        return data

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Args:
            e: Exceção capturada

        Returns:
            JsonResponse com erro
        """
        if isinstance(e, EntityNotFoundError):
            return json_response(e.to_dict(), status=404)

        if isinstance(e, (ValidationError, ConflictError, BulkImportError)):
            logger.debug(f"API: {e}")
            return json_response(e.to_dict(), status=400)

        if isinstance(e, DomainException):
            return json_response(e.to_dict(), status=400)

        # Erro inesperado
        logger.exception(f"Unexpected API error: {e}")
        return error_response(INTERNAL_ERROR, status=500)


class HealthView(View):
    """GET /health - verificação de disponibilidade."""

    def get(self, request: HttpRequest) -> JsonResponse:
        return json_response({"status": "ok"})
