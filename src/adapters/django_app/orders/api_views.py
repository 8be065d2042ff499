"""
API Views JSON para o domínio de Orders.

Endpoints (prefixo configurável, default /api/):
- GET /orders - Listar pedidos
- DELETE /orders - Remover todos os pedidos
- POST /orders/bulk - Importação em lote
- GET /orders/stats - Estatísticas
- GET /orders/<id> - Obter pedido
"""

import logging

from django.http import HttpRequest, JsonResponse

from src.adapters.django_app.shared.api import BaseAPIView, json_response

logger = logging.getLogger(__name__)


class OrderAPIListView(BaseAPIView):
    """
    GET /orders - Lista pedidos
    DELETE /orders - Remove todos
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            orders = self.get_service('listar_orders_service').execute()
            return json_response([o.to_dict() for o in orders])

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest) -> JsonResponse:
        try:
            deleted_count = self.get_service('remover_todos_orders_service').execute()

            logger.info(f"API: Orders deleted: {deleted_count}")

            return json_response({"deletedCount": deleted_count})

        except Exception as e:
            return self.handle_exception(e)


class OrderAPIBulkView(BaseAPIView):
    """
    POST /orders/bulk
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Importa lote de pedidos.

        Body JSON:
        {
            "orders": [ {...}, ... ]
        }

        Retorna 201 com {imported, total, errors?, orders}.
        """
        try:
            data = self.parse_object(request)

            importar_service = self.get_service('importar_orders_service')
            output = importar_service.execute(data.get('orders'))

            return json_response(output.to_dict('orders'), status=201)

        except Exception as e:
            return self.handle_exception(e)


class OrderAPIEstatisticasView(BaseAPIView):
    """GET /orders/stats"""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            return json_response(self.get_service('estatisticas_orders_service').execute())

        except Exception as e:
            return self.handle_exception(e)


class OrderAPIDetailView(BaseAPIView):
    """GET /orders/<id>"""

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            order = self.get_service('obter_order_service').execute(pk)
            return json_response(order.to_dict())

        except Exception as e:
            return self.handle_exception(e)
