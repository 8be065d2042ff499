"""
API Views JSON para o domínio de Tickets.

Endpoints (prefixo configurável, default /api/):
- GET /tickets - Listar tickets (filtros: carrier, service, produto, damageType)
- POST /tickets - Criar ticket
- DELETE /tickets - Remover todos os tickets
- POST /tickets/bulk - Importação em lote
- GET /tickets/stats - Estatísticas do dashboard
- GET /tickets/<id> - Obter ticket
- PATCH /tickets/<id> - Atualizar ticket parcial
- DELETE /tickets/<id> - Remover ticket

Formato:
- Entrada: JSON com chaves camelCase
- Saída: JSON do recurso; erros como {"error": "..."}
"""

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse

from src.adapters.django_app.shared.api import BaseAPIView, json_response, no_content
from src.core.shared.exceptions import ValidationError
from src.core.tickets.dtos import AtualizarTicketInputDTO, ListarTicketsQueryDTO

logger = logging.getLogger(__name__)

class TicketAPIListView(BaseAPIView):
    """
    API para listar, criar e remover tickets.

    GET /tickets - Lista tickets
    POST /tickets - Cria ticket
    DELETE /tickets - Remove todos
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Lista tickets com filtros opcionais.

        Query params (match exato; vazio = sem filtro):
        - carrier
        - service
        - produto
        - damageType: ticket contém a categoria
        """
        try:
            listar_service = self.get_service('listar_tickets_service')

            query = ListarTicketsQueryDTO(
                carrier=request.GET.get('carrier') or None,
                service=request.GET.get('service') or None,
                produto=request.GET.get('produto') or None,
                damage_type=request.GET.get('damageType') or None,
            )

            tickets = listar_service.execute(query)

            return json_response([t.to_dict() for t in tickets])

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria novo ticket.

        Body JSON: InsertTicket (ticketId, orderNumber, trackingNumber,
        carrier, service, produto, damageTypes, dateReported, ticketUrl?,
        observations?, notes?)
        """
        try:
            data = self.parse_body(request)

            result = self.get_service('ticket_validator').validate(data)
            if not result.is_valid:
                raise ValidationError(result.message)

            output = self.get_service('criar_ticket_service').execute(result.value)

            logger.info(f"API: Ticket created: {output.id}")

            return json_response(output.to_dict(), status=201)

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest) -> JsonResponse:
        """Remove todos os tickets."""
        try:
            deleted_count = self.get_service('remover_todos_tickets_service').execute()

            logger.info(f"API: Tickets deleted: {deleted_count}")

            return json_response({"deletedCount": deleted_count})

        except Exception as e:
            return self.handle_exception(e)


class TicketAPIBulkView(BaseAPIView):
    """
    API para importação em lote.

    POST /tickets/bulk
    """

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Importa lote de tickets.

        Body JSON:
        {
            "tickets": [ {...}, ... ]
        }

        Retorna 201 com {imported, total, errors?, tickets}.
        """
        try:
            data = self.parse_object(request)

            importar_service = self.get_service('importar_tickets_service')
            output = importar_service.execute(data.get('tickets'))

            return json_response(output.to_dict('tickets'), status=201)

        except Exception as e:
            return self.handle_exception(e)


class TicketAPIEstatisticasView(BaseAPIView):
    """
    API de estatísticas.

    GET /tickets/stats
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            estatisticas_service = self.get_service('estatisticas_tickets_service')
            return json_response(estatisticas_service.execute())

        except Exception as e:
            return self.handle_exception(e)


class TicketAPIDetailView(BaseAPIView):
    """
    API para operações em ticket específico.

    GET /tickets/<id> - Obter ticket
    PATCH /tickets/<id> - Atualizar ticket
    DELETE /tickets/<id> - Remover ticket
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        """Obtém detalhes do ticket."""
        try:
            ticket = self.get_service('obter_ticket_service').execute(pk)
            return json_response(ticket.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def patch(self, request: HttpRequest, pk: str) -> JsonResponse:
        """
        Atualiza ticket parcialmente.

        Body JSON: qualquer subconjunto dos campos de InsertTicket.
        Campos enviados são validados com as mesmas regras da criação;
        um corpo sem campos devolve o ticket sem alterações.
        """
        try:
            data = self.parse_object(request)

            result = self.get_service('ticket_patch_validator').validate(data)
            if not result.is_valid:
                raise ValidationError(result.message)

            # Corpo parcial vazio: nada a alterar, devolve o ticket atual
            if not result.value:
                ticket = self.get_service('obter_ticket_service').execute(pk)
                return json_response(ticket.to_dict())

            atualizar_service = self.get_service('atualizar_ticket_service')
            output = atualizar_service.execute(
                AtualizarTicketInputDTO(id=pk, alteracoes=result.value)
            )

            logger.info(f"API: Ticket updated: {pk}")

            return json_response(output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        """Remove ticket (204 sem corpo)."""
        try:
            self.get_service('remover_ticket_service').execute(pk)

            logger.info(f"API: Ticket deleted: {pk}")

            return no_content()

        except Exception as e:
            return self.handle_exception(e)
