"""
Verificação de duplicidade de tickets.

Predicado somente-leitura: um ticket é duplicado quando já existe
ticket vivo com o mesmo ticketId no repositório.
"""

from typing import Union

from .dtos import TicketInputDTO
from .entities import TicketEntity
from .ports import TicketRepository


class TicketDuplicateChecker:
    """
    Consulta o estado já persistido do repositório.

    Não enxerga itens aceitos no mesmo lote ainda não persistidos;
    colisões dentro do lote são detectadas pelo create_many.

    Example:
        checker = TicketDuplicateChecker(repo)
        if checker(input_dto):
            ...
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def __call__(self, ticket: Union[TicketInputDTO, TicketEntity]) -> bool:
        return self.ticket_repo.exists_ticket_id(ticket.ticket_id)
