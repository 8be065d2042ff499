"""
Use Cases (Application Services) do Domínio de Tickets.

Este módulo contém os casos de uso da aplicação, que orquestram
repositório, pipeline de validação e verificação de duplicidade.

Use Cases implementados:
- ListarTicketsService: Lista tickets com filtros
- ObterTicketService: Obtém ticket por ID de sistema
- CriarTicketService: Cria ticket único
- ImportarTicketsService: Importação em lote
- AtualizarTicketService: Atualização parcial
- RemoverTicketService: Remove ticket
- RemoverTodosTicketsService: Remove todos os tickets
- EstatisticasTicketsService: Agregações para o dashboard

Responsabilidades dos Use Cases:
- Receber DTOs já validados (ou validar lotes brutos)
- Traduzir resultados do repositório (Conflict/NotFound) em
  exceções de domínio para a camada HTTP
- Retornar DTOs de saída

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
"""

import logging
from typing import Any, List, Optional

from src.core.imports.bulk import BulkImportOutputDTO, validate_bulk_items
from src.core.shared.aggregation import (
    count_by,
    count_by_date,
    count_by_member,
    find_top_item,
)
from src.core.shared.exceptions import (
    BulkImportError,
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.results import Conflict, NotFound
from src.core.shared.validation import RecordValidator
from src.core.shared.vocabularies import Carrier, Produto

from .dtos import (
    AtualizarTicketInputDTO,
    ListarTicketsQueryDTO,
    TicketInputDTO,
    TicketOutputDTO,
)
from .duplicates import TicketDuplicateChecker
from .entities import DamageType
from .ports import TicketRepository

logger = logging.getLogger(__name__)


def _ticket_nao_encontrado(id: str) -> EntityNotFoundError:
    return EntityNotFoundError("Ticket not found", entity_type="Ticket", entity_id=id)


class ListarTicketsService:
    """
    Use Case: Listar tickets com filtros opcionais.
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self, query: Optional[ListarTicketsQueryDTO] = None) -> List[TicketOutputDTO]:
        """
        Lista tickets.

        Args:
            query: Filtros (None = todos os tickets)

        Returns:
            Lista de DTOs, em ordem de inserção
        """
        tickets = self.ticket_repo.list_all()

        if query is not None:
            tickets = [t for t in tickets if query.aceita(t)]

        return [TicketOutputDTO.from_entity(t) for t in tickets]


class ObterTicketService:
    """
    Use Case: Obter detalhes de um ticket específico.
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self, id: str) -> TicketOutputDTO:
        """
        Obtém ticket por ID de sistema.

        Raises:
            EntityNotFoundError: Se ticket não existe
        """
        ticket = self.ticket_repo.get_by_id(id)

        if ticket is None:
            raise _ticket_nao_encontrado(id)

        return TicketOutputDTO.from_entity(ticket)


class CriarTicketService:
    """
    Use Case: Criar um novo ticket.

    Fluxo:
    1. Receber DTO validado
    2. Verificar duplicidade de ticketId
    3. Persistir via repositório
    4. Retornar DTO de saída

    Example:
        service = CriarTicketService(ticket_repo)
        output = service.execute(input_dto)
        print(output.id)  # UUID do ticket criado
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo
        self.is_duplicate = TicketDuplicateChecker(ticket_repo)

    def execute(self, input_dto: TicketInputDTO) -> TicketOutputDTO:
        """
        Cria ticket.

        Raises:
            ConflictError: Se ticketId já existe
        """
        if self.is_duplicate(input_dto):
            raise ConflictError(
                f"Ticket ID {input_dto.ticket_id} already exists",
                key=input_dto.ticket_id,
            )

        # O repositório recheca dentro do lock
        result = self.ticket_repo.create(input_dto.to_entity())

        if isinstance(result, Conflict):
            raise ConflictError(result.message, key=result.key)

        return TicketOutputDTO.from_entity(result.value)


class ImportarTicketsService:
    """
    Use Case: Importar lote de tickets (planilha).

    Fluxo:
    1. Rejeitar corpo que não é lista
    2. Validar cada item e checar duplicidade contra o estado persistido
    3. Sem itens válidos: falha com a lista de erros
    4. Persistir itens válidos com create_many (tudo ou nada)
    """

    ITEM_LABEL = "Ticket"

    def __init__(self, ticket_repo: TicketRepository, validator: RecordValidator[TicketInputDTO]):
        self.ticket_repo = ticket_repo
        self.validator = validator
        self.is_duplicate = TicketDuplicateChecker(ticket_repo)

    def execute(self, raw_tickets: Any) -> BulkImportOutputDTO[TicketOutputDTO]:
        """
        Importa lote.

        Args:
            raw_tickets: Valor bruto do campo "tickets" do corpo

        Raises:
            ValidationError: Se raw_tickets não é lista
            BulkImportError: Se nenhum item é válido
            ConflictError: Se itens do próprio lote colidem no ticketId
        """
        if not isinstance(raw_tickets, list):
            raise ValidationError(
                "Invalid request: tickets must be an array", field="tickets"
            )

        validation = validate_bulk_items(
            raw_tickets,
            self.validator,
            check_duplicate=self.is_duplicate,
            item_label=self.ITEM_LABEL,
            get_identifier=lambda item: f"ID: {item.ticket_id}",
        )

        if not validation.has_valid_items:
            raise BulkImportError("No valid tickets to import", errors=validation.errors)

        result = self.ticket_repo.create_many(
            [item.to_entity() for item in validation.valid_items]
        )

        if isinstance(result, Conflict):
            raise ConflictError(result.message, key=result.key)

        logger.info(f"Tickets imported: {len(result.value)}/{validation.total}")

        return BulkImportOutputDTO(
            imported=len(result.value),
            total=validation.total,
            errors=validation.errors,
            items=[TicketOutputDTO.from_entity(t) for t in result.value],
        )


class AtualizarTicketService:
    """
    Use Case: Atualização parcial de ticket.
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self, input_dto: AtualizarTicketInputDTO) -> TicketOutputDTO:
        """
        Aplica alterações validadas.

        Raises:
            EntityNotFoundError: Se ticket não existe
            ConflictError: Se novo ticketId pertence a outro ticket
        """
        result = self.ticket_repo.update(input_dto.id, input_dto.alteracoes)

        if isinstance(result, NotFound):
            raise _ticket_nao_encontrado(input_dto.id)

        if isinstance(result, Conflict):
            raise ConflictError(result.message, key=result.key)

        return TicketOutputDTO.from_entity(result.value)


class RemoverTicketService:
    """
    Use Case: Remover um ticket.
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self, id: str) -> None:
        """
        Raises:
            EntityNotFoundError: Se ticket não existe
        """
        if not self.ticket_repo.delete(id):
            raise _ticket_nao_encontrado(id)


class RemoverTodosTicketsService:
    """
    Use Case: Remover todos os tickets.
    """

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self) -> int:
        """Retorna quantidade removida."""
        return self.ticket_repo.delete_all()


class EstatisticasTicketsService:
    """
    Use Case: Estatísticas de tickets para o dashboard.
    """

    DIAS_RECENTES = 30

    def __init__(self, ticket_repo: TicketRepository):
        self.ticket_repo = ticket_repo

    def execute(self) -> dict:
        """
        Retorna contagens por transportadora, avaria, produto e data.

        Returns:
            Dict com total, byCarrier, byDamageType, byProduto, byDate
            e os itens de maior contagem (top*)
        """
        tickets = self.ticket_repo.list_all()

        by_carrier = count_by(tickets, lambda t: t.carrier, list(Carrier))
        by_damage = count_by_member(tickets, lambda t: t.damage_types, list(DamageType))
        by_produto = count_by(tickets, lambda t: t.produto, list(Produto), drop_zero=True)

        return {
            "total": len(tickets),
            "byCarrier": by_carrier,
            "byDamageType": by_damage,
            "byProduto": by_produto,
            "byDate": count_by_date(
                tickets, lambda t: t.date_reported, last_n_days=self.DIAS_RECENTES
            ),
            "topCarrier": find_top_item(by_carrier),
            "topDamageType": find_top_item(by_damage),
            "topProduto": find_top_item(by_produto),
        }
