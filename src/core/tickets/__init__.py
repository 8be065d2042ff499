"""
Domínio de Tickets - Registro de envios danificados.

Este módulo contém toda a lógica de negócio relacionada a tickets
de avaria, incluindo:
- Entidades (TicketEntity, ShippingService, DamageType)
- Repositório em memória com busca dupla (ID de sistema / ticketId)
- Verificação de duplicidade
- Use Cases (Criar, Importar, Atualizar, Remover, Listar, Estatísticas)
- DTOs (Input/Output Data Transfer Objects)

Características do Domínio:
- ticketId único entre tickets vivos
- Importação em lote tudo-ou-nada no repositório
- Conflitos retornados como resultados, não exceções
"""

from .entities import TicketEntity, ShippingService, DamageType
from .dtos import (
    TicketInputDTO,
    AtualizarTicketInputDTO,
    TicketOutputDTO,
    ListarTicketsQueryDTO,
)
from .ports import TicketRepository, InMemoryTicketRepository
from .duplicates import TicketDuplicateChecker
from .use_cases import (
    ListarTicketsService,
    ObterTicketService,
    CriarTicketService,
    ImportarTicketsService,
    AtualizarTicketService,
    RemoverTicketService,
    RemoverTodosTicketsService,
    EstatisticasTicketsService,
)

__all__ = [
    # Entities
    "TicketEntity",
    "ShippingService",
    "DamageType",
    # DTOs
    "TicketInputDTO",
    "AtualizarTicketInputDTO",
    "TicketOutputDTO",
    "ListarTicketsQueryDTO",
    # Ports
    "TicketRepository",
    "InMemoryTicketRepository",
    "TicketDuplicateChecker",
    # Use Cases
    "ListarTicketsService",
    "ObterTicketService",
    "CriarTicketService",
    "ImportarTicketsService",
    "AtualizarTicketService",
    "RemoverTicketService",
    "RemoverTodosTicketsService",
    "EstatisticasTicketsService",
]
