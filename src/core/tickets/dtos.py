"""
Data Transfer Objects (DTOs) do Domínio de Tickets.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de entidades para a camada HTTP.

Tipos de DTOs:
- Input DTOs: dados já validados pelo pipeline de validação
- Output DTOs: formato JSON exposto pela API (chaves camelCase)
- Query DTOs: filtros de listagem
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .entities import TicketEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class TicketInputDTO:
    """
    DTO de entrada para criar ticket.

    Imutável (frozen=True) para garantir que dados
    validados não sejam alterados acidentalmente.

    Valores de vocabulário chegam como texto (ex: "FedEx");
    a conversão para enum acontece na entidade.
    """

    ticket_id: str
    order_number: str
    tracking_number: str
    carrier: str
    service: str
    produto: str
    damage_types: Tuple[str, ...]
    date_reported: datetime
    ticket_url: Optional[str] = None
    observations: Optional[str] = None
    notes: Optional[str] = None

    def to_dict(self) -> dict:
        """Converte para dicionário (nomes de campo da entidade)."""
        return {
            "ticket_id": self.ticket_id,
            "order_number": self.order_number,
            "tracking_number": self.tracking_number,
            "carrier": self.carrier,
            "service": self.service,
            "produto": self.produto,
            "damage_types": list(self.damage_types),
            "date_reported": self.date_reported,
            "ticket_url": self.ticket_url,
            "observations": self.observations,
            "notes": self.notes,
        }

    def to_entity(self) -> TicketEntity:
        return TicketEntity.criar(**self.to_dict())


@dataclass(frozen=True)
class AtualizarTicketInputDTO:
    """
    DTO de entrada para atualização parcial.

    Attributes:
        id: ID de sistema do ticket
        alteracoes: Apenas os campos enviados, já validados
            (nomes de campo da entidade, ex: "notes", "ticket_id")
    """

    id: str
    alteracoes: Dict[str, Any] = field(default_factory=dict)


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class TicketOutputDTO:
    """
    DTO de saída com todos os dados do ticket.

    Vocabulários já convertidos para texto (valor do enum).
    """

    id: str
    ticket_id: str
    order_number: str
    tracking_number: str
    carrier: str
    service: str
    produto: str
    damage_types: List[str]
    date_reported: datetime
    ticket_url: Optional[str]
    observations: Optional[str]
    notes: Optional[str]

    @classmethod
    def from_entity(cls, entity: TicketEntity) -> "TicketOutputDTO":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Entidade TicketEntity

        Returns:
            DTO com dados da entidade
        """
        return cls(
            id=entity.id,
            ticket_id=entity.ticket_id,
            order_number=entity.order_number,
            tracking_number=entity.tracking_number,
            carrier=entity.carrier.value,
            service=entity.service.value,
            produto=entity.produto.value,
            damage_types=[damage.value for damage in entity.damage_types],
            date_reported=entity.date_reported,
            ticket_url=entity.ticket_url,
            observations=entity.observations,
            notes=entity.notes,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "ticketId": self.ticket_id,
            "orderNumber": self.order_number,
            "trackingNumber": self.tracking_number,
            "carrier": self.carrier,
            "service": self.service,
            "produto": self.produto,
            "damageTypes": list(self.damage_types),
            "dateReported": self.date_reported.isoformat() if self.date_reported else None,
            "ticketUrl": self.ticket_url,
            "observations": self.observations,
            "notes": self.notes,
        }


# =============================================================================
# QUERY DTOs (Filtros de Busca)
# =============================================================================

@dataclass(frozen=True)
class ListarTicketsQueryDTO:
    """
    Filtros de listagem. None significa "todos".

    Attributes:
        carrier: Transportadora exata
        service: Nível de serviço exato
        produto: Produto exato
        damage_type: Ticket deve conter esta categoria de avaria
    """

    carrier: Optional[str] = None
    service: Optional[str] = None
    produto: Optional[str] = None
    damage_type: Optional[str] = None

    def aceita(self, ticket: TicketEntity) -> bool:
        """Verifica se o ticket passa em todos os filtros."""
        if self.carrier and ticket.carrier.value != self.carrier:
            return False
        if self.service and ticket.service.value != self.service:
            return False
        if self.produto and ticket.produto.value != self.produto:
            return False
        if self.damage_type and self.damage_type not in [
            damage.value for damage in ticket.damage_types
        ]:
            return False
        return True
