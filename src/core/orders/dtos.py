"""
Data Transfer Objects (DTOs) do Domínio de Orders.
"""

from dataclasses import dataclass
from datetime import datetime

from .entities import OrderEntity


@dataclass(frozen=True)
class OrderInputDTO:
    """
    DTO de entrada validado para criar pedido.

    Não contém id nem date_imported: ambos são do servidor.
    """

    tracking_number: str
    order_number: str
    produto: str
    carrier: str

    def to_dict(self) -> dict:
        return {
            "tracking_number": self.tracking_number,
            "order_number": self.order_number,
            "produto": self.produto,
            "carrier": self.carrier,
        }

    def to_entity(self) -> OrderEntity:
        return OrderEntity.criar(**self.to_dict())


@dataclass
class OrderOutputDTO:
    """DTO de saída de pedido (chaves camelCase no JSON)."""

    id: str
    tracking_number: str
    order_number: str
    produto: str
    carrier: str
    date_imported: datetime

    @classmethod
    def from_entity(cls, entity: OrderEntity) -> "OrderOutputDTO":
        return cls(
            id=entity.id,
            tracking_number=entity.tracking_number,
            order_number=entity.order_number,
            produto=entity.produto.value,
            carrier=entity.carrier.value,
            date_imported=entity.date_imported,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "trackingNumber": self.tracking_number,
            "orderNumber": self.order_number,
            "produto": self.produto,
            "carrier": self.carrier,
            "dateImported": self.date_imported.isoformat(),
        }
