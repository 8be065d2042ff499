"""
Entidades do Domínio de Orders.

- OrderEntity: Pedido importado de planilha, independente de tickets

Regras:
- ID de sistema e date_imported são atribuídos pelo repositório
- Não há unicidade por tracking_number/order_number (duplicatas permitidas)
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from src.core.shared.vocabularies import Carrier, Produto


@dataclass
class OrderEntity:
    """
    Entidade de Domínio: Pedido importado.

    Attributes:
        id: Identificador de sistema (atribuído pelo repositório)
        tracking_number: Número de rastreio
        order_number: Número do pedido
        produto: Produto enviado
        carrier: Transportadora
        date_imported: Momento da importação (atribuído pelo repositório)
    """

    tracking_number: str
    order_number: str
    produto: Produto
    carrier: Carrier
    id: Optional[str] = None
    date_imported: Optional[datetime] = None

    @classmethod
    def criar(
        cls,
        tracking_number: str,
        order_number: str,
        produto: Any,
        carrier: Any,
    ) -> "OrderEntity":
        """
        Factory method a partir de dados validados.

        ID e date_imported nunca vêm do chamador.
        """
        return cls(
            tracking_number=tracking_number,
            order_number=order_number,
            produto=Produto(_valor(produto)),
            carrier=Carrier(_valor(carrier)),
        )

    def __repr__(self) -> str:
        return (
            f"OrderEntity("
            f"id={(self.id or '')[:8]}..., "
            f"order_number='{self.order_number}', "
            f"carrier={self.carrier.value}"
            f")"
        )


def _valor(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value
