"""
Domínio de Orders - Pedidos importados de planilha.

Independente do domínio de tickets:
- Entidade (OrderEntity)
- Repositório em memória (sem unicidade, sem rollback)
- Use Cases (Listar, Obter, Importar, Remover todos, Estatísticas)
"""

from .entities import OrderEntity
from .dtos import OrderInputDTO, OrderOutputDTO
from .ports import OrderRepository, InMemoryOrderRepository
from .use_cases import (
    ListarOrdersService,
    ObterOrderService,
    ImportarOrdersService,
    RemoverTodosOrdersService,
    EstatisticasOrdersService,
)

__all__ = [
    "OrderEntity",
    "OrderInputDTO",
    "OrderOutputDTO",
    "OrderRepository",
    "InMemoryOrderRepository",
    "ListarOrdersService",
    "ObterOrderService",
    "ImportarOrdersService",
    "RemoverTodosOrdersService",
    "EstatisticasOrdersService",
]
