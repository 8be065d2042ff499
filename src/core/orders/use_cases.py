"""
Use Cases (Application Services) do Domínio de Orders.

Use Cases implementados:
- ListarOrdersService: Lista pedidos
- ObterOrderService: Obtém pedido por ID de sistema
- ImportarOrdersService: Importação em lote (sem checagem de duplicidade)
- RemoverTodosOrdersService: Remove todos os pedidos
- EstatisticasOrdersService: Agregações para o dashboard de pedidos
"""

import logging
from typing import Any, List

from src.core.imports.bulk import BulkImportOutputDTO, validate_bulk_items
from src.core.shared.aggregation import count_by, find_top_item
from src.core.shared.exceptions import (
    BulkImportError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.validation import RecordValidator
from src.core.shared.vocabularies import Carrier, Produto

from .dtos import OrderInputDTO, OrderOutputDTO
from .ports import OrderRepository

logger = logging.getLogger(__name__)


class ListarOrdersService:
    """
    Use Case: Listar todos os pedidos.
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def execute(self) -> List[OrderOutputDTO]:
        return [OrderOutputDTO.from_entity(o) for o in self.order_repo.list_all()]


class ObterOrderService:
    """
    Use Case: Obter pedido por ID de sistema.
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def execute(self, id: str) -> OrderOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se pedido não existe
        """
        order = self.order_repo.get_by_id(id)

        if order is None:
            raise EntityNotFoundError("Order not found", entity_type="Order", entity_id=id)

        return OrderOutputDTO.from_entity(order)


class ImportarOrdersService:
    """
    Use Case: Importar lote de pedidos (planilha).

    Pedidos não têm chave única: duplicatas nunca são rejeitadas.
    """

    ITEM_LABEL = "Order"

    def __init__(self, order_repo: OrderRepository, validator: RecordValidator[OrderInputDTO]):
        self.order_repo = order_repo
        self.validator = validator

    def execute(self, raw_orders: Any) -> BulkImportOutputDTO[OrderOutputDTO]:
        """
        Importa lote.

        Args:
            raw_orders: Valor bruto do campo "orders" do corpo

        Raises:
            ValidationError: Se raw_orders não é lista
            BulkImportError: Se nenhum item é válido
        """
        if not isinstance(raw_orders, list):
            raise ValidationError(
                "Invalid request: orders must be an array", field="orders"
            )

        validation = validate_bulk_items(
            raw_orders,
            self.validator,
            item_label=self.ITEM_LABEL,
        )

        if not validation.has_valid_items:
            raise BulkImportError("No valid orders to import", errors=validation.errors)

        criados = self.order_repo.create_many(
            [item.to_entity() for item in validation.valid_items]
        )

        logger.info(f"Orders imported: {len(criados)}/{validation.total}")

        return BulkImportOutputDTO(
            imported=len(criados),
            total=validation.total,
            errors=validation.errors,
            items=[OrderOutputDTO.from_entity(o) for o in criados],
        )


class RemoverTodosOrdersService:
    """
    Use Case: Remover todos os pedidos.
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def execute(self) -> int:
        return self.order_repo.delete_all()


class EstatisticasOrdersService:
    """
    Use Case: Estatísticas de pedidos para o dashboard.
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    def execute(self) -> dict:
        orders = self.order_repo.list_all()

        by_carrier = count_by(orders, lambda o: o.carrier, list(Carrier))
        by_produto = count_by(orders, lambda o: o.produto, list(Produto), drop_zero=True)

        return {
            "total": len(orders),
            "byCarrier": by_carrier,
            "byProduto": by_produto,
            "topCarrier": find_top_item(by_carrier),
            "topProduto": find_top_item(by_produto),
        }
