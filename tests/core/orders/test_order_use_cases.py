"""
Testes Unitários para Use Cases do Domínio de Orders.
"""

import pytest

from src.core.orders.dtos import OrderInputDTO
from src.core.orders.use_cases import (
    EstatisticasOrdersService,
    ImportarOrdersService,
    ListarOrdersService,
    ObterOrderService,
    RemoverTodosOrdersService,
)
from src.core.shared.exceptions import (
    BulkImportError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.validation import ValidationResult


class FakeOrderValidator:
    """Aceita dicts com "trackingNumber"; carrier fixo UPS."""

    def validate(self, raw):
        if not isinstance(raw, dict) or not raw.get("trackingNumber"):
            return ValidationResult.invalid(['Required at "trackingNumber"'])
        return ValidationResult.ok(OrderInputDTO(
            tracking_number=raw["trackingNumber"],
            order_number=raw.get("orderNumber", "ORD-1"),
            produto=raw.get("produto", "Glow"),
            carrier=raw.get("carrier", "UPS"),
        ))


@pytest.fixture
def importar(inmemory_order_repo):
    return ImportarOrdersService(inmemory_order_repo, FakeOrderValidator())


class TestImportarOrdersService:

    def test_importa_e_reporta_erros(self, importar, inmemory_order_repo):
        output = importar.execute([{"trackingNumber": "1ZC6J1"}, {}, {"trackingNumber": "1ZC6J2"}])

        assert output.imported == 2
        assert output.total == 3
        assert output.errors == ['Order 2: Validation error: Required at "trackingNumber"']
        assert inmemory_order_repo.count() == 2

    def test_duplicatas_nunca_rejeitadas(self, importar):
        output = importar.execute([{"trackingNumber": "X"}, {"trackingNumber": "X"}])

        assert output.imported == 2
        assert output.errors == []

    def test_corpo_nao_lista(self, importar):
        with pytest.raises(ValidationError) as exc_info:
            importar.execute(None)

        assert exc_info.value.message == "Invalid request: orders must be an array"

    def test_nenhum_valido(self, importar):
        with pytest.raises(BulkImportError) as exc_info:
            importar.execute([{}])

        assert exc_info.value.message == "No valid orders to import"
        assert exc_info.value.errors == ['Order 1: Validation error: Required at "trackingNumber"']


class TestConsultasOrders:

    def test_listar_e_obter(self, importar, inmemory_order_repo):
        importar.execute([{"trackingNumber": "A"}])

        orders = ListarOrdersService(inmemory_order_repo).execute()
        obtido = ObterOrderService(inmemory_order_repo).execute(orders[0].id)

        assert obtido.tracking_number == "A"
        assert obtido.to_dict()["dateImported"] is not None

    def test_obter_inexistente(self, inmemory_order_repo):
        with pytest.raises(EntityNotFoundError) as exc_info:
            ObterOrderService(inmemory_order_repo).execute("nao-existe")

        assert exc_info.value.message == "Order not found"

    def test_remover_todos(self, importar, inmemory_order_repo):
        importar.execute([{"trackingNumber": "A"}, {"trackingNumber": "B"}])

        assert RemoverTodosOrdersService(inmemory_order_repo).execute() == 2
        assert ListarOrdersService(inmemory_order_repo).execute() == []

    def test_estatisticas(self, importar, inmemory_order_repo):
        importar.execute([
            {"trackingNumber": "A", "carrier": "FedEx", "produto": "Calm"},
            {"trackingNumber": "B", "carrier": "FedEx"},
            {"trackingNumber": "C"},
        ])

        stats = EstatisticasOrdersService(inmemory_order_repo).execute()

        assert stats["total"] == 3
        assert stats["topCarrier"] == {"name": "FedEx", "value": 2}
        assert stats["byProduto"] == [
            {"name": "Glow", "value": 2},
            {"name": "Calm", "value": 1},
        ]
        assert stats["topProduto"] == {"name": "Glow", "value": 2}
