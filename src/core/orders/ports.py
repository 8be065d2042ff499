"""
Ports (Interfaces) do Domínio de Orders.

Repositório mais simples que o de tickets: não há chave única além
do ID de sistema, então criação nunca conflita e não há rollback.
"""

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Protocol, runtime_checkable

from .entities import OrderEntity

logger = logging.getLogger(__name__)


@runtime_checkable
class OrderRepository(Protocol):
    """
    Interface para persistência de Orders.

    Methods:
        list_all: Lista todos
        get_by_id: Busca por ID de sistema
        create: Cria pedido (sempre sucede)
        create_many: Cria vários (sempre sucede)
        delete_all: Remove todos, retorna quantidade
        count: Conta pedidos
    """

    def list_all(self) -> List[OrderEntity]:
        ...

    def get_by_id(self, id: str) -> Optional[OrderEntity]:
        ...

    def create(self, order: OrderEntity) -> OrderEntity:
        ...

    def create_many(self, orders: Iterable[OrderEntity]) -> List[OrderEntity]:
        ...

    def delete_all(self) -> int:
        ...

    def count(self) -> int:
        ...


class InMemoryOrderRepository:
    """
    Implementação em memória do OrderRepository.

    ID de sistema e date_imported sempre atribuídos aqui; valores
    vindos do chamador são descartados.

    Example:
        repo = InMemoryOrderRepository()
        order = repo.create(OrderEntity.criar(...))
        assert order.date_imported is not None
    """

    def __init__(
        self,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            id_factory: Gerador de IDs de sistema (default: UUID4)
            clock: Fonte de date_imported (default: agora em UTC)
        """
        self._orders: Dict[str, OrderEntity] = {}
        self._lock = threading.RLock()
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def list_all(self) -> List[OrderEntity]:
        """Lista todos os pedidos, em ordem de inserção."""
        with self._lock:
            return [replace(order) for order in self._orders.values()]

    def get_by_id(self, id: str) -> Optional[OrderEntity]:
        with self._lock:
            order = self._orders.get(id)
            if order is None:
                logger.debug(f"Order not found: {id}")
                return None
            return replace(order)

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

    def create(self, order: OrderEntity) -> OrderEntity:
        """Cria pedido com ID e date_imported do servidor."""
        with self._lock:
            registro = self._inserir(order)

        logger.info(f"Order created: {registro.id}")
        return replace(registro)

    def create_many(self, orders: Iterable[OrderEntity]) -> List[OrderEntity]:
        """Cria pedidos na ordem recebida; sem checagem de unicidade."""
        with self._lock:
            criados = [self._inserir(order) for order in orders]

        logger.info(f"Orders created in batch: {len(criados)}")
        return [replace(order) for order in criados]

    def delete_all(self) -> int:
        """Remove todos os pedidos; retorna quantos existiam."""
        with self._lock:
            total = len(self._orders)
            self._orders.clear()

        logger.info(f"All orders deleted: {total}")
        return total

    def _inserir(self, order: OrderEntity) -> OrderEntity:
        id = self._id_factory()
        while id in self._orders:
            id = self._id_factory()

        registro = replace(order, id=id, date_imported=self._clock())
        self._orders[id] = registro
        return registro
