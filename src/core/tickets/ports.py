"""
Ports (Interfaces) do Domínio de Tickets.

Define o contrato do repositório de tickets e a implementação
em memória usada pela aplicação.

Tipos de Ports:
- TicketRepository: Interface para CRUD de tickets com busca dupla
  (por ID de sistema e por ticketId)

Princípio:
    Core define interfaces -> Adapters implementam
    Dependências sempre apontam para o Core

Conflitos e ausências são retornados como resultados tipados
(Ok / Conflict / NotFound), nunca lançados como exceção.
"""

import logging
import threading
import uuid
from dataclasses import replace
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
    Set,
    runtime_checkable,
)

from src.core.shared.results import Conflict, CreateResult, NotFound, Ok, UpdateResult

from .entities import TicketEntity

logger = logging.getLogger(__name__)


@runtime_checkable
class TicketRepository(Protocol):
    """
    Interface para persistência de Tickets.

    Implementações:
    - InMemoryTicketRepository (store volátil do processo)

    Methods:
        list_all: Lista todos
        get_by_id: Busca por ID de sistema
        get_by_ticket_id: Busca por ticketId
        exists_ticket_id: Verifica se ticketId já está em uso
        create: Cria um ticket (Conflict se ticketId em uso)
        create_many: Cria vários, tudo ou nada
        update: Atualização parcial por ID de sistema
        delete: Remove por ID de sistema
        delete_all: Remove todos, retorna quantidade
        count: Conta tickets
    """

    def list_all(self) -> List[TicketEntity]:
        ...

    def get_by_id(self, id: str) -> Optional[TicketEntity]:
        ...

    def get_by_ticket_id(self, ticket_id: str) -> Optional[TicketEntity]:
        ...

    def exists_ticket_id(self, ticket_id: str) -> bool:
        ...

    def create(self, ticket: TicketEntity) -> CreateResult[TicketEntity]:
        """
        Persiste novo ticket, atribuindo ID de sistema.

        Returns:
            Ok(ticket criado) ou Conflict se ticketId já existe
        """
        ...

    def create_many(self, tickets: Iterable[TicketEntity]) -> CreateResult[List[TicketEntity]]:
        """
        Persiste lote de tickets na ordem recebida.

        Se qualquer item conflitar, todos os itens já inseridos por
        esta chamada são removidos antes de retornar Conflict.
        """
        ...

    def update(self, id: str, alteracoes: Mapping[str, Any]) -> UpdateResult[TicketEntity]:
        """
        Atualização parcial por ID de sistema.

        Returns:
            Ok(ticket atualizado), NotFound ou Conflict (ticketId novo em uso)
        """
        ...

    def delete(self, id: str) -> bool:
        ...

    def delete_all(self) -> int:
        ...

    def count(self) -> int:
        ...


class InMemoryTicketRepository:
    """
    Implementação em memória do TicketRepository.

    Estado:
    - _tickets: fonte da verdade, ID de sistema -> TicketEntity
    - _ids_por_ticket_id: índice secundário, ticketId -> ID de sistema

    Os dois mapas mudam sempre juntos, dentro do mesmo lock, e toda
    mutação parcial é desfeita antes de a falha ser propagada.
    Leituras retornam cópias; ninguém fora do repositório segura
    referência mutável para um registro.

    Example:
        repo = InMemoryTicketRepository()
        result = repo.create(ticket)
        if isinstance(result, Ok):
            found = repo.get_by_ticket_id(ticket.ticket_id)
    """

    def __init__(
        self,
        initial_tickets: Iterable[TicketEntity] = (),
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """
        Inicializa store, opcionalmente com estado inicial.

        Args:
            initial_tickets: Tickets a inserir na criação
            id_factory: Gerador de IDs de sistema (default: UUID4)

        Raises:
            ValueError: Se o estado inicial tem ticketId repetido
        """
        self._tickets: Dict[str, TicketEntity] = {}
        self._ids_por_ticket_id: Dict[str, str] = {}
        self._ids_emitidos: Set[str] = set()
        self._lock = threading.RLock()
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))

        initial_tickets = list(initial_tickets)
        if initial_tickets:
            result = self.create_many(initial_tickets)
            if isinstance(result, Conflict):
                raise ValueError(f"Estado inicial inválido: {result.message}")

    # =========================================================================
    # Leitura
    # =========================================================================

    def list_all(self) -> List[TicketEntity]:
        """Lista todos os tickets, em ordem de inserção."""
        with self._lock:
            return [self._copiar(ticket) for ticket in self._tickets.values()]

    def get_by_id(self, id: str) -> Optional[TicketEntity]:
        """Busca ticket por ID de sistema."""
        with self._lock:
            ticket = self._tickets.get(id)
            if ticket is None:
                logger.debug(f"Ticket not found: {id}")
                return None
            return self._copiar(ticket)

    def get_by_ticket_id(self, ticket_id: str) -> Optional[TicketEntity]:
        """Busca ticket pelo ticketId externo."""
        with self._lock:
            id = self._ids_por_ticket_id.get(ticket_id)
            if id is None:
                return None
            return self._copiar(self._tickets[id])

    def exists_ticket_id(self, ticket_id: str) -> bool:
        with self._lock:
            return ticket_id in self._ids_por_ticket_id

    def count(self) -> int:
        with self._lock:
            return len(self._tickets)

    # =========================================================================
    # Escrita
    # =========================================================================

    def create(self, ticket: TicketEntity) -> CreateResult[TicketEntity]:
        """Cria ticket; Conflict se ticketId já está em uso."""
        with self._lock:
            if ticket.ticket_id in self._ids_por_ticket_id:
                logger.warning(f"Ticket ID conflict on create: {ticket.ticket_id}")
                return self._conflito(ticket.ticket_id)

            registro = self._preparar(ticket)
            self._inserir(registro)

            logger.info(f"Ticket created: {registro.id} ({registro.ticket_id})")
            return Ok(self._copiar(registro))

    def create_many(self, tickets: Iterable[TicketEntity]) -> CreateResult[List[TicketEntity]]:
        """
        Cria lote de tickets, tudo ou nada.

        Itens são inseridos um a um; o conflito é detectado no momento
        da inserção, inclusive entre itens do próprio lote (o primeiro
        com um dado ticketId entra, o segundo dispara o rollback).
        """
        with self._lock:
            criados: List[TicketEntity] = []

            try:
                for ticket in tickets:
                    if ticket.ticket_id in self._ids_por_ticket_id:
                        self._desfazer(criados)
                        logger.warning(
                            f"Ticket ID conflict on batch insert: {ticket.ticket_id}; "
                            f"rolled back {len(criados)} ticket(s)"
                        )
                        return self._conflito(ticket.ticket_id)

                    registro = self._preparar(ticket)
                    self._inserir(registro)
                    criados.append(registro)
            except Exception:
                self._desfazer(criados)
                logger.error(f"Batch insert failed; rolled back {len(criados)} ticket(s)")
                raise

            logger.info(f"Tickets created in batch: {len(criados)}")
            return Ok([self._copiar(ticket) for ticket in criados])

    def update(self, id: str, alteracoes: Mapping[str, Any]) -> UpdateResult[TicketEntity]:
        """
        Atualização parcial por ID de sistema.

        Não revalida conteúdo (ex: damage_types não vazio); confia que
        o chamador enviou dados validados. O ID de sistema é imutável
        e é ignorado se vier nas alterações.

        Raises:
            ValueError: Se alguma chave não é campo do ticket
        """
        alteracoes = {nome: valor for nome, valor in alteracoes.items() if nome != "id"}
        desconhecidos = set(alteracoes) - set(TicketEntity.campos_editaveis())
        if desconhecidos:
            raise ValueError(f"Campos desconhecidos: {', '.join(sorted(desconhecidos))}")

        with self._lock:
            atual = self._tickets.get(id)
            if atual is None:
                logger.debug(f"Ticket not found for update: {id}")
                return NotFound(id)

            novo = replace(atual, **TicketEntity.normalizar_campos(alteracoes))
            mudou_ticket_id = novo.ticket_id != atual.ticket_id

            if mudou_ticket_id and novo.ticket_id in self._ids_por_ticket_id:
                logger.warning(f"Ticket ID conflict on update: {novo.ticket_id}")
                return self._conflito(novo.ticket_id)

            try:
                if mudou_ticket_id:
                    del self._ids_por_ticket_id[atual.ticket_id]
                self._tickets[id] = novo
                self._ids_por_ticket_id[novo.ticket_id] = id
            except Exception:
                if mudou_ticket_id:
                    self._ids_por_ticket_id.pop(novo.ticket_id, None)
                self._tickets[id] = atual
                self._ids_por_ticket_id[atual.ticket_id] = id
                raise

            logger.info(f"Ticket updated: {id}")
            return Ok(self._copiar(novo))

    def delete(self, id: str) -> bool:
        """Remove ticket dos dois mapas; False se não existe."""
        with self._lock:
            ticket = self._tickets.get(id)
            if ticket is None:
                logger.debug(f"Ticket not found for deletion: {id}")
                return False

            self._remover(ticket)
            logger.info(f"Ticket deleted: {id}")
            return True

    def delete_all(self) -> int:
        """Remove todos os tickets; retorna quantos existiam."""
        with self._lock:
            total = len(self._tickets)
            self._tickets.clear()
            self._ids_por_ticket_id.clear()

            logger.info(f"All tickets deleted: {total}")
            return total

    # =========================================================================
    # Internos
    # =========================================================================

    def _preparar(self, ticket: TicketEntity) -> TicketEntity:
        """Cópia com ID novo e opcionais vazios como None."""
        return replace(
            ticket,
            id=self._novo_id(),
            damage_types=list(ticket.damage_types),
            ticket_url=ticket.ticket_url or None,
            observations=ticket.observations or None,
            notes=ticket.notes or None,
        )

    def _novo_id(self) -> str:
        id = self._id_factory()
        while id in self._ids_emitidos:
            id = self._id_factory()
        self._ids_emitidos.add(id)
        return id

    def _inserir(self, ticket: TicketEntity) -> None:
        """Insere nos dois mapas; desfaz o primeiro se o segundo falhar."""
        self._tickets[ticket.id] = ticket
        try:
            self._ids_por_ticket_id[ticket.ticket_id] = ticket.id
        except Exception:
            self._tickets.pop(ticket.id, None)
            raise

    def _remover(self, ticket: TicketEntity) -> None:
        self._tickets.pop(ticket.id, None)
        if self._ids_por_ticket_id.get(ticket.ticket_id) == ticket.id:
            del self._ids_por_ticket_id[ticket.ticket_id]

    def _desfazer(self, criados: List[TicketEntity]) -> None:
        for ticket in reversed(criados):
            self._remover(ticket)

    @staticmethod
    def _conflito(ticket_id: str) -> Conflict:
        return Conflict(key=ticket_id, message=f"Ticket ID {ticket_id} already exists")

    @staticmethod
    def _copiar(ticket: TicketEntity) -> TicketEntity:
        return replace(ticket, damage_types=list(ticket.damage_types))
