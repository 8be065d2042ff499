"""
Configurações globais do Pytest para Damage Control.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures compartilhadas entre testes do Core e dos Adapters.
"""

import itertools
from datetime import datetime, timezone
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture
def ticket_payload():
    """
    Factory de ticket válido no formato JSON da API (camelCase).

    Example:
        payload = ticket_payload(ticketId="T-9", notes="x")
    """
    def criar(**overrides):
        payload = {
            "ticketId": "T1",
            "orderNumber": "ORD-1001",
            "trackingNumber": "6129ABC",
            "carrier": "FedEx",
            "service": "FedEx Express Saver",
            "produto": "Glow",
            "damageTypes": ["Quebrado"],
            "dateReported": "2025-10-20T10:30:00Z",
        }
        payload.update(overrides)
        return payload

    return criar


@pytest.fixture
def order_payload():
    """Factory de pedido válido no formato JSON da API."""
    def criar(**overrides):
        payload = {
            "trackingNumber": "1zc6j0001",
            "orderNumber": "ORD-2001",
            "produto": "Longevity",
        }
        payload.update(overrides)
        return payload

    return criar


@pytest.fixture
def ticket_entity_factory():
    """Factory de TicketEntity para testes do Core."""
    from src.core.tickets.entities import TicketEntity

    def criar(**overrides):
        dados = {
            "ticket_id": "T1",
            "order_number": "ORD-1001",
            "tracking_number": "6129ABC",
            "carrier": "FedEx",
            "service": "FedEx Express Saver",
            "produto": "Glow",
            "damage_types": ["Quebrado"],
            "date_reported": datetime(2025, 10, 20, 10, 30, tzinfo=timezone.utc),
        }
        dados.update(overrides)
        return TicketEntity.criar(**dados)

    return criar


@pytest.fixture
def sequential_ids():
    """Gerador de IDs previsíveis (id-1, id-2, ...)."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def inmemory_ticket_repo(sequential_ids):
    """Repositório de tickets em memória, vazio."""
    from src.core.tickets.ports import InMemoryTicketRepository
    return InMemoryTicketRepository(id_factory=sequential_ids)


@pytest.fixture
def inmemory_order_repo():
    """Repositório de pedidos em memória, vazio."""
    from src.core.orders.ports import InMemoryOrderRepository
    return InMemoryOrderRepository()
