"""
Tickets de exemplo para desenvolvimento local (SEED_SAMPLE_DATA=true).
"""

from datetime import datetime, timezone
from typing import List

from .entities import TicketEntity


def sample_tickets() -> List[TicketEntity]:
    """Cinco tickets cobrindo todas as transportadoras."""
    return [
        TicketEntity.criar(
            ticket_id="TICKET-001",
            order_number="ORD-12345",
            tracking_number="6129-ABC-DEF",
            carrier="FedEx",
            service="FedEx 2 Day (by end of the day in two days)",
            produto="Longevity",
            ticket_url="https://example.com/ticket/001",
            damage_types=["Quebrado", "Embalagem danificada"],
            date_reported=datetime(2025, 10, 20, 10, 30, tzinfo=timezone.utc),
            observations="Caixa chegou visivelmente danificada com produto quebrado",
            notes="Cliente reportou imediatamente",
        ),
        TicketEntity.criar(
            ticket_id="TICKET-002",
            order_number="ORD-12346",
            tracking_number="94-XYZ-123",
            carrier="USPS",
            service="USPS Priority Mail Express",
            produto="Glow",
            ticket_url="https://example.com/ticket/002",
            damage_types=["Manchado"],
            date_reported=datetime(2025, 10, 19, 14, 15, tzinfo=timezone.utc),
            observations="Produto com manchas de água",
            notes="Possível exposição à chuva durante transporte",
        ),
        TicketEntity.criar(
            ticket_id="TICKET-003",
            order_number="ORD-12347",
            tracking_number="1ZC6J-456-789",
            carrier="UPS",
            service="UPS Ground",
            produto="Calm",
            ticket_url="https://example.com/ticket/003",
            damage_types=["Amassado"],
            date_reported=datetime(2025, 10, 18, 9, 45, tzinfo=timezone.utc),
            observations="Embalagem amassada em um dos cantos",
            notes="Produto interno sem danos",
        ),
        TicketEntity.criar(
            ticket_id="TICKET-004",
            order_number="ORD-12348",
            tracking_number="1LSC-ABC-XYZ",
            carrier="OnTrac",
            service="ShipMonk Economy",
            produto="Lean Muscle",
            ticket_url="https://example.com/ticket/004",
            damage_types=["Faltando Produto"],
            date_reported=datetime(2025, 10, 17, 16, 20, tzinfo=timezone.utc),
            observations="Peça acessória faltando na embalagem",
            notes="Cliente solicitou envio da peça separadamente",
        ),
        TicketEntity.criar(
            ticket_id="TICKET-005",
            order_number="ORD-12349",
            tracking_number="9261-DEF-456",
            carrier="DHL",
            service="ShipMonk Standard",
            produto="Hydro burn",
            ticket_url="https://example.com/ticket/005",
            damage_types=["Quebrado", "Manchado"],
            date_reported=datetime(2025, 10, 16, 11, 0, tzinfo=timezone.utc),
            observations="Produto quebrado e com manchas",
            notes="Reembolso total processado",
        ),
    ]
