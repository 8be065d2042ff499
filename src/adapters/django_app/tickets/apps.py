"""
Configuração do Django App para Tickets.
"""

from django.apps import AppConfig


class TicketsConfig(AppConfig):
    """Configuração do app Tickets (API JSON, sem models)."""

    name = 'src.adapters.django_app.tickets'
    label = 'tickets'
    verbose_name = 'Damage Tickets'
