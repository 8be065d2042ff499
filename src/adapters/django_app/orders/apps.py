"""
Configuração do Django App para Orders.
"""

from django.apps import AppConfig


class OrdersConfig(AppConfig):
    """Configuração do app Orders (API JSON, sem models)."""

    name = 'src.adapters.django_app.orders'
    label = 'orders'
    verbose_name = 'Imported Orders'
