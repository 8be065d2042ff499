"""
URL Configuration para Damage Control.

Estrutura:
- /<API_PREFIX>tickets... - API de Tickets
- /<API_PREFIX>orders... - API de Orders
- /health - Health check
"""

from django.conf import settings
from django.urls import include, path

from src.adapters.django_app.shared.api import HealthView

API_PREFIX = getattr(settings, 'API_PREFIX', 'api/')

urlpatterns = [
    # Tickets App
    path(API_PREFIX, include('src.adapters.django_app.tickets.urls')),

    # Orders App
    path(API_PREFIX, include('src.adapters.django_app.orders.urls')),

    # Health check
    path('health', HealthView.as_view(), name='health'),
]
