"""
URL patterns para o domínio de Tickets.

Endpoints API JSON:
- GET/POST/DELETE tickets
- POST tickets/bulk
- GET tickets/stats
- GET/PATCH/DELETE tickets/<id>
"""

from django.urls import path

from . import api_views

app_name = 'tickets'

urlpatterns = [
    # Listagem, criação e remoção total
    path('tickets', api_views.TicketAPIListView.as_view(), name='api_list'),

    # Importação e estatísticas (antes do <pk> para não conflitar)
    path('tickets/bulk', api_views.TicketAPIBulkView.as_view(), name='api_bulk'),
    path('tickets/stats', api_views.TicketAPIEstatisticasView.as_view(), name='api_estatisticas'),

    # Detalhes, atualização e remoção
    path('tickets/<str:pk>', api_views.TicketAPIDetailView.as_view(), name='api_detail'),
]
