"""
URL patterns para o domínio de Orders.
"""

from django.urls import path

from . import api_views

app_name = 'orders'

urlpatterns = [
    path('orders', api_views.OrderAPIListView.as_view(), name='api_list'),

    # Antes do <pk> para não conflitar
    path('orders/bulk', api_views.OrderAPIBulkView.as_view(), name='api_bulk'),
    path('orders/stats', api_views.OrderAPIEstatisticasView.as_view(), name='api_estatisticas'),

    path('orders/<str:pk>', api_views.OrderAPIDetailView.as_view(), name='api_detail'),
]
