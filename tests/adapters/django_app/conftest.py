"""
Configuração pytest para testes com Django.

Este arquivo configura:
- Django settings para testes (sem banco de dados)
- Container DI limpo a cada teste
- Fixtures de request/client
"""

import pytest


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            ALLOWED_HOSTS=['testserver', 'localhost'],
            DATABASES={},
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'src.adapters.django_app.tickets',
                'src.adapters.django_app.orders',
            ],
            ROOT_URLCONF='src.config.urls',
            MIDDLEWARE=[],
            APPEND_SLASH=False,
            USE_TZ=True,
            TIME_ZONE='UTC',
            API_PREFIX='api/',
            SEED_SAMPLE_DATA=False,
        )
        django.setup()


@pytest.fixture(autouse=True)
def reset_di_container():
    """Reset container entre testes (repositórios vazios)."""
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def rf():
    """Request Factory para criar requests."""
    from django.test import RequestFactory
    return RequestFactory()


@pytest.fixture
def client():
    """Django test client."""
    from django.test import Client
    return Client()


@pytest.fixture
def api_json():
    """Helper: envia JSON e decodifica a resposta."""
    import json

    def enviar(client, method, path, body=None):
        kwargs = {}
        if body is not None:
            kwargs = {'data': json.dumps(body), 'content_type': 'application/json'}
        response = getattr(client, method)(path, **kwargs)
        data = json.loads(response.content) if response.content else None
        return response.status_code, data

    return enviar
