#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Opcionalmente popula o repositório com os tickets de exemplo
3. Mostra as rotas da API
4. Sobe o servidor de desenvolvimento

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data --port 5000
"""

import os
import sys
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django(with_sample_data: bool):
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    if with_sample_data:
        os.environ['SEED_SAMPLE_DATA'] = 'true'

    import django
    django.setup()


def show_info(port: int):
    """Mostra informações do setup."""
    from django.conf import settings
    from src.config.container import get_container

    tickets = get_container().ticket_repository().count()
    base = f"http://localhost:{port}/{settings.API_PREFIX}"

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  Tickets carregados: {tickets}")
    print("=" * 60)
    print("\n🚀 Endpoints:")
    print(f"   {base}tickets")
    print(f"   {base}tickets/stats")
    print(f"   {base}orders")
    print(f"   http://localhost:{port}/health")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Carregar tickets de exemplo'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=8000,
        help='Porta do servidor de desenvolvimento'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Damage Control - Quick Setup")
    print("=" * 60 + "\n")

    setup_django(args.with_sample_data)
    show_info(args.port)

    from django.core.management import call_command

    # Sem autoreload: o repositório em memória vive neste processo
    call_command('runserver', str(args.port), use_reloader=False)


if __name__ == '__main__':
    main()
