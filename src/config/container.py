"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositórios em memória)
- Factory: Nova instância por chamada (validators, services)
- Configuration: Valores vindos do Django settings

O estado inicial dos repositórios é injetado pelo construtor;
nenhum módulo guarda store global fora do container.
"""

from typing import List, Optional

from dependency_injector import containers, providers

from src.adapters.django_app.orders.forms import OrderFormValidator
from src.adapters.django_app.tickets.forms import (
    TicketFormValidator,
    TicketPatchFormValidator,
)
from src.core.orders.ports import InMemoryOrderRepository
from src.core.orders.use_cases import (
    EstatisticasOrdersService,
    ImportarOrdersService,
    ListarOrdersService,
    ObterOrderService,
    RemoverTodosOrdersService,
)
from src.core.tickets.entities import TicketEntity
from src.core.tickets.ports import InMemoryTicketRepository
from src.core.tickets.samples import sample_tickets
from src.core.tickets.use_cases import (
    AtualizarTicketService,
    CriarTicketService,
    EstatisticasTicketsService,
    ImportarTicketsService,
    ListarTicketsService,
    ObterTicketService,
    RemoverTicketService,
    RemoverTodosTicketsService,
)


def _initial_tickets(seed_sample_data) -> List[TicketEntity]:
    """Tickets iniciais do repositório (exemplos só quando habilitado)."""
    return sample_tickets() if seed_sample_data else []


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Configuration: Variáveis de ambiente/settings
    - Repositories: Persistência em memória
    - Validators: Pipeline de validação (Django Forms)
    - Services: Use Cases

    Example:
        from src.config.container import Container

        container = Container()
        container.config.from_dict({'seed_sample_data': True})

        # Usar service
        service = container.criar_ticket_service()
        result = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Repositories (Singleton - uma instância por container)
    # =========================================================================

    ticket_repository = providers.Singleton(
        InMemoryTicketRepository,
        initial_tickets=providers.Callable(_initial_tickets, config.seed_sample_data),
    )

    order_repository = providers.Singleton(InMemoryOrderRepository)

    # =========================================================================
    # Validators (Factory)
    # =========================================================================

    ticket_validator = providers.Factory(TicketFormValidator)

    ticket_patch_validator = providers.Factory(TicketPatchFormValidator)

    order_validator = providers.Factory(OrderFormValidator)

    # =========================================================================
    # Services / Use Cases - Tickets (Factory - nova instância por chamada)
    # =========================================================================

    listar_tickets_service = providers.Factory(
        ListarTicketsService,
        ticket_repo=ticket_repository,
    )

    obter_ticket_service = providers.Factory(
        ObterTicketService,
        ticket_repo=ticket_repository,
    )

    criar_ticket_service = providers.Factory(
        CriarTicketService,
        ticket_repo=ticket_repository,
    )

    importar_tickets_service = providers.Factory(
        ImportarTicketsService,
        ticket_repo=ticket_repository,
        validator=ticket_validator,
    )

    atualizar_ticket_service = providers.Factory(
        AtualizarTicketService,
        ticket_repo=ticket_repository,
    )

    remover_ticket_service = providers.Factory(
        RemoverTicketService,
        ticket_repo=ticket_repository,
    )

    remover_todos_tickets_service = providers.Factory(
        RemoverTodosTicketsService,
        ticket_repo=ticket_repository,
    )

    estatisticas_tickets_service = providers.Factory(
        EstatisticasTicketsService,
        ticket_repo=ticket_repository,
    )

    # =========================================================================
    # Services / Use Cases - Orders
    # =========================================================================

    listar_orders_service = providers.Factory(
        ListarOrdersService,
        order_repo=order_repository,
    )

    obter_order_service = providers.Factory(
        ObterOrderService,
        order_repo=order_repository,
    )

    importar_orders_service = providers.Factory(
        ImportarOrdersService,
        order_repo=order_repository,
        validator=order_validator,
    )

    remover_todos_orders_service = providers.Factory(
        RemoverTodosOrdersService,
        order_repo=order_repository,
    )

    estatisticas_orders_service = providers.Factory(
        EstatisticasOrdersService,
        order_repo=order_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization), configurado a partir
    do Django settings.

    Returns:
        Container configurado
    """
    global _container

    if _container is None:
        from django.conf import settings

        container = Container()
        container.config.from_dict({
            'seed_sample_data': getattr(settings, 'SEED_SAMPLE_DATA', False),
        })
        _container = container

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).

    Permite criar novo container limpo, com repositórios vazios.
    """
    global _container
    _container = None
