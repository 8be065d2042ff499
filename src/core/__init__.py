"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.

Subpacotes:
- shared: Exceções, resultados, vocabulários, validação e agregações
- tickets: Tickets de avaria (entidades, repositório, use cases)
- orders: Pedidos importados
- imports: Orquestração de importação em lote

Características:
- Zero dependências externas (Django, dependency-injector, etc.)
- 100% testável sem servidor HTTP
"""
