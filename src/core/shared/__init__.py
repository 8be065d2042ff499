"""
Shared Domain Components.

Contém componentes compartilhados entre Tickets e Orders:
- Exceções de domínio
- Resultados tipados de repositório (Ok / Conflict / NotFound)
- Contrato do pipeline de validação
- Vocabulários fechados (Carrier, Produto)
- Agregações para estatísticas
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    ConflictError,
    BulkImportError,
)
from .results import Ok, Conflict, NotFound
from .validation import ValidationResult, RecordValidator
from .vocabularies import Carrier, Produto

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    "BulkImportError",
    "Ok",
    "Conflict",
    "NotFound",
    "ValidationResult",
    "RecordValidator",
    "Carrier",
    "Produto",
]
