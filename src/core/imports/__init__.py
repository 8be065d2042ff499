"""
Importação em lote (planilhas CSV/XLSX já convertidas em JSON).
"""

from .bulk import (
    BulkImportOutputDTO,
    BulkValidationResult,
    validate_bulk_items,
)

__all__ = [
    "BulkImportOutputDTO",
    "BulkValidationResult",
    "validate_bulk_items",
]
