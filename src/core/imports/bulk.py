"""
Orquestrador de Importação em Lote.

Valida uma sequência de registros candidatos (tickets ou orders),
separando itens aceitos de mensagens de erro por item. Não persiste
nada: quem chama decide o que fazer com os itens aceitos.

Regras:
- Itens processados estritamente na ordem de entrada
- Falha de um item (inclusive na checagem de duplicidade) nunca
  interrompe o lote
- Duplicidade (opcional) verificada contra o estado já persistido,
  não contra itens aceitos no mesmo lote
- Mensagem de erro: "<Label> <posição>[ (<identificador>)]: <motivo>"
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from src.core.shared.validation import VALIDATION_FAILED, RecordValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")

DUPLICATE_ENTRY = "Duplicate entry"


@dataclass
class BulkValidationResult(Generic[T]):
    """
    Resultado da validação de um lote.

    Attributes:
        valid_items: Itens normalizados e não duplicados, na ordem original
        errors: Uma mensagem por item rejeitado
        total: Quantidade de itens recebidos
    """

    valid_items: List[T] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    total: int = 0

    @property
    def has_valid_items(self) -> bool:
        return bool(self.valid_items)


@dataclass
class BulkImportOutputDTO(Generic[T]):
    """
    DTO de saída de uma importação persistida.

    Attributes:
        imported: Quantidade persistida
        total: Quantidade recebida
        errors: Erros por item (omitido no JSON quando vazio)
        items: DTOs de saída dos registros criados
    """

    imported: int
    total: int
    errors: List[str]
    items: List[T]

    def to_dict(self, items_key: str) -> dict:
        """
        Converte para dicionário.

        Args:
            items_key: Nome da lista no JSON ("tickets" ou "orders")
        """
        result = {
            "imported": self.imported,
            "total": self.total,
        }
        if self.errors:
            result["errors"] = list(self.errors)
        result[items_key] = [item.to_dict() for item in self.items]
        return result


def validate_bulk_items(
    items: Sequence[Any],
    validator: RecordValidator[T],
    check_duplicate: Optional[Callable[[T], bool]] = None,
    item_label: str = "Item",
    get_identifier: Optional[Callable[[T], str]] = None,
) -> BulkValidationResult[T]:
    """
    Valida lote de registros candidatos.

    Args:
        items: Registros brutos, não confiáveis
        validator: Pipeline de validação do tipo de registro
        check_duplicate: Predicado de duplicidade (None = nunca duplicado)
        item_label: Rótulo nas mensagens ("Ticket", "Order")
        get_identifier: Extrai identificador legível de um item válido

    Returns:
        BulkValidationResult com itens aceitos e erros

    Example:
        result = validate_bulk_items(
            raw_tickets,
            TicketFormValidator(),
            check_duplicate=TicketDuplicateChecker(repo),
            item_label="Ticket",
            get_identifier=lambda t: f"ID: {t.ticket_id}",
        )
    """
    result: BulkValidationResult[T] = BulkValidationResult(total=len(items))

    for position, raw in enumerate(items, start=1):
        aceito, erro = _classificar_item(
            position, raw, validator, check_duplicate, item_label, get_identifier
        )
        if erro is not None:
            result.errors.append(erro)
        else:
            result.valid_items.append(aceito)

    logger.info(
        f"{item_label} batch validated: {len(result.valid_items)} valid, "
        f"{len(result.errors)} rejected, {result.total} total"
    )
    return result


def _classificar_item(
    position: int,
    raw: Any,
    validator: RecordValidator[T],
    check_duplicate: Optional[Callable[[T], bool]],
    item_label: str,
    get_identifier: Optional[Callable[[T], str]],
) -> Tuple[Optional[T], Optional[str]]:
    """Retorna (item aceito, None) ou (None, mensagem de erro)."""
    validation = validator.validate(raw)

    if not validation.is_valid:
        return None, f"{item_label} {position}: {validation.message}"

    item = validation.value

    try:
        if check_duplicate is not None and check_duplicate(item):
            identifier = f" ({get_identifier(item)})" if get_identifier else ""
            return None, f"{item_label} {position}{identifier}: {DUPLICATE_ENTRY}"
    except Exception:
        logger.exception(f"{item_label} {position}: duplicate check failed")
        return None, f"{item_label} {position}: {VALIDATION_FAILED}"

    return item, None
