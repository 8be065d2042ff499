"""
Resultados tipados das operações de repositório.

Conflitos e ausências são resultados esperados do negócio, não falhas.
Por isso os repositórios retornam variantes explícitas em vez de
lançar exceções:

    Ok(value)            -> operação aplicada
    Conflict(key, msg)   -> ticketId já pertence a outro ticket vivo
    NotFound(entity_id)  -> ID de sistema inexistente

Example:
    result = repo.update(ticket_id, {"notes": "x"})
    if isinstance(result, NotFound):
        ...
    elif isinstance(result, Conflict):
        ...
    else:
        ticket = result.value
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Operação aplicada com sucesso."""

    value: T


@dataclass(frozen=True)
class Conflict:
    """
    Violação de unicidade.

    Attributes:
        key: Valor de ticketId em conflito
        message: Mensagem legível para o usuário
    """

    key: str
    message: str


@dataclass(frozen=True)
class NotFound:
    """ID de sistema sem registro correspondente."""

    entity_id: str


CreateResult = Union[Ok[T], Conflict]
UpdateResult = Union[Ok[T], Conflict, NotFound]
