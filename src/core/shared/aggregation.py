"""
Agregações para estatísticas de Tickets e Orders.

Funções puras sobre listas de entidades; usadas pelos Use Cases de
estatísticas para alimentar os gráficos do dashboard.
"""

from collections import Counter
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Sequence

EMPTY_TOP = {"name": "-", "value": 0}


def count_by(
    items: Iterable[Any],
    key: Callable[[Any], Any],
    vocabulary: Sequence[Any],
    drop_zero: bool = False,
) -> List[Dict[str, Any]]:
    """
    Conta itens por valor de um campo, na ordem do vocabulário.

    Args:
        items: Entidades a contar
        key: Extrai o valor (enum) do item
        vocabulary: Membros do vocabulário, define ordem e nomes
        drop_zero: Remove entradas com contagem zero

    Returns:
        Lista de {"name": str, "value": int}
    """
    counts = Counter(key(item) for item in items)
    result = [
        {"name": _name(member), "value": counts.get(member, 0)}
        for member in vocabulary
    ]
    if drop_zero:
        result = [entry for entry in result if entry["value"] > 0]
    return result


def count_by_member(
    items: Iterable[Any],
    key: Callable[[Any], Iterable[Any]],
    vocabulary: Sequence[Any],
) -> List[Dict[str, Any]]:
    """
    Conta itens que contêm cada membro de um campo lista.

    Um ticket com ["Quebrado", "Quebrado"] conta uma vez para "Quebrado".
    """
    counts: Counter = Counter()
    for item in items:
        counts.update(set(key(item)))
    return [
        {"name": _name(member), "value": counts.get(member, 0)}
        for member in vocabulary
    ]


def count_by_date(
    items: Iterable[Any],
    key: Callable[[Any], datetime],
    last_n_days: int = 30,
) -> List[Dict[str, Any]]:
    """
    Conta itens por dia, em ordem cronológica.

    Args:
        items: Entidades a contar
        key: Extrai o timestamp do item
        last_n_days: Mantém apenas os N dias mais recentes com registros

    Returns:
        Lista de {"date": "YYYY-MM-DD", "count": int}
    """
    counts = Counter(key(item).date() for item in items)
    days = sorted(counts)[-last_n_days:] if last_n_days > 0 else []
    return [{"date": day.isoformat(), "count": counts[day]} for day in days]


def find_top_item(entries: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Retorna a primeira entrada com maior valor (ou "-"/0 se nenhuma > 0)."""
    top = EMPTY_TOP
    for entry in entries:
        if entry["value"] > top["value"]:
            top = entry
    return dict(top)


def _name(member: Any) -> str:
    return getattr(member, "value", member)
