"""
Base de Django Forms para validação de registros JSON.

Forms são DRIVING ADAPTERS que validam dados antes de
passar para os Use Cases.

Responsabilidades:
- Validação estrutural (campos obrigatórios, tipos, vocabulários)
- Coerção de datas (texto ISO, datetime, epoch em milissegundos)
- Modo parcial para PATCH (valida só os campos enviados)

Princípios:
- Forms NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities/Use Cases
"""

from datetime import date, datetime, timezone
from typing import Any, Iterable, List, Tuple

from django import forms
from django.core.exceptions import ValidationError

REQUIRED = "Required"


def choices_from(values: Iterable[str]) -> List[Tuple[str, str]]:
    """Choices de form a partir dos valores de um vocabulário."""
    return [(value, value) for value in values]


def json_type_name(value: Any) -> str:
    """Nome do tipo JSON de um valor (para mensagens)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class TextField(forms.CharField):
    """
    CharField que aceita apenas texto, preservado como enviado.

    Espaços nas bordas fazem parte do valor (" T1 " e "T1" são
    ticketIds distintos). Números, listas, objetos e booleanos são
    rejeitados.
    """

    default_error_messages = {
        "required": REQUIRED,
        "invalid_type": "Expected string, received %(type)s",
    }

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("strip", False)
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if isinstance(value, (list, tuple, dict, bool, int, float)):
            raise ValidationError(
                self.error_messages["invalid_type"],
                code="invalid_type",
                params={"type": json_type_name(value)},
            )
        return super().to_python(value)


class CoercedDateTimeField(forms.DateTimeField):
    """
    DateTimeField que também aceita epoch em milissegundos.

    Entradas aceitas:
    - datetime / date
    - texto ISO-8601 ou formatos de data do Django
    - int/float (milissegundos desde 1970-01-01 UTC)
    """

    default_error_messages = {
        "required": REQUIRED,
        "invalid": "Invalid date",
    }

    def to_python(self, value):
        if isinstance(value, bool):
            raise ValidationError(self.error_messages["invalid"], code="invalid")

        if isinstance(value, (int, float)):
            try:
                return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                raise ValidationError(self.error_messages["invalid"], code="invalid")

        if value not in self.empty_values and not isinstance(value, (str, date)):
            raise ValidationError(self.error_messages["invalid"], code="invalid")

        return super().to_python(value)


class SchemaForm(forms.Form):
    """
    Form base para registros da API.

    Em modo parcial, campos ausentes nos dados são removidos do form:
    somente o que foi enviado é validado, com as mesmas regras da
    criação (um damageTypes vazio continua inválido).

    Example:
        form = TicketForm(data={"notes": "x"}, partial=True)
        form.is_valid()  # True
        form.cleaned_data  # {"notes": "x"}
    """

    def __init__(self, *args, partial: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.partial = partial

        if partial:
            for name in list(self.fields):
                if name not in self.data:
                    del self.fields[name]
