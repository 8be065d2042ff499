"""
Pipeline de Validação baseado em Django Forms.

Implementa o port RecordValidator do Core: recebe um registro bruto
(dict vindo do JSON), valida com o form do tipo de registro e retorna
ValidationResult com o DTO de entrada ou as mensagens por campo.

Nunca lança exceção: entrada malformada vira lista de erros e
qualquer falha inesperada vira "Validation failed", para que a
importação em lote siga para o próximo item.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Generic, List, Type, TypeVar

from src.core.shared.validation import ValidationResult

from .forms import SchemaForm, json_type_name

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FormValidator(Generic[T]):
    """
    Adapter: Django Form -> RecordValidator.

    Subclasses definem:
        form_class: Form do registro
        field_names: Mapa nome JSON (camelCase) -> nome do campo do form
        build(cleaned_data): Monta o DTO de entrada

    Attributes:
        partial: Valida apenas os campos presentes (PATCH)
    """

    form_class: Type[SchemaForm] = SchemaForm
    field_names: Dict[str, str] = {}
    partial: bool = False

    def validate(self, raw: Any) -> ValidationResult[T]:
        """
        Valida registro bruto.

        Args:
            raw: Item não confiável (qualquer valor JSON)

        Returns:
            ValidationResult.ok(dto) ou ValidationResult.invalid(erros)
        """
        try:
            if not isinstance(raw, Mapping):
                return ValidationResult.invalid(
                    [f"Expected object, received {json_type_name(raw)}"]
                )

            form = self.form_class(data=self._form_data(raw), partial=self.partial)

            if not form.is_valid():
                return ValidationResult.invalid(self._mensagens(form))

            return ValidationResult.ok(self.build(form.cleaned_data))
        except Exception:
            logger.exception(f"Unexpected failure validating record with {self.form_class.__name__}")
            return ValidationResult.failed()

    def build(self, cleaned_data: Dict[str, Any]) -> T:
        raise NotImplementedError

    def _form_data(self, raw: Mapping) -> Dict[str, Any]:
        """Renomeia chaves JSON para nomes de campo; ignora chaves desconhecidas."""
        return {
            field_name: raw[json_name]
            for json_name, field_name in self.field_names.items()
            if json_name in raw
        }

    def _mensagens(self, form: SchemaForm) -> List[str]:
        """Mensagens no formato '<erro> at "<campoJson>"'."""
        json_names = {field_name: json_name for json_name, field_name in self.field_names.items()}
        mensagens = []

        for field_name, errors in form.errors.items():
            json_name = json_names.get(field_name)
            for error in errors:
                mensagens.append(f'{error} at "{json_name}"' if json_name else str(error))

        return mensagens
