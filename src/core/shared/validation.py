"""
Contrato do Pipeline de Validação.

O Core não conhece o mecanismo de validação (Django Forms no adapter);
conhece apenas o resultado: um registro normalizado OU uma lista de
erros legíveis por campo. Validadores nunca lançam exceção para
entrada malformada.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Protocol, Tuple, TypeVar, runtime_checkable

T = TypeVar("T")

VALIDATION_FAILED = "Validation failed"


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """
    Resultado de validação de um registro candidato.

    Attributes:
        value: Registro normalizado (None se inválido)
        errors: Descrições por campo, ex: 'Required at "carrier"'
        message: Resumo único para respostas de item único
    """

    value: Optional[T] = None
    errors: Tuple[str, ...] = field(default_factory=tuple)
    message: str = ""

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def ok(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def invalid(cls, errors) -> "ValidationResult[T]":
        errors = tuple(errors)
        return cls(errors=errors, message=f"Validation error: {'; '.join(errors)}")

    @classmethod
    def failed(cls, reason: str = VALIDATION_FAILED) -> "ValidationResult[T]":
        """Falha inesperada convertida em resultado (nunca propaga)."""
        return cls(errors=(reason,), message=reason)


@runtime_checkable
class RecordValidator(Protocol[T]):
    """
    Port do Pipeline de Validação.

    Implementações:
    - FormValidator (Django Forms) em src/adapters/django_app/shared/validation.py
    """

    def validate(self, raw: Any) -> ValidationResult[T]:
        ...
