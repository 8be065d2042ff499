"""
Exceções de Domínio do Damage Control.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Os repositórios em memória NÃO lançam estas exceções para resultados
esperados (conflito, não encontrado); eles retornam resultados tipados
(ver results.py). As exceções são usadas pelos Use Cases para sinalizar
à camada HTTP o que deve ser respondido.

Hierarquia:
    DomainException (base)
    ├── ValidationError (validação de entrada)      -> 400
    ├── EntityNotFoundError (entidade não existe)   -> 404
    ├── ConflictError (ticketId duplicado)          -> 400
    └── BulkImportError (lote sem itens válidos)    -> 400
"""

from typing import List, Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.execute(input_dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (corpo de resposta da API)."""
        return {
            "error": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não atendem ao schema do registro
    (campo ausente, fora do vocabulário, data inválida...).

    Example:
        if not isinstance(tickets, list):
            raise ValidationError("Invalid request: tickets must be an array")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada pelos Use Cases quando o repositório devolve ausência
    para um ID de sistema.

    Example:
        ticket = repo.get_by_id(ticket_id)
        if ticket is None:
            raise EntityNotFoundError("Ticket not found")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")


class ConflictError(DomainException):
    """
    Violação de unicidade (ticketId já usado por outro ticket vivo).

    Example:
        result = repo.create(ticket)
        if isinstance(result, Conflict):
            raise ConflictError(result.message, key=result.key)
    """

    def __init__(self, message: str, key: str = None):
        self.key = key
        super().__init__(message, "CONFLICT")


class BulkImportError(DomainException):
    """
    Importação em lote sem nenhum item válido.

    Carrega a lista de erros por item para diagnóstico, mesmo
    quando nada foi persistido.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = list(errors or [])
        super().__init__(message, "BULK_IMPORT_FAILED")

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["errors"] = self.errors
        return result
