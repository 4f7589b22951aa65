"""
Exceptions customizadas da API BlueBank.

Toda regra de negocio violada na camada de servico vira uma destas
exceptions; os handlers em app.api.error_handlers mapeiam cada uma para
um status HTTP.
"""
from typing import Optional


class BlueBankException(Exception):
    """Base exception para todos os erros do sistema."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class DatabaseError(BlueBankException):
    """Erro de banco de dados (Supabase)."""
    pass


class ValidationError(BlueBankException):
    """Erro de validacao de dados de entrada."""
    pass


class NotFoundError(BlueBankException):
    """
    Recurso nao encontrado.

    Tambem usado quando o recurso existe mas nao pertence ao
    correntista informado (endereco/contato de outro dono).
    """

    def __init__(
        self,
        resource: str,
        identifier: Optional[int | str] = None,
        message: Optional[str] = None
    ):
        self.resource = resource
        details = {"recurso": resource}
        if identifier is not None:
            details["id"] = identifier
        if message is None:
            message = f"{resource} nao encontrado"
            if identifier is not None:
                message = f"{resource} de id {identifier} nao encontrado"
        super().__init__(message, details)


class RecursoBloqueadoError(BlueBankException):
    """Operacao proibida sobre recurso protegido (ex: correntista BlueBank)."""

    def __init__(
        self,
        message: str = (
            "Recurso de correntista bloqueado para esta operacao "
            "por motivo de manter a integridade da regra de negocios"
        ),
        identifier: Optional[int] = None
    ):
        details = {}
        if identifier is not None:
            details["id"] = identifier
        super().__init__(message, details)


class EntidadeEmUsoError(BlueBankException):
    """Exclusao bloqueada por registros que referenciam a entidade."""

    def __init__(
        self,
        message: str,
        identifier: Optional[int] = None,
        original_error: Optional[Exception] = None
    ):
        details = {}
        if identifier is not None:
            details["id"] = identifier
        super().__init__(message, details, original_error)


class ConfigurationError(BlueBankException):
    """Erro de configuracao do sistema."""
    pass
