"""
Exceções de Domínio do contexto de Pagamentos.

Regras de negócio NÃO lançam exceções: são notificações acumuladas
nos próprios objetos (ver notifications.py). As exceções abaixo
servem às bordas do sistema, quando a entrada nem chega a formar
um comando (JSON malformado, método de pagamento desconhecido,
data ilegível).

Hierarquia:
    DomainException (base)
    └── ValidationError (entrada malformada)
"""


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Example:
        try:
            command = command_from_dict(metodo, payload)
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
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Erro de validação de dados de entrada.

    Lançada quando dados fornecidos não podem sequer ser
    convertidos em um comando.

    Example:
        if metodo not in COMMANDS:
            raise ValidationError(f"Método inválido: {metodo}", field="metodo")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result
