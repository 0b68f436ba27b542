"""
Contrato fluente de validação.

Encadeia regras e registra uma notificação para cada regra violada.
Nunca lança exceção: o resultado é consultado via ``notifications``
ou ``is_valid``.

Example:
    contrato = (
        Contract()
        .requires()
        .has_min_len(nome, 3, "Name.FirstName", "Name must have 3 characters minimum")
        .has_max_len(nome, 40, "Name.FirstName", "Name must have 40 characters maximum")
    )

    if contrato.is_invalid:
        ...
"""

from decimal import Decimal
from typing import Any, Optional, Tuple

from email_validator import EmailNotValidError, validate_email

from .notifications import Notification, Notifications


def _is_nan(value: Any) -> bool:
    return isinstance(value, Decimal) and value.is_nan()


class Contract:
    """Acumulador fluente de regras de validação."""

    def __init__(self):
        self._notifications = Notifications()

    def requires(self) -> "Contract":
        """Marca o início das regras (apenas legibilidade)."""
        return self

    def _check(self, ok: bool, key: str, message: str) -> "Contract":
        if not ok:
            self._notifications.add(key, message)
        return self

    def is_not_null_or_empty(self, value: Optional[str], key: str, message: str) -> "Contract":
        return self._check(bool(value and value.strip()), key, message)

    def has_min_len(self, value: Optional[str], minimum: int, key: str, message: str) -> "Contract":
        return self._check(len(value or "") >= minimum, key, message)

    def has_max_len(self, value: Optional[str], maximum: int, key: str, message: str) -> "Contract":
        return self._check(len(value or "") <= maximum, key, message)

    def has_len(self, value: Optional[str], length: int, key: str, message: str) -> "Contract":
        return self._check(len(value or "") == length, key, message)

    def is_email(self, value: Optional[str], key: str, message: str) -> "Contract":
        if not value:
            return self._check(False, key, message)
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return self._check(False, key, message)
        return self

    def is_true(self, condition: bool, key: str, message: str) -> "Contract":
        return self._check(bool(condition), key, message)

    def is_false(self, condition: bool, key: str, message: str) -> "Contract":
        return self._check(not condition, key, message)

    def are_equals(self, value: Any, expected: Any, key: str, message: str) -> "Contract":
        return self._check(value == expected, key, message)

    def is_greater_than(self, value: Any, comparer: Any, key: str, message: str) -> "Contract":
        if value is None or _is_nan(value) or _is_nan(comparer):
            return self._check(False, key, message)
        return self._check(value > comparer, key, message)

    def is_greater_or_equals_than(self, value: Any, comparer: Any, key: str, message: str) -> "Contract":
        if value is None or _is_nan(value) or _is_nan(comparer):
            return self._check(False, key, message)
        return self._check(value >= comparer, key, message)

    def has_precision(self, value: Optional[Decimal], max_digits: int, decimal_places: int,
                      key: str, message: str) -> "Contract":
        """
        Valor decimal finito que cabe em max_digits dígitos, dos quais
        até decimal_places após a vírgula (zeros à direita ignorados).
        """
        if value is None or not value.is_finite():
            return self._check(False, key, message)

        _, digits, exponent = value.normalize().as_tuple()
        if exponent >= 0:
            whole_digits = 0 if digits == (0,) else len(digits) + exponent
            decimals = 0
        else:
            decimals = -exponent
            whole_digits = max(len(digits) - decimals, 0)

        return self._check(
            decimals <= decimal_places and whole_digits <= max_digits - decimal_places,
            key,
            message,
        )

    def join(self, *sources: Any) -> "Contract":
        """Agrega notificações de outros objetos validáveis."""
        self._notifications.extend(*sources)
        return self

    @property
    def notifications(self) -> Tuple[Notification, ...]:
        return tuple(self._notifications)

    @property
    def is_valid(self) -> bool:
        return not self._notifications

    @property
    def is_invalid(self) -> bool:
        return bool(self._notifications)
