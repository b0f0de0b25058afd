"""Política local de troca de senha.

Validação puramente local: nenhuma mutação acontece se a política
rejeitar a nova senha.
"""

from __future__ import annotations

from dataclasses import dataclass

from utils.errors import PasswordPolicyViolationError

DEFAULT_MIN_LENGTH = 6

PASSWORD_MISMATCH_MESSAGE = "A confirmação não coincide com a nova senha"


@dataclass(frozen=True, slots=True)
class PasswordPolicy:
    """Regras aplicadas à nova senha.

    Attributes:
        min_length: Tamanho mínimo aceito
    """

    min_length: int = DEFAULT_MIN_LENGTH

    def check(self, new_password: str, confirm_password: str) -> list[str]:
        """Lista de violações (vazia = OK)."""
        violations: list[str] = []
        if new_password != confirm_password:
            violations.append(PASSWORD_MISMATCH_MESSAGE)
        if len(new_password) < self.min_length:
            violations.append(
                f"A senha deve ter pelo menos {self.min_length} caracteres"
            )
        return violations

    def enforce(self, new_password: str, confirm_password: str) -> None:
        """Levanta PasswordPolicyViolationError na primeira violação."""
        violations = self.check(new_password, confirm_password)
        if violations:
            raise PasswordPolicyViolationError(violations[0])
