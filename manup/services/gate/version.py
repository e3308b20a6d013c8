"""
Comparação de versões semânticas.

Formato aceito: MAJOR.MINOR.PATCH, inteiros não-negativos.
Versão malformada é erro (MalformedError), nunca coerção para zero.
"""
import re
from typing import NamedTuple

from manup.core.exceptions import MalformedError

_SEMVER_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$", re.ASCII)


class SemVer(NamedTuple):
    """Tripla (major, minor, patch). Ordenação de tupla = ordem semver."""
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def parse_version(text: str) -> SemVer:
    """
    Converte string em SemVer.

    Args:
        text: Versão no formato "1.2.3" (espaços nas pontas são ignorados)

    Returns:
        SemVer

    Raises:
        MalformedError: Se não for exatamente três componentes numéricos
    """
    if not isinstance(text, str):
        raise MalformedError(
            "Versão deve ser string",
            {"version": repr(text)},
        )

    match = _SEMVER_RE.match(text.strip())
    if not match:
        raise MalformedError(
            "Versão inválida, esperado MAJOR.MINOR.PATCH",
            {"version": text},
        )

    return SemVer(*(int(part) for part in match.groups()))


def compare_versions(a: str, b: str) -> int:
    """
    Compara duas versões.

    Returns:
        Negativo se a < b, zero se iguais, positivo se a > b
    """
    va = parse_version(a)
    vb = parse_version(b)
    return (va > vb) - (va < vb)
