from typing import Any, Protocol, TypeVar


class Comparable(Protocol):
    """
    Capacidade exigida das chaves da árvore: ordem total via '<' e '=='.
    int, float, str, tuple e datetime já atendem sem nenhuma adaptação.
    """
    def __lt__(self, other: Any) -> bool: ...

    def __eq__(self, other: object) -> bool: ...


# Chave ordenável (limitada a Comparable) e valor sem restrição
K = TypeVar("K", bound=Comparable)
V = TypeVar("V")
