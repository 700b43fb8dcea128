from collections import deque, Counter
from dataclasses import dataclass
from typing import Any, List, Optional


class RotationType:
    LEFT = "ROTACAO_ESQUERDA"
    RIGHT = "ROTACAO_DIREITA"
    LEFT_RIGHT = "ROTACAO_ESQUERDA_DIREITA"   # Dupla: filho esquerdo p/ esquerda, nó p/ direita
    RIGHT_LEFT = "ROTACAO_DIREITA_ESQUERDA"   # Dupla: filho direito p/ direita, nó p/ esquerda


@dataclass(frozen=True)
class RotationEvent:
    """
    Representa uma ação de rebalanceamento na AVL.
    Uma rotação dupla gera um único evento.
    """
    rotation: str
    pivot_key: Any        # Chave do nó desbalanceado
    balance: int          # Fator de balanceamento antes da rotação
    new_root_key: Any     # Chave que passou a ser raiz da subárvore

    def __repr__(self):
        return f"[{self.rotation}] pivô={self.pivot_key} bal={self.balance:+d} -> raiz={self.new_root_key}"


class RotationLog:
    """
    Observador que registra os eventos de rotação em ordem de chegada.
    Com 'capacity' definido, guarda apenas os eventos mais recentes.
    """
    def __init__(self, capacity: Optional[int] = None):
        if capacity is not None and capacity <= 0:
            raise ValueError("A capacidade do log deve ser maior que zero.")

        self.capacity = capacity
        self._events = deque(maxlen=capacity)
        self._totals = Counter()  # Contagem total, inclusive eventos já descartados

    def __call__(self, event: RotationEvent):
        self._events.append(event)
        self._totals[event.rotation] += 1

    def events(self) -> List[RotationEvent]:
        return list(self._events)

    def count(self, rotation: Optional[str] = None) -> int:
        """Total de rotações registradas (de um tipo, ou de todos)."""
        if rotation is None:
            return sum(self._totals.values())
        return self._totals[rotation]

    def clear(self):
        self._events.clear()
        self._totals.clear()

    def __len__(self):
        return len(self._events)

    def __repr__(self):
        return f"RotationLog(total={self.count()}, retidos={len(self._events)})"


def print_rotation(event: RotationEvent):
    """Observador de console: uma linha por rotação."""
    print(f"[AVL] {event!r}")
