from typing import Callable, Generic, List, Optional, Tuple

from src.core.structures.comparable import K, V
from src.core.structures.rotation_events import RotationEvent, RotationType

Observer = Callable[[RotationEvent], None]


class AVLNode(Generic[K, V]):
    """
    Nó interno da Árvore AVL.
    Armazena a chave, o valor e a altura da subárvore.
    Os filhos pertencem exclusivamente a este nó (sem ponteiro para o pai):
    toda operação que reestrutura a subárvore devolve a nova raiz.
    """
    def __init__(self, key: K, value: V):
        self.key = key          # Imutável após a criação
        self.value = value      # Sobrescrito ao reinserir a mesma chave
        self.left: Optional["AVLNode[K, V]"] = None
        self.right: Optional["AVLNode[K, V]"] = None
        self.height = 1         # Altura inicial do nó é 1

    @staticmethod
    def _get_height(node: Optional["AVLNode"]) -> int:
        if not node:
            return 0
        return node.height

    @property
    def balance(self) -> int:
        """Fator de balanceamento: altura(direita) - altura(esquerda)."""
        return self._get_height(self.right) - self._get_height(self.left)

    def update_height(self):
        self.height = 1 + max(self._get_height(self.left), self._get_height(self.right))

    def stats(self) -> Tuple[K, int, int]:
        """(chave, balanceamento, altura) para fins de diagnóstico."""
        return self.key, self.balance, self.height

    # --- Inserção e Busca ---

    @staticmethod
    def insert_into(node: Optional["AVLNode[K, V]"], key: K, value: V,
                    events: Optional[List[RotationEvent]] = None) -> "AVLNode[K, V]":
        """Insere numa subárvore possivelmente vazia e devolve a raiz resultante."""
        if not node:
            return AVLNode(key, value)
        return node.insert(key, value, events)

    def insert(self, key: K, value: V, events: Optional[List[RotationEvent]] = None) -> "AVLNode[K, V]":
        """
        Inserção recursiva com rebalanceamento no caminho de volta.
        Retorna a raiz (possivelmente rotacionada) desta subárvore,
        que o chamador deve religar no seu próprio ponteiro.
        """
        # Chave repetida: apenas atualiza o valor, forma da árvore intacta
        if key == self.key:
            self.value = value
            return self

        if key < self.key:
            self.left = AVLNode.insert_into(self.left, key, value, events)
        else:
            self.right = AVLNode.insert_into(self.right, key, value, events)

        self.update_height()
        return self.rebalance(events)

    def find(self, key: K) -> Optional[V]:
        """Busca iterativa em O(log n). Retorna o valor ou None."""
        node = self._find_node(key)
        return node.value if node else None

    def contains(self, key: K) -> bool:
        return self._find_node(key) is not None

    def _find_node(self, key: K) -> Optional["AVLNode[K, V]"]:
        current = self
        while current:
            if key == current.key:
                return current
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    # --- Rebalanceamento e Rotações ---

    def rebalance(self, events: Optional[List[RotationEvent]] = None) -> "AVLNode[K, V]":
        """
        Aplica no máximo uma ação (rotação simples ou dupla) se o fator
        de balanceamento saiu de {-1, 0, 1}. O sinal do filho pesado decide
        entre rotação simples e dupla.
        """
        balance = self.balance

        if balance < -1:
            if self.left.balance <= 0:
                # Caso Esquerda-Esquerda
                new_root, rotation = self.rotate_right(), RotationType.RIGHT
            else:
                # Caso Esquerda-Direita
                new_root, rotation = self.rotate_left_right(), RotationType.LEFT_RIGHT
        elif balance > 1:
            if self.right.balance >= 0:
                # Caso Direita-Direita
                new_root, rotation = self.rotate_left(), RotationType.LEFT
            else:
                # Caso Direita-Esquerda
                new_root, rotation = self.rotate_right_left(), RotationType.RIGHT_LEFT
        else:
            return self

        if events is not None:
            events.append(RotationEvent(rotation, self.key, balance, new_root.key))
        return new_root

    def rotate_left(self) -> "AVLNode[K, V]":
        """
        Rotação simples à esquerda: o filho direito sobe.
        Usada quando o peso está na direita.
        """
        y = self.right
        T2 = y.left

        y.left = self
        self.right = T2

        # A altura do antigo topo depende dos novos filhos: atualiza ele primeiro
        self.update_height()
        y.update_height()

        return y

    def rotate_right(self) -> "AVLNode[K, V]":
        """
        Rotação simples à direita: o filho esquerdo sobe.
        Usada quando o peso está na esquerda.
        """
        y = self.left
        T3 = y.right

        y.right = self
        self.left = T3

        self.update_height()
        y.update_height()

        return y

    def rotate_left_right(self) -> "AVLNode[K, V]":
        self.left = self.left.rotate_left()
        return self.rotate_right()

    def rotate_right_left(self) -> "AVLNode[K, V]":
        self.right = self.right.rotate_right()
        return self.rotate_left()


class AVLTree(Generic[K, V]):
    """
    Mapa ordenado sobre uma Árvore AVL.
    Garante operações de busca e inserção em O(log n).

    Pré-condição: as chaves devem ter ordem total consistente ('<' e '==').
    Chaves com comparação inconsistente quebram os invariantes sem erro
    detectável.
    """
    def __init__(self, observer: Optional[Observer] = None):
        self.root: Optional[AVLNode[K, V]] = None
        self.observer = observer  # Notificado a cada rotação (opcional)
        self._size = 0

    def insert(self, key: K, value: V):
        """Insere (ou atualiza) a chave e rebalanceia a árvore automaticamente."""
        if not self.root:
            self.root = AVLNode(key, value)
            self._size = 1
            return

        is_new = not self.root.contains(key)
        events: List[RotationEvent] = []
        self.root = self.root.insert(key, value, events)
        if is_new:
            self._size += 1

        # Observador só é chamado com a árvore já religada e consistente
        if self.observer is not None:
            for event in events:
                self.observer(event)

    def find(self, key: K) -> Optional[V]:
        """Busca uma chave em O(log n). Retorna o valor ou None."""
        if not self.root:
            return None
        return self.root.find(key)

    def contains(self, key: K) -> bool:
        if not self.root:
            return False
        return self.root.contains(key)

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def traverse(self, visit: Callable[[AVLNode[K, V]], None]):
        """Percorre todos os nós em ordem (esquerda, nó, direita)."""
        self._in_order(self.root, visit)

    def _in_order(self, node: Optional[AVLNode[K, V]], visit: Callable[[AVLNode[K, V]], None]):
        if node:
            self._in_order(node.left, visit)
            visit(node)
            self._in_order(node.right, visit)

    def get_all_keys(self) -> List[K]:
        keys: List[K] = []
        self.traverse(lambda node: keys.append(node.key))
        return keys

    def get_all_values(self) -> List[V]:
        """Retorna todos os valores ordenados pela chave."""
        values: List[V] = []
        self.traverse(lambda node: values.append(node.value))
        return values

    @property
    def height(self) -> int:
        return AVLNode._get_height(self.root)

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"AVLTree(size={self._size}, height={self.height})"
