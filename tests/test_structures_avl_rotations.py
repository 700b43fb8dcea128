import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree, AVLNode
from src.core.structures.rotation_events import RotationLog, RotationType, RotationEvent, print_rotation


def build(keys, log=None):
    avl = AVLTree(observer=log)
    for k in keys:
        avl.insert(k, k)
    return avl


def test_four_rebalance_cases():
    print("--- Iniciando Teste dos 4 casos de rotação ---")

    cases = [
        ([3, 2, 1], RotationType.RIGHT, 3, -2),
        ([1, 2, 3], RotationType.LEFT, 1, 2),
        ([3, 1, 2], RotationType.LEFT_RIGHT, 3, -2),
        ([1, 3, 2], RotationType.RIGHT_LEFT, 1, 2),
    ]

    for keys, expected_rotation, pivot, balance in cases:
        log = RotationLog()
        avl = build(keys, log)

        print(f"Ordem {keys} -> {log.events()}")
        assert avl.root.stats() == (2, 0, 2)
        assert avl.root.left.stats() == (1, 0, 1)
        assert avl.root.right.stats() == (3, 0, 1)

        # Rotação dupla conta como um único evento
        assert log.events() == [RotationEvent(expected_rotation, pivot, balance, 2)]

    print(">> SUCESSO: Todos os casos restauram o balanceamento.")


def test_single_rotation_moves_inner_subtree():
    # 2 com filho direito 4, que tem filhos 3 e 5
    root = AVLNode(2, "b")
    root.right = AVLNode(4, "d")
    root.right.left = AVLNode(3, "c")
    root.right.right = AVLNode(5, "e")
    root.right.update_height()
    root.update_height()

    new_root = root.rotate_left()

    assert new_root.key == 4
    assert new_root.left is root
    assert root.right.key == 3, "Subárvore interna deveria trocar de pai"
    assert root.stats() == (2, 1, 2)
    assert new_root.stats() == (4, -1, 3)

    back = new_root.rotate_right()
    assert back is root
    assert back.stats() == (2, 2, 3)
    assert back.right.stats() == (4, 0, 2)


def test_rebalance_is_noop_when_balanced():
    node = AVLNode(5, "x")
    node.left = AVLNode(3, "y")
    node.update_height()

    events = []
    assert node.rebalance(events) is node
    assert events == []


def test_node_insert_collects_rotation_events():
    root = AVLNode(1, "a")
    events = []
    root = root.insert(2, "b", events)
    root = root.insert(3, "c", events)

    assert root.key == 2
    assert events == [RotationEvent(RotationType.LEFT, 1, 2, 2)]


def test_empty_log_still_receives_events():
    # Um RotationLog vazio tem len() == 0, mas continua sendo observador válido
    log = RotationLog()
    assert len(log) == 0

    build([1, 2, 3], log)

    assert log.count() == 1
    assert log.events() == [RotationEvent(RotationType.LEFT, 1, 2, 2)]


def test_failing_observer_keeps_tree_consistent():
    print("--- Teste: Observador que falha ---")

    def failing_observer(event):
        raise RuntimeError(f"observador falhou em {event!r}")

    avl = build([10, 5, 20, 30], failing_observer)  # Nenhuma rotação até aqui

    try:
        avl.insert(40, 40)  # Rotação à esquerda em 20
        assert False, "O erro do observador deveria propagar"
    except RuntimeError:
        pass

    assert avl.get_all_keys() == [5, 10, 20, 30, 40], "Nós perdidos após falha do observador"
    assert len(avl) == 5
    assert avl.find(40) == 40
    assert avl.root._find_node(30).stats() == (30, 0, 2)
    print(">> SUCESSO: Rotação concluída antes da notificação.")


def test_double_rotation_recomputes_heights():
    # 5 entra abaixo de 6, filho direito de 4: caso Esquerda-Direita em 10
    log = RotationLog()
    avl = build([10, 4, 12, 2, 6, 5], log)
    assert avl.root.key == 6
    assert [e.rotation for e in log.events()] == [RotationType.LEFT_RIGHT]
    for node_key, expected_height in [(6, 3), (4, 2), (10, 2), (2, 1), (5, 1), (12, 1)]:
        node = avl.root._find_node(node_key)
        assert node.height == expected_height, f"Altura errada no nó {node_key}"


def test_rotation_log_capacity():
    try:
        RotationLog(capacity=0)
        assert False, "Capacidade zero deveria ser rejeitada"
    except ValueError:
        pass

    log = RotationLog(capacity=2)
    build(list(range(1, 16)), log)

    assert len(log) == 2
    assert log.count() > 2  # O total não perde eventos descartados
    assert log.count() == sum(log.count(t) for t in (RotationType.LEFT, RotationType.RIGHT,
                                                     RotationType.LEFT_RIGHT, RotationType.RIGHT_LEFT))

    log.clear()
    assert log.count() == 0 and log.events() == []


def test_print_rotation_observer(capsys):
    build([1, 2, 3], print_rotation)

    out = capsys.readouterr().out
    assert out.startswith("[AVL] ")
    assert RotationType.LEFT in out
    assert "pivô=1" in out


if __name__ == "__main__":
    test_four_rebalance_cases()
    test_single_rotation_moves_inner_subtree()
    test_rebalance_is_noop_when_balanced()
    test_node_insert_collects_rotation_events()
    test_empty_log_still_receives_events()
    test_failing_observer_keeps_tree_consistent()
    test_double_rotation_recomputes_heights()
    test_rotation_log_capacity()
    build([1, 2, 3], print_rotation)
