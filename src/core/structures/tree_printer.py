from typing import List, Optional

from src.core.structures.avl_tree import AVLNode, AVLTree

# Saída apenas para inspeção visual; o formato não é contrato de dados.


def dump_lines(tree: AVLTree) -> List[str]:
    """
    Pré-ordem com indentação e lado do filho:
        d[1,4]
        +L--b[0,2]
        ...
    Cada nó mostra [balanceamento,altura].
    """
    lines: List[str] = []
    _dump(tree.root, 0, "", lines)
    return lines


def _dump(node: Optional[AVLNode], depth: int, side: str, lines: List[str]):
    if not node:
        return

    indent = ""
    if depth > 0:
        indent = " " * ((depth - 1) * 4) + "+" + side + "--"

    key, balance, height = node.stats()
    lines.append(f"{indent}{key}[{balance},{height}]")
    _dump(node.left, depth + 1, "L", lines)
    _dump(node.right, depth + 1, "R", lines)


def pretty_print_lines(tree: AVLTree) -> List[str]:
    """Árvore 'deitada' (girada 90° no sentido anti-horário): direita em cima."""
    lines: List[str] = []

    def walk(node: Optional[AVLNode], depth: int):
        if not node:
            return
        walk(node.right, depth + 1)
        lines.append("  " * depth + str(node.key))
        walk(node.left, depth + 1)

    walk(tree.root, 0)
    return lines


def dump(tree: AVLTree):
    for line in dump_lines(tree):
        print(line)


def pretty_print(tree: AVLTree):
    for line in pretty_print_lines(tree):
        print(line)
