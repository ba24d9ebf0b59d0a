# trees.py

import heapq
from collections import deque
from typing import Optional

from .logger import Logger, TreeConstructionLog, SymbolCodeLog
from .models import FrequencyTable, HuffmanNode, CodeTable
from .validators import validate_type


def build_tree(frequencies: FrequencyTable, logger: Optional[Logger] = None) -> Optional[HuffmanNode]:
    """
    Build the Huffman tree for a frequency table.

    Leaves are inserted in ascending symbol order. The two lowest nodes are
    merged repeatedly, the first one removed becoming the left child. Equal
    frequencies are removed in insertion order, so the same table always
    gives the same tree.

    A table with a single symbol gives a root whose right child is the only
    leaf, so that symbol is coded as "1".

    Args:
        frequencies (FrequencyTable): The symbol counts.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        Optional[HuffmanNode]: The root, or None for an empty table.
    """
    validate_type(frequencies, "Frequencies", FrequencyTable)

    heap = []
    order = 0
    for symbol, frequency in frequencies.items():
        heapq.heappush(heap, HuffmanNode(frequency, symbol=symbol, order=order))
        order += 1

    if not heap:
        root = None
    elif len(heap) == 1:
        leaf = heap[0]
        root = HuffmanNode(leaf.frequency, right=leaf, order=order)
    else:
        while len(heap) > 1:
            left = heapq.heappop(heap)
            right = heapq.heappop(heap)
            heapq.heappush(heap, HuffmanNode(left.frequency + right.frequency, left=left, right=right, order=order))
            order += 1
        root = heap[0]

    if logger is not None:
        logger.log(TreeConstructionLog(leaf_count(root), tree_depth(root)))
    return root


def derive_codes(root: Optional[HuffmanNode], logger: Optional[Logger] = None) -> CodeTable:
    """
    Walk the tree breadth-first and record the path to every leaf.

    Args:
        root (Optional[HuffmanNode]): The tree root.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        CodeTable: The code of every leaf symbol.
    """
    codes = CodeTable()
    if root is None or root.is_leaf:
        return codes

    queue = deque([(root, "")])
    while queue:
        node, path = queue.popleft()
        if node is None:
            continue
        if node.is_leaf:
            codes.add(node.symbol, path)
            if logger is not None:
                logger.log(SymbolCodeLog(node.symbol, node.frequency, len(path)))
        else:
            queue.append((node.left, path + "0"))
            queue.append((node.right, path + "1"))
    return codes


def leaf_count(root: Optional[HuffmanNode]) -> int:
    if root is None:
        return 0
    if root.is_leaf:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def tree_depth(root: Optional[HuffmanNode]) -> int:
    """Number of edges on the longest root-to-leaf path."""
    if root is None or root.is_leaf:
        return 0
    depth = 0
    queue = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        depth = max(depth, level)
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, level + 1))
    return depth
