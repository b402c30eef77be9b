from __future__ import annotations
import heapq
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from huffcodec.errors import EmptyInputError

# Merged nodes sort after every leaf of equal weight, in merge order.
_MERGED_BASE = 256

@dataclass
class Node:
    freq: float
    sym: Optional[int] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    @property
    def is_leaf(self) -> bool:
        return self.sym is not None

def build_tree(freqs: Dict[int, float]) -> Node:
    """
    Greedy minimum-weight merge.

    Heap entries are (freq, tiebreak, node): leaves break ties by symbol
    value, merged nodes by creation order. Of each popped pair the lighter
    node (popped first) becomes the right child, so the heavier branch
    gets the 0 bit.
    A single symbol yields a bare leaf as root.
    """
    if not freqs:
        raise EmptyInputError("Cannot build a Huffman tree from an empty frequency table")
    pq = [(f, s, Node(freq=f, sym=s)) for s, f in freqs.items()]
    heapq.heapify(pq)
    merged = 0
    while len(pq) > 1:
        fa, _, a = heapq.heappop(pq)
        fb, _, b = heapq.heappop(pq)
        heapq.heappush(pq, (fa + fb, _MERGED_BASE + merged, Node(freq=fa + fb, left=b, right=a)))
        merged += 1
    return pq[0][2]

def iter_leaves(node: Node, depth: int = 0) -> Iterator[Tuple[Node, int]]:
    """Yield (leaf, depth) pairs, left to right."""
    if node.is_leaf:
        yield node, depth
        return
    yield from iter_leaves(node.left, depth + 1)
    yield from iter_leaves(node.right, depth + 1)

def build_codebook(node: Node, prefix: str = "", code: Optional[Dict[int, str]] = None) -> Dict[int, str]:
    if code is None:
        code = {}
    if node.is_leaf:
        # a root leaf still needs a one-bit code
        code[node.sym] = prefix or "0"
    else:
        build_codebook(node.left, prefix + "0", code)
        build_codebook(node.right, prefix + "1", code)
    return code

def weighted_path_length(root: Node) -> float:
    """sum(freq * code length); a root leaf counts as length 1."""
    return sum(leaf.freq * max(1, depth) for leaf, depth in iter_leaves(root))
