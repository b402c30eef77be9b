"""
Text form of a Huffman tree, one line:

    tree     := leaf | internal
    leaf     := freq ":" hh            (hh = two hex digits)
    internal := freq "(" tree "," tree ")"

e.g. b"aaab" -> "1(0.75:61,0.25:62)"
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List

from huffcodec.errors import MalformedTreeError
from huffcodec.huffman import Node

SYMBOL_WIDTH = 2
# 256 leaves nest at most 255 internal nodes deep
MAX_DEPTH = 255

_FREQ_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?")
_SYM_RE = re.compile(r"[0-9a-fA-F]{%d}" % SYMBOL_WIDTH)

def _fmt_freq(freq: float, is_root: bool) -> str:
    if is_root and float(freq).is_integer():
        return str(int(freq))
    # repr is the shortest round-trip form and ignores locale
    return repr(float(freq))

def _serialize(node: Node, out: List[str], is_root: bool):
    out.append(_fmt_freq(node.freq, is_root))
    if node.is_leaf:
        out.append(":%0*x" % (SYMBOL_WIDTH, node.sym))
        return
    out.append("(")
    _serialize(node.left, out, False)
    out.append(",")
    _serialize(node.right, out, False)
    out.append(")")

def serialize(root: Node) -> str:
    out: List[str] = []
    _serialize(root, out, True)
    return "".join(out)

@dataclass
class _Cursor:
    text: str
    pos: int = 0
    depth: int = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expect(self, ch: str):
        if self.peek() != ch:
            found = repr(self.peek()) if self.peek() else "end of input"
            raise MalformedTreeError(f"expected {ch!r}, found {found}", stage="delimiter", pos=self.pos)
        self.pos += 1

    def match(self, pattern: re.Pattern, stage: str) -> str:
        m = pattern.match(self.text, self.pos)
        if m is None:
            raise MalformedTreeError(f"bad {stage} field", stage=stage, pos=self.pos)
        self.pos = m.end()
        return m.group(0)

def _parse_tree(cur: _Cursor) -> Node:
    freq = float(cur.match(_FREQ_RE, "frequency"))
    if cur.peek() == ":":
        cur.pos += 1
        return Node(freq=freq, sym=int(cur.match(_SYM_RE, "symbol"), 16))

    if cur.peek() == "(" and cur.depth >= MAX_DEPTH:
        raise MalformedTreeError(f"nesting deeper than {MAX_DEPTH}", stage="delimiter", pos=cur.pos)
    cur.expect("(")
    cur.depth += 1
    left = _parse_tree(cur)
    cur.expect(",")
    right = _parse_tree(cur)
    if cur.peek() != ")":
        raise MalformedTreeError(f"{cur.depth} unclosed '('", stage="delimiter", pos=cur.pos)
    cur.pos += 1
    cur.depth -= 1
    return Node(freq=freq, left=left, right=right)

def parse(text: str) -> Node:
    """Inverse of serialize(). Raises MalformedTreeError on any deviation from the grammar."""
    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        raise MalformedTreeError("empty tree text", stage="frequency", pos=0)
    cur = _Cursor(text)
    root = _parse_tree(cur)
    if cur.pos != len(text):
        what = "unbalanced ')'" if cur.peek() == ")" else f"unexpected {cur.peek()!r}"
        raise MalformedTreeError(what, stage="trailing", pos=cur.pos)
    return root
