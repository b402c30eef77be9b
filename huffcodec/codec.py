from typing import Tuple

from huffcodec.bitpack import bits_from_codes, pack, unpack
from huffcodec.errors import CorruptStreamError, MalformedTreeError, TruncatedBitstreamError
from huffcodec.freq import analyze, relative_frequencies
from huffcodec.huffman import build_codebook, build_tree
from huffcodec.treecodec import parse, serialize

def compress(buffer: bytes) -> Tuple[str, bytes]:
    """
    Returns:
      tree_text: serialized Huffman tree (no trailing newline)
      packed: packed bitstream (data bytes + valid-bit marker)

    Empty input gives ("", b"\\x08"): no tree, zero bits.
    """
    table = analyze(buffer)
    if not table:
        return "", pack([])

    tree = build_tree(relative_frequencies(table))
    code = build_codebook(tree)
    bits = bits_from_codes(code[b] for b in buffer)
    return serialize(tree), pack(bits)

def decompress(tree_text: str, packed: bytes) -> bytes:
    bits = unpack(packed)
    if not tree_text:
        if bits.size:
            raise MalformedTreeError("empty tree text with non-empty bitstream", stage="frequency", pos=0)
        return b""

    root = parse(tree_text)
    out = bytearray()

    if root.is_leaf:
        # single-symbol stream: every code is "0"
        if bits.any():
            raise CorruptStreamError("Invalid Huffman code (corrupt stream)")
        return bytes([root.sym]) * bits.size

    cur = root
    walked = 0
    for bit in bits.tolist():
        cur = cur.right if bit else cur.left
        walked += 1
        if cur.is_leaf:
            out.append(cur.sym)
            cur = root
            walked = 0
    if walked:
        raise TruncatedBitstreamError(walked)
    return bytes(out)
