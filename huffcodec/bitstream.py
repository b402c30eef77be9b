import struct
from typing import Tuple

from huffcodec.errors import CorruptStreamError

MAGIC = b"HUFF"
VERSION = 1

# Header (little-endian):
# magic(4) version(1) flags(1) tree_len(u32) payload_len(u32)
# then tree_len bytes of ASCII tree text, then payload_len bytes of packed bits
HDR_FMT = "<4sBBII"
HDR_SIZE = struct.calcsize(HDR_FMT)

def write_header(f, *, flags: int, tree_len: int, payload_len: int):
    f.write(struct.pack(HDR_FMT, MAGIC, VERSION, flags, tree_len, payload_len))

def read_header(f):
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise CorruptStreamError("Malformed stream: header too short")
    magic, ver, flags, tree_len, payload_len = struct.unpack(HDR_FMT, data)
    if magic != MAGIC:
        raise CorruptStreamError("Bad magic number (not HUFF)")
    if ver != VERSION:
        raise CorruptStreamError(f"Unsupported version: {ver}")
    return dict(flags=flags, tree_len=tree_len, payload_len=payload_len)

def _read_exact(f, n: int, what: str) -> bytes:
    data = f.read(n)
    if len(data) != n:
        raise CorruptStreamError(f"Malformed stream: {what} truncated")
    return data

def write_container(f, tree_text: str, packed: bytes):
    tree_bytes = tree_text.encode("ascii")
    write_header(f, flags=0, tree_len=len(tree_bytes), payload_len=len(packed))
    f.write(tree_bytes)
    f.write(packed)

def read_container(f) -> Tuple[str, bytes]:
    h = read_header(f)
    tree_bytes = _read_exact(f, h["tree_len"], "tree")
    payload = _read_exact(f, h["payload_len"], "payload")
    try:
        tree_text = tree_bytes.decode("ascii")
    except UnicodeDecodeError as e:
        raise CorruptStreamError("Malformed stream: tree text is not ASCII") from e
    return tree_text, payload

# Legacy layout: tree text, "\n", then the packed bytes up to EOF.
# The payload may itself contain "\n" bytes, so only the first line is split off.

def write_legacy(f, tree_text: str, packed: bytes):
    f.write(tree_text.encode("ascii") + b"\n")
    f.write(packed)

def read_legacy(f) -> Tuple[str, bytes]:
    line = f.readline()
    if not line.endswith(b"\n"):
        raise CorruptStreamError("Malformed stream: missing tree line")
    try:
        tree_text = line[:-1].rstrip(b"\r").decode("ascii")
    except UnicodeDecodeError as e:
        raise CorruptStreamError("Malformed stream: tree text is not ASCII") from e
    return tree_text, f.read()
