from typing import Iterable, Sequence

import numpy as np

def bits_from_codes(codes: Iterable[str]) -> np.ndarray:
    """Expand code strings like "010" into a flat uint8 0/1 array."""
    s = "".join(codes)
    return (np.frombuffer(s.encode("ascii"), dtype=np.uint8) - ord("0")).astype(np.uint8)

def pack(bits: Sequence[int]) -> bytes:
    """
    Pack 0/1 values into bytes, LSB-first within each byte.
    The last partial byte is zero padded, then one marker byte follows:
    the number of valid bits in the last data byte (8 when the bit count
    is a multiple of 8, including zero bits).
    """
    b = np.asarray(bits, dtype=np.uint8).ravel()
    data = np.packbits(b, bitorder="little").tobytes()
    rem = b.size % 8
    return data + bytes([rem if rem else 8])

def unpack(data: bytes) -> np.ndarray:
    """
    Inverse of pack(). Never validates: any byte string expands to some
    bit array. Marker 0 drops the last data byte, a marker above 8 reads as 8.
    """
    if len(data) < 2:
        return np.zeros(0, dtype=np.uint8)
    marker = min(data[-1], 8)
    payload = np.frombuffer(data, dtype=np.uint8, count=len(data) - 1)
    bits = np.unpackbits(payload, bitorder="little")
    return bits[: 8 * (payload.size - 1) + marker]
