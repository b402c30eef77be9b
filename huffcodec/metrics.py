from typing import Dict

import numpy as np

def entropy(buffer: bytes) -> float:
    """Shannon entropy of the byte distribution, bits/symbol."""
    if not buffer:
        return 0.0
    counts = np.bincount(np.frombuffer(buffer, dtype=np.uint8), minlength=256)
    p = counts[counts > 0].astype(np.float64) / len(buffer)
    return float(-np.sum(p * np.log2(p)))

def mean_code_length(table: Dict[int, int], code: Dict[int, str]) -> float:
    """Average emitted bits per input symbol."""
    total = sum(table.values())
    if total == 0:
        return 0.0
    return sum(n * len(code[s]) for s, n in table.items()) / total

def compression_ratio(original_len: int, compressed_len: int) -> float:
    if compressed_len == 0:
        return float("inf")
    return original_len / compressed_len
