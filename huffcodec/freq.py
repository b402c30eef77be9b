from collections import Counter
from typing import Dict

def analyze(buffer: bytes) -> Counter:
    """Occurrence count per byte value. Every byte counts, newlines included."""
    return Counter(buffer)

def relative_frequencies(table: Dict[int, int]) -> Dict[int, float]:
    """
    count / total per symbol, in ascending symbol order.
    Empty table -> empty dict.
    """
    total = sum(table.values())
    return {s: table[s] / total for s in sorted(table)}
