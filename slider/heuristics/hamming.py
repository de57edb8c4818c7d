from typing import Tuple

State = Tuple[int, ...]

def hamming(s: State, n: int) -> int:
    """Number of tiles 1..n*n-1 not sitting on their goal cell."""
    return sum(1 for t in range(1, n * n) if s[t - 1] != t)
