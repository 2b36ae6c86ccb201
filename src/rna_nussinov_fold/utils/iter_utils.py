from typing import Iterator, Tuple


def iter_spans(n: int, min_span: int = 0) -> Iterator[Tuple[int, int]]:
    """
    Iterates through all contiguous spans `(i, j)` of a sequence of length `n`.

    Spans are yielded by increasing length `j - i`, starting at `min_span`,
    so every shorter span is produced before any longer one. This is the
    fill order required by interval dynamic programming.

    Parameters
    ----------
    n : int
        The length of the sequence.
    min_span : int, optional
        The smallest `j - i` to yield. Defaults to 0 (single positions).

    Yields
    ------
    Tuple[int, int]
        `(i, j)` with `0 <= i <= j < n`.
    """
    for span_length in range(max(min_span, 0), n):
        for i in range(0, n - span_length):
            yield i, i + span_length
