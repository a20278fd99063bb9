# bytepair/bpe.py
"""
Byte Pair Encoding (BPE) helper algorithms for the bytepair tokenizer library.
Stateless functions used by BPETokenizer in tokenizer.py.
"""

import collections
from typing import List, Optional, Tuple, Union

Pair = Tuple[int, int]


def string_to_bytes(text: Union[str, bytes]) -> List[int]:
    """Decompose text into its UTF-8 byte values (0-255), one entry per byte."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    return list(text)


def get_pair_counts(ids: List[int]) -> collections.Counter:
    """
    Count adjacent pairs in ids.
    The returned Counter iterates pairs in the order they were first seen.
    """
    counts = collections.Counter()
    for pair in zip(ids, ids[1:]):
        counts[pair] += 1
    return counts


def most_frequent_pair(ids: List[int]) -> Tuple[Optional[Pair], int]:
    """
    Return the most frequent adjacent pair in ids and its count.
    Ties go to the pair encountered first in a left-to-right scan.
    Returns (None, 0) when ids holds fewer than two symbols.
    """
    counts = get_pair_counts(ids)
    if not counts:
        return None, 0
    # max keeps the first maximal key in iteration order
    best_pair = max(counts, key=counts.get)
    return best_pair, counts[best_pair]


def merge_pair(ids: List[int], pair: Pair, new_id: int) -> List[int]:
    """Replace every non-overlapping left-to-right occurrence of pair with new_id."""
    p0, p1 = pair
    merged = []
    i = 0
    while i < len(ids):
        if i < len(ids) - 1 and ids[i] == p0 and ids[i + 1] == p1:
            merged.append(new_id)
            i += 2
        else:
            merged.append(ids[i])
            i += 1
    return merged


def split_on_special_tokens(text: str, special_tokens: List[str]) -> List[str]:
    """
    Split text around literal occurrences of special tokens, keeping the tokens.

    The leftmost occurrence of any token is taken first; when several tokens
    start at the same position the longest one wins. Empty spans are dropped.
    Tokens are matched as plain substrings, so characters like '|' or '.' need
    no escaping.
    """
    tokens = sorted({tok for tok in special_tokens if tok}, key=len, reverse=True)
    if not tokens:
        return [text] if text else []
    # Next known start of each token, longest first; tokens with no match left are dropped
    next_start = {}
    for tok in tokens:
        start = text.find(tok)
        if start != -1:
            next_start[tok] = start
    parts = []
    last_end = 0
    while next_start:
        for tok in [t for t, s in next_start.items() if s < last_end]:
            start = text.find(tok, last_end)
            if start == -1:
                del next_start[tok]
            else:
                next_start[tok] = start
        if not next_start:
            break
        # min keeps the first, and so longest, token among equal starts
        best_token = min(next_start, key=next_start.get)
        best_start = next_start[best_token]
        if best_start > last_end:
            parts.append(text[last_end:best_start])
        parts.append(best_token)
        last_end = best_start + len(best_token)
    if last_end < len(text):
        parts.append(text[last_end:])
    return parts
