"""
Tokenizer class for byte-level BPE training and encoding/decoding.
"""
import time
import logging
from collections import namedtuple
from typing import Dict, List, Tuple, Iterator, Optional, Union

from tqdm import tqdm

from bytepair.bpe import string_to_bytes, most_frequent_pair, merge_pair, split_on_special_tokens
from bytepair.exceptions import VocabSizeError, DecodeError

NUM_BYTES = 256
DEFAULT_MAX_VOCAB_SIZE = 1000

TrainResult = namedtuple("TrainResult", ["merge_count", "vocab_size"])

logger = logging.getLogger("bytepair.tokenizer")


class BPETokenizer:
    """
    Byte-level BPE tokenizer that owns its vocabulary.

    IDs 0-255 are raw bytes. Merges learned by train() and special tokens added
    by register_special_token() take the following IDs in allocation order.
    """

    def __init__(self, max_vocab_size: int = DEFAULT_MAX_VOCAB_SIZE):
        if max_vocab_size <= NUM_BYTES:
            raise VocabSizeError(
                f"Maximum vocabulary size must be greater than {NUM_BYTES}, got {max_vocab_size}"
            )
        self.max_vocab_size = max_vocab_size
        self.reset()

    def reset(self) -> None:
        """Return to the 256-byte identity vocabulary, dropping merges and special tokens."""
        self._merges: Dict[Tuple[int, int], int] = {}
        self._id_to_token: Dict[int, bytes] = {i: bytes([i]) for i in range(NUM_BYTES)}
        self._special_to_id: Dict[str, int] = {}
        self._id_to_special: Dict[int, str] = {}
        self._next_id = NUM_BYTES

    def vocab_size(self) -> int:
        return self._next_id

    @property
    def merges(self) -> List[Tuple[Tuple[int, int], int]]:
        """Learned merge rules as ((left, right), new_id), in the order they were learned."""
        return list(self._merges.items())

    @property
    def special_tokens(self) -> Dict[str, int]:
        return dict(self._special_to_id)

    @property
    def vocab(self) -> Dict[int, bytes]:
        vocab = dict(self._id_to_token)
        for token_id, token in self._id_to_special.items():
            vocab[token_id] = token.encode("utf-8")
        return vocab

    def register_special_token(self, token: str) -> int:
        """
        Register token as an atomic special token and return its ID.
        Registering a known token again returns the existing ID.
        """
        if not token:
            raise ValueError("Special token must be a non-empty string")
        if token in self._special_to_id:
            return self._special_to_id[token]
        token_id = self._next_id
        self._special_to_id[token] = token_id
        self._id_to_special[token_id] = token
        self._next_id += 1
        logger.info(f"Added special token {token!r} with ID {token_id}")
        return token_id

    def train(
        self,
        corpus: Union[str, bytes],
        stop_early: bool = False,
        verbose: bool = False,
        show_progress: bool = False,
    ) -> TrainResult:
        """
        Learn merges from corpus until the vocabulary is full or no pair is left.

        Args:
            corpus: Training text, split into raw UTF-8 bytes, or the raw bytes themselves.
            stop_early: Stop once the most frequent pair occurs only once.
            verbose: Log every merge at INFO level instead of DEBUG.
            show_progress: Show a tqdm progress bar over the remaining merges.
        Returns:
            TrainResult with the number of merges made and the final vocabulary size.
        """
        ids = string_to_bytes(corpus)
        merge_count = 0
        merge_level = logging.INFO if verbose else logging.DEBUG
        t0 = time.time()
        merge_bar = tqdm(
            total=max(0, self.max_vocab_size - self.vocab_size()),
            desc="[BPE] Merges",
            unit="merge",
            disable=not show_progress,
        )
        try:
            while self.vocab_size() < self.max_vocab_size:
                pair, count = most_frequent_pair(ids)
                if pair is None:
                    logger.debug(f"No more pairs to merge after {merge_count} merges.")
                    break
                if stop_early and count == 1:
                    logger.debug(f"Best pair {pair} occurs once; stopping early after {merge_count} merges.")
                    break
                new_id = self._next_id
                new_token = self._id_to_token[pair[0]] + self._id_to_token[pair[1]]
                self._merges[pair] = new_id
                self._id_to_token[new_id] = new_token
                self._next_id += 1
                ids = merge_pair(ids, pair, new_id)
                merge_count += 1
                logger.log(
                    merge_level,
                    f"Merged IDs {pair} as a new token {new_token!r} with ID {new_id} (freq={count})",
                )
                merge_bar.update(1)
        finally:
            merge_bar.close()
        logger.info(
            f"Training complete: {merge_count} merges performed in {time.time() - t0:.2f} sec. "
            f"Final vocabulary size: {self.vocab_size()}"
        )
        return TrainResult(merge_count, self.vocab_size())

    def encode(self, text: str) -> List[int]:
        if not self._special_to_id:
            return self._encode_non_special(text)
        ids = []
        for part in split_on_special_tokens(text, list(self._special_to_id)):
            if part in self._special_to_id:
                ids.append(self._special_to_id[part])
            else:
                ids.extend(self._encode_non_special(part))
        return ids

    def _encode_non_special(self, text: str) -> List[int]:
        # Rescan the whole sequence for any known pair until a pass changes nothing.
        ids = string_to_bytes(text)
        changed = True
        while changed:
            changed = False
            i = 0
            while i < len(ids) - 1:
                new_id = self._merges.get((ids[i], ids[i + 1]))
                if new_id is not None:
                    ids[i] = new_id
                    del ids[i + 1]
                    changed = True
                i += 1
        return ids

    def decode_bytes(self, token_ids: List[int]) -> bytes:
        chunks = []
        for token_id in token_ids:
            if token_id in self._id_to_special:
                chunks.append(self._id_to_special[token_id].encode("utf-8"))
            elif token_id in self._id_to_token:
                chunks.append(self._id_to_token[token_id])
            else:
                raise DecodeError(token_id)
        return b"".join(chunks)

    def decode(self, token_ids: List[int]) -> str:
        return self.decode_bytes(token_ids).decode("utf-8", errors="replace")

    def encode_iterable(self, iterable: Iterator[str], show_progress: bool = False, total: Optional[int] = None, desc: str = "Encoding") -> Iterator[int]:
        """
        Encode an iterable of strings, optionally showing a progress bar.
        Args:
            iterable: Iterator of strings to encode.
            show_progress: If True, show a tqdm progress bar.
            total: Optional total number of items (for tqdm).
            desc: Description for the progress bar.
        Yields:
            int: Token IDs from all encoded chunks.
        """
        for chunk in tqdm(iterable, total=total, desc=desc, disable=not show_progress):
            yield from self.encode(chunk)
