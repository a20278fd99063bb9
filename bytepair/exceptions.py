"""
Exceptions raised by the bytepair tokenizer.
"""


class VocabSizeError(ValueError):
    """Raised when a tokenizer is configured with room for no merges."""


class DecodeError(ValueError):
    """Raised when decoding meets an ID that is neither a token nor a special token."""

    def __init__(self, token_id: int):
        super().__init__(f"Unknown token ID {token_id}: not in the vocabulary or special tokens")
        self.token_id = token_id
