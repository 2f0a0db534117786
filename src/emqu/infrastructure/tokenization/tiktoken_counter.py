"""Token counter backed by tiktoken."""

import tiktoken

from emqu.domain.exceptions import TokenizerError


class TiktokenTokenCounter:
    """Counts tokens with a tiktoken encoding (cl100k_base by default)."""

    def __init__(self, encoding_name: str = "cl100k_base") -> None:
        try:
            self._encoding = tiktoken.get_encoding(encoding_name)
        except Exception as e:
            raise TokenizerError(f"Cannot load tokenizer {encoding_name!r}: {e}") from e

    def count(self, text: str) -> int:
        # Special-token text in documents is counted as plain text.
        return len(self._encoding.encode(text, disallowed_special=()))
