"""Unit tests for TiktokenTokenCounter."""

import pytest
import tiktoken

from emqu.domain.exceptions import TokenizerError
from emqu.infrastructure.tokenization.tiktoken_counter import TiktokenTokenCounter


class _SplitEncoding:
    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def encode(self, text: str, disallowed_special="all") -> list[str]:
        self.calls.append((text, disallowed_special))
        return text.split()


def test_count_uses_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    """Token count is the length of the encoding, special tokens allowed as text."""
    encoding = _SplitEncoding()
    monkeypatch.setattr(tiktoken, "get_encoding", lambda name: encoding)
    counter = TiktokenTokenCounter("cl100k_base")
    assert counter.count("one two <|endoftext|>") == 3
    assert encoding.calls == [("one two <|endoftext|>", ())]


def test_unknown_encoding_raises_tokenizer_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Construction failures surface as TokenizerError."""

    def _fail(name: str):
        raise ValueError(f"Unknown encoding {name}")

    monkeypatch.setattr(tiktoken, "get_encoding", _fail)
    with pytest.raises(TokenizerError, match="no-such-encoding"):
        TiktokenTokenCounter("no-such-encoding")
