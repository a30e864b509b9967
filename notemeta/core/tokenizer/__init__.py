"""
Tokenizer module for prompt budgeting.

Splits note content into script-aware tokens (CJK ideographs, Latin/digit
runs, punctuation, newlines) and truncates it to a token budget using one of
three strategies before it is sent to the LLM.
"""

from notemeta.core.tokenizer.tokenizer import (
    TruncationStrategy,
    count_tokens,
    join_tokens,
    split_into_tokens,
    truncate,
)

__all__ = [
    "TruncationStrategy",
    "count_tokens",
    "join_tokens",
    "split_into_tokens",
    "truncate",
]
