"""
Script-aware tokenization and truncation of note content.

Splits mixed CJK/Latin text into lexical units, reduces the unit sequence
to a token budget, and reassembles readable text for an LLM prompt. This is
a budgeting heuristic, not the model's own sub-word tokenizer.
"""

import math
import re
from enum import Enum

ELLIPSIS = "..."
HEADING_EXCERPT_TOKENS = 30
HEAD_RATIO = 0.8
TAIL_RATIO = 0.2

# CJK ideograph | Latin/digit run | punctuation | newline
TOKEN_PATTERN = re.compile(r"[\u4e00-\u9fa5]|[a-zA-Z0-9]+|[.,!?;，。！？；#]|\n")
_ATTACHED_TOKEN = re.compile(r"[\u4e00-\u9fa5]|[.,!?;，。！？；#]")


class TruncationStrategy(str, Enum):
    """How an over-budget document is reduced."""

    HEAD_ONLY = "head_only"
    HEAD_TAIL = "head_tail"
    HEADING = "heading"


def split_into_tokens(text: str) -> list[str]:
    """
    Split text into tokens in reading order.

    Characters that match no token class (spaces, other symbols) are dropped.

    Args:
        text: Text to tokenize

    Returns:
        List of tokens
    """
    if not text:
        return []
    return TOKEN_PATTERN.findall(text)


def join_tokens(tokens: list[str]) -> str:
    """
    Reassemble tokens into text.

    Latin/digit runs are separated by a single space; CJK ideographs and
    punctuation attach to the previous token; newlines are kept verbatim.

    Args:
        tokens: Tokens produced by split_into_tokens

    Returns:
        Reassembled text with surrounding whitespace stripped
    """
    parts: list[str] = []
    for index, token in enumerate(tokens):
        if token == "\n" or _ATTACHED_TOKEN.fullmatch(token):
            parts.append(token)
        elif index > 0:
            parts.append(" " + token)
        else:
            parts.append(token)
    return "".join(parts).strip()


def count_tokens(text: str) -> int:
    """Count tokens in text."""
    return len(split_into_tokens(text))


def truncate(
    text: str,
    budget: int,
    strategy: TruncationStrategy | str = TruncationStrategy.HEAD_ONLY,
) -> str:
    """
    Reduce text to a token budget.

    A budget of zero or less disables truncation, and text already within
    budget is returned unchanged.

    Args:
        text: Document content
        budget: Maximum number of tokens to keep
        strategy: head_only, head_tail or heading

    Returns:
        Text that fits the budget, plus fixed ellipsis/outline wrapping
    """
    if not text:
        return ""

    tokens = split_into_tokens(text)
    if budget <= 0 or len(tokens) <= budget:
        return text

    strategy = TruncationStrategy(strategy)
    if strategy == TruncationStrategy.HEAD_TAIL:
        return _truncate_head_tail(tokens, budget)
    if strategy == TruncationStrategy.HEADING:
        return _truncate_heading(text, tokens, budget)
    return join_tokens(tokens[:budget]) + ELLIPSIS


def _truncate_head_tail(tokens: list[str], budget: int) -> str:
    head_size = math.floor(budget * HEAD_RATIO)
    tail_size = math.floor(budget * TAIL_RATIO + 0.5)
    head = join_tokens(tokens[:head_size])
    tail = join_tokens(tokens[len(tokens) - tail_size :])
    return f"{head}\n{ELLIPSIS}\n{tail}"


def _build_outline(text: str) -> str:
    """Collect headings, each followed by an excerpt of its first paragraph line."""
    outline: list[str] = []
    capture_next = False
    for line in text.split("\n"):
        if not line.strip():
            continue
        if line.startswith("#"):
            outline.append(line)
            capture_next = True
        elif capture_next:
            excerpt = split_into_tokens(line)[:HEADING_EXCERPT_TOKENS]
            outline.append(join_tokens(excerpt) + ELLIPSIS)
            capture_next = False
    return "\n".join(outline)


def _truncate_heading(text: str, tokens: list[str], budget: int) -> str:
    outline = _build_outline(text)
    outline_tokens = split_into_tokens(outline)
    if len(outline_tokens) > budget:
        return join_tokens(outline_tokens[:budget])

    remaining = budget - len(outline_tokens)
    head = join_tokens(tokens[:remaining]) + ELLIPSIS
    return f"Outline: \n{outline}\n\nBody: {head}"
