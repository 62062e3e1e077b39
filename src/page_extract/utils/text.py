"""Text normalization and word counting."""

import re

_MULTI_NEWLINE = re.compile(r"\n{3,}")
_MULTI_SPACE = re.compile(r"[ \t]{2,}")
_ZERO_WIDTH = re.compile("[\u200b-\u200d\ufeff]")

# ASCII word characters plus Hiragana, Katakana, CJK Unified Ideographs and
# Hangul syllables. An unspaced CJK run counts as a single word; other scripts
# and accented letters are not word characters.
_WORD = re.compile(r"[\w\u3040-\u309f\u30a0-\u30ff\u4e00-\u9faf\uac00-\ud7af]+", re.ASCII)

ELLIPSIS = "..."


def normalize_text(text: str, max_length: int) -> str:
    """Clean up whitespace and control characters and cap the length.

    The result has no blank lines, no leading or trailing whitespace on any
    line, and is at most ``max_length + len(ELLIPSIS)`` characters long.
    """
    if not text:
        return ""

    text = _ZERO_WIDTH.sub("", text)
    text = text.replace("\u00a0", " ")

    text = _MULTI_NEWLINE.sub("\n\n", text)
    text = _MULTI_SPACE.sub(" ", text)

    lines = (line.strip() for line in text.split("\n"))
    text = "\n".join(line for line in lines if line)

    if len(text) > max_length:
        text = text[:max_length] + ELLIPSIS

    return text.strip()


def count_words(text: str) -> int:
    """Count word-like tokens, treating CJK runs as words."""
    if not text:
        return 0
    return len(_WORD.findall(text))
