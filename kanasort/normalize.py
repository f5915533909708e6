from __future__ import annotations
import re
import jaconv

# iteration marks sit outside the converted katakana block (U+30A1-U+30F6)
_KATA_IGNORE = "ヽヾ"

# hiragana, katakana and the long-vowel mark; the whole string must match
_KANA_RE = re.compile(r"[ぁ-ゖァ-ヺー]+")


def normalize_kana(text: str | None) -> str:
    """Return ``text`` with katakana folded to hiragana.

    Only the katakana block U+30A1-U+30F6 is shifted; every other character
    is returned untouched, so the function is idempotent.
    """
    if not text:
        return ""
    return jaconv.kata2hira(text, ignore=_KATA_IGNORE)


def widen_kana(text: str | None) -> str:
    """Return ``text`` with half-width katakana widened (ﾀﾅｶ -> タナカ).

    Voiced marks are recombined (ｶﾞ -> ガ). ASCII and digits are kept as is.
    """
    if not text:
        return ""
    return jaconv.h2z(text, kana=True, ascii=False, digit=False)


def is_kana(text: str | None) -> bool:
    """Return ``True`` if every character is hiragana, katakana or ``ー``."""
    if not text:
        return False
    return _KANA_RE.fullmatch(text) is not None


# small kana (and ゔ) -> the full-size syllable they sort and group with
SMALL_KANA_BASE = {
    "ぁ": "あ", "ぃ": "い", "ぅ": "う", "ぇ": "え", "ぉ": "お",
    "っ": "つ", "ゃ": "や", "ゅ": "ゆ", "ょ": "よ", "ゎ": "わ",
    "ゕ": "か", "ゖ": "け", "ゔ": "う",
}
