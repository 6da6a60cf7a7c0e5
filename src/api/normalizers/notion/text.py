"""Limpeza de texto vindo de selects e campos livres do Notion."""

from __future__ import annotations

import re
import unicodedata

_ZERO_WIDTH_JOINER = "\u200d"
_COMBINING_KEYCAP = "\u20e3"
_EMOJI_PRESENTATION = "\ufe0f"
_KEYCAP_BASES = frozenset("0123456789#*")
_SKIN_TONE_RANGE = ("\U0001f3fb", "\U0001f3ff")
_TAG_RANGE = ("\U000e0020", "\U000e007f")
# Blocos de pictogramas; code points ainda não atribuídos no unicodedata
# do interpretador (emoji mais novos) também contam como emoji
_EMOJI_BLOCK_RANGE = ("\U0001f000", "\U0001faff")

_CATEGORY_SEPARATORS_RE = re.compile(r"[,、，/／]")


def _is_emoji_glyph(char: str) -> bool:
    """True para code points que compõem um emoji prefixado ao texto."""
    if char.isspace() or char in (_ZERO_WIDTH_JOINER, _COMBINING_KEYCAP):
        return True
    # Seletores de variação (VS1..VS16), inclui U+FE0F de apresentação emoji
    if "\ufe00" <= char <= "\ufe0f":
        return True
    if _SKIN_TONE_RANGE[0] <= char <= _SKIN_TONE_RANGE[1]:
        return True
    if _TAG_RANGE[0] <= char <= _TAG_RANGE[1]:
        return True
    category = unicodedata.category(char)
    if _EMOJI_BLOCK_RANGE[0] <= char <= _EMOJI_BLOCK_RANGE[1] and category == "Cn":
        return True
    # Pictogramas, símbolos e indicadores regionais (bandeiras)
    return category == "So"


def _keycap_length(text: str, index: int) -> int:
    """Tamanho do keycap em `index` (ex: "1️⃣"), ou 0 se não for um."""
    if text[index] not in _KEYCAP_BASES:
        return 0
    end = index + 1
    if text[end:end + 1] == _EMOJI_PRESENTATION:
        end += 1
    if text[end:end + 1] != _COMBINING_KEYCAP:
        return 0
    return end + 1 - index


def strip_leading_emoji(text: str) -> str:
    """Remove a sequência inicial de emoji e espaços, depois faz strip().

    Ex: "🎵 音楽" -> "音楽", "👨‍👩‍👧 ファミリー" -> "ファミリー", "1️⃣ 音楽" -> "音楽".
    Dígitos sem keycap são texto e ficam.
    """
    if not isinstance(text, str):
        return ""
    index = 0
    while index < len(text):
        keycap = _keycap_length(text, index)
        if keycap:
            index += keycap
        elif _is_emoji_glyph(text[index]):
            index += 1
        else:
            break
    return text[index:].strip()


def split_categories(text: str) -> list[str]:
    """Quebra texto livre em categorias por vírgula, 、, ， ou barra."""
    if not text:
        return []
    return [part.strip() for part in _CATEGORY_SEPARATORS_RE.split(text) if part.strip()]
