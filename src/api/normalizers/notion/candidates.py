"""Nomes candidatos de propriedades por campo do evento.

A database é alimentada por formulário (Tally) que gera nomes de
propriedade diferentes conforme o idioma; cada campo lista os nomes
aceitos em ordem de prioridade.
"""

from __future__ import annotations

NAME_CANDIDATES: tuple[str, ...] = ("イベント名", "Name", "名前", "title", "タイトル")

AREA_CANDIDATES: tuple[str, ...] = ("エリア", "Area", "地域")

START_DATE_CANDIDATES: tuple[str, ...] = ("開催日（開始）", "開催日", "Start Date", "日付", "Date")

END_DATE_CANDIDATES: tuple[str, ...] = ("開催日（終了）", "End Date")

# Propriedades de data que podem carregar início e fim no mesmo valor
DATE_RANGE_CANDIDATES: tuple[str, ...] = ("開催日", "開催日（開始）", "Date", "日付")

CATEGORY_CANDIDATES: tuple[str, ...] = ("ジャンル", "Genre", "カテゴリ", "Category")

IMAGE_CANDIDATES: tuple[str, ...] = ("イベント画像", "画像", "Image", "Cover")

DETAIL_URL_CANDIDATES: tuple[str, ...] = ("詳細URL", "URL", "リンク", "Link")
