"""Mapping of DXF code pages to Python codec names."""

from __future__ import annotations

CODE_PAGES: dict[str, str] = {
    "874": "cp874",
    "932": "cp932",
    "936": "gbk",
    "949": "cp949",
    "950": "cp950",
    "1250": "cp1250",
    "1251": "cp1251",
    "1252": "cp1252",
    "1253": "cp1253",
    "1254": "cp1254",
    "1255": "cp1255",
    "1256": "cp1256",
    "1257": "cp1257",
    "1258": "cp1258",
}

DEFAULT_ENCODING = "cp1252"


def to_encoding(dxf_code_page: str) -> str:
    """Return the codec for a ``$DWGCODEPAGE`` value such as ``ANSI_1252``."""
    return next(
        (
            encoding
            for code_page, encoding in CODE_PAGES.items()
            if dxf_code_page.endswith(code_page)
        ),
        DEFAULT_ENCODING,
    )