import pytest

from dxfparse.codepage import to_encoding


@pytest.mark.parametrize(
    "code_page,encoding",
    [
        ("932", "cp932"),
        ("a1257", "cp1257"),
        ("", "cp1252"),
        ("ANSI_936", "gbk"),
        ("ANSI_1251", "cp1251"),
        ("UNKNOWN", "cp1252"),
    ],
)
def test_to_encoding(code_page, encoding):
    assert to_encoding(code_page) == encoding