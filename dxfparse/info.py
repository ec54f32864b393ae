"""Quick extraction of version and encoding details from a DXF header."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .codepage import to_encoding
from .datatypes import String, as_string
from .tags import Tag, iter_tags

ACAD_RELEASES: dict[str, str] = {
    "AC1009": "R12",
    "AC1012": "R13",
    "AC1014": "R14",
    "AC1015": "R2000",
    "AC1018": "R2004",
    "AC1021": "R2007",
    "AC1024": "R2010",
}

DEFAULT_RELEASE = "R12"

_END_OF_STREAM = Tag(999999, String("NONE"))


@dataclass
class Info:
    """Minimal information about a DXF file."""

    release: str = ""
    version: str = ""
    encoding: str = ""
    handseed: str = ""


def _set_encoding(tag: Tag, info: Info) -> None:
    info.encoding = to_encoding(as_string(tag.value) or "")


def _set_version(tag: Tag, info: Info) -> None:
    info.version = as_string(tag.value) or ""
    info.release = ACAD_RELEASES.get(info.version, DEFAULT_RELEASE)


def _set_handseed(tag: Tag, info: Info) -> None:
    info.handseed = as_string(tag.value) or ""


_SETTERS: dict[str, Callable[[Tag, Info], None]] = {
    "DWGCODEPAGE": _set_encoding,
    "ACADVER": _set_version,
    "HANDSEED": _set_handseed,
}


def get_dxf_info(stream: Iterable[str]) -> Info:
    """Read header variables up to the first ENDSEC and return an Info.

    Malformed tags raise ValueError.
    """
    info = Info()
    tags = iter_tags(stream)
    for tag in tags:
        if str(tag.value) == "ENDSEC":
            break
        if tag.code != 9:
            continue
        setter = _SETTERS.get(str(tag.value)[1:])
        if setter is not None:
            setter(next(tags, _END_OF_STREAM), info)
    return info