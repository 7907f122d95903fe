"""Closed set of filetype identifiers."""

from enum import IntEnum
from typing import Union

from .errors import UnknownFiletypeError


class Filetype(IntEnum):
    """Known filetypes. ``NONE`` is the sentinel for common styling."""

    NONE = 0
    C = 1
    CPP = 2
    CS = 3
    JAVA = 4
    JS = 5
    FERITE = 6
    HAXE = 7
    D = 8
    PASCAL = 9
    PYTHON = 10
    SH = 11
    MAKE = 12
    DIFF = 13
    LATEX = 14
    CONF = 15
    CSS = 16
    XML = 17
    HTML = 18
    PHP = 19
    PERL = 20
    RUBY = 21
    LUA = 22
    TCL = 23
    OMS = 24
    SQL = 25
    DOCBOOK = 26
    ASM = 27
    BASIC = 28
    FORTRAN = 29
    CAML = 30
    HASKELL = 31
    VHDL = 32

    @property
    def config_name(self) -> str:
        """Name used in ``filetypes.<name>`` settings files."""
        return _CONFIG_NAMES.get(self, self.name.lower())

    @property
    def is_common(self) -> bool:
        return self is Filetype.NONE

    @classmethod
    def from_name(cls, name: Union[str, int, "Filetype"]) -> "Filetype":
        """Look up by member name or config name, case-insensitively."""
        if isinstance(name, cls):
            return name
        if isinstance(name, int):
            try:
                return cls(name)
            except ValueError:
                raise UnknownFiletypeError(str(name)) from None

        wanted = name.strip().lower()
        for member in cls:
            if wanted in (member.name.lower(), member.config_name):
                return member
        raise UnknownFiletypeError(name)


_CONFIG_NAMES = {
    Filetype.NONE: "common",
    Filetype.JS: "javascript",
    Filetype.MAKE: "makefile",
}
