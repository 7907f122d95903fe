"""Exception types raised by stylecascade.

Data problems (missing or malformed settings) never raise; they resolve to
defaults. These exceptions cover caller mistakes only.
"""


class StyleCascadeError(Exception):
    """Base class for stylecascade errors."""


class UnknownFiletypeError(StyleCascadeError, ValueError):
    """Raised when a filetype name does not match any known filetype."""

    def __init__(self, name: str):
        super().__init__(f"Unknown filetype: {name}")
        self.name = name
