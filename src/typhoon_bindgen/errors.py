"""Structured errors for binding generation (input, language, emit)."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class BindgenError(Exception):
    """Base for all binding generator errors."""
    message: str
    path: Optional[str] = None
    program: Optional[str] = None
    language: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.path:
            loc = f"{self.path}: "
        elif self.program:
            loc = self.program
            if self.language:
                loc += f" ({self.language})"
            loc += ": "
        return f"{loc}{self.message}"


class ParseError(BindgenError):
    """IDL file could not be read or is not a JSON object."""
    pass


class NoInputError(BindgenError):
    """No IDL documents were found to generate from."""
    pass


class UnsupportedLanguageError(BindgenError):
    """Requested language matches no known emitter."""
    pass


class EmitError(BindgenError):
    """Writing a generated package failed."""
    pass
