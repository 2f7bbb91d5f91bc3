"""
Enumerations with several wire spellings.

Upstream APIs encode the same enumerated value either as a numeric code or as
one of a few string literals. A WireEnum member declares all of them:

    class UploadType(WireEnum):
        ORDERS = ("orders", 0, "o")
        #         value     code  extra string tokens

from_wire() looks a token up by numeric code first, then by string literal.
"""

from enum import Enum
from typing import Any, Optional

from .errors import UnknownEnumToken


def _as_code(token: Any) -> Optional[int]:
    """Return the numeric code a token spells, or None if it is not numeric."""
    if isinstance(token, bool):
        return None
    if isinstance(token, int):
        return token
    if isinstance(token, str):
        stripped = token.strip()
        if stripped.isdigit():
            return int(stripped)
    return None


class WireEnum(str, Enum):
    """Base class for enums decoded from numeric codes or string literals."""

    def __new__(cls, value: str, code: int, *aliases: str) -> "WireEnum":
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.code = code
        obj.tokens = tuple(token.lower() for token in (value, *aliases))
        return obj

    @property
    def wire_token(self) -> str:
        """Shortest string spelling, used when sending the value upstream."""
        return min(self.tokens, key=len)

    @classmethod
    def from_wire(
        cls,
        token: Any,
        field: Optional[str] = None,
        row_index: Optional[int] = None,
    ) -> "WireEnum":
        """
        Map a wire token onto its canonical member.

        Args:
            token: Raw value from the document (int, numeric string or literal)
            field: Wire field name, for error reporting
            row_index: Row position, for error reporting

        Returns:
            The canonical member

        Raises:
            UnknownEnumToken: If the token matches neither a code nor a literal
        """
        if isinstance(token, cls):
            return token

        code = _as_code(token)
        if code is not None:
            for member in cls:
                if member.code == code:
                    return member

        if isinstance(token, str):
            literal = token.strip().lower()
            for member in cls:
                if literal in member.tokens:
                    return member

        raise UnknownEnumToken(token, cls.__name__, field=field, row_index=row_index)


def unambiguous(enum_class: type[WireEnum]) -> type[WireEnum]:
    """
    Class decorator checking that every code and token names one member.

    Raises:
        ValueError: If two members share a numeric code or a string token
    """
    seen_codes: dict[int, str] = {}
    seen_tokens: dict[str, str] = {}
    for member in enum_class:
        if member.code in seen_codes:
            raise ValueError(
                f"{enum_class.__name__}: code {member.code} used by "
                f"{seen_codes[member.code]} and {member.name}"
            )
        seen_codes[member.code] = member.name
        for token in member.tokens:
            if token in seen_tokens and seen_tokens[token] != member.name:
                raise ValueError(
                    f"{enum_class.__name__}: token {token!r} used by "
                    f"{seen_tokens[token]} and {member.name}"
                )
            seen_tokens[token] = member.name
    return enum_class
