## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Literal
from dataclasses import dataclass

from .errors import CmdTypeError


INT64_MIN, INT64_MAX = -2**63, 2**63 - 1


class TypeTag:
    BOOLEAN = 'boolean'
    INTEGER = 'integer'
    TEXT = 'text'

    ALL = (BOOLEAN, INTEGER, TEXT)


TYPE_NAME_MAP: dict[str, str] = {
    'bool': TypeTag.BOOLEAN, 'boolean': TypeTag.BOOLEAN,
    'int': TypeTag.INTEGER, 'integer': TypeTag.INTEGER,
    'str': TypeTag.TEXT, 'string': TypeTag.TEXT, 'text': TypeTag.TEXT,
}


@dataclass(frozen=True)
class Value:
    """Tagged value of one of the supported kinds; used for defaults and coerced tokens."""
    tag: str
    data: bool | int | str

    def __post_init__(self):
        match self.tag:
            case TypeTag.BOOLEAN:
                ok = isinstance(self.data, bool)
            case TypeTag.INTEGER:
                # bool is an int subclass, but never a valid integer value here.
                ok = isinstance(self.data, int) and not isinstance(self.data, bool)
                if ok and not (INT64_MIN <= self.data <= INT64_MAX):
                    raise CmdTypeError(f"Integer value {self.data} does not fit in 64 bits.", cmd_token=str(self.data))
            case TypeTag.TEXT:
                ok = isinstance(self.data, str)
            case _:
                raise CmdTypeError(f"Unknown type tag `{self.tag}`.", cmd_token=self.tag)
        if not ok:
            raise CmdTypeError(f"Expected {self.tag} value, got {type(self.data).__name__}.", cmd_token=repr(self.data))

    @classmethod
    def boolean(cls, data: bool) -> "Value":
        return cls(TypeTag.BOOLEAN, data)

    @classmethod
    def integer(cls, data: int) -> "Value":
        return cls(TypeTag.INTEGER, data)

    @classmethod
    def text(cls, data: str) -> "Value":
        return cls(TypeTag.TEXT, data)


PrefixKind = Literal["short", "long", "both"]


@dataclass(frozen=True)
class PrefixForm:
    short: str | None = None      # e.g. `-p`, never starts with `--`
    long: str | None = None       # e.g. `--print`

    def __post_init__(self):
        assert self.short is not None or self.long is not None
        assert self.short is None or (self.short.startswith('-') and not self.short.startswith('--'))
        assert self.long is None or self.long.startswith('--')

    @property
    def kind(self) -> PrefixKind:
        if self.short is not None and self.long is not None: return "both"
        return "short" if self.short is not None else "long"

    @property
    def tokens(self) -> tuple[str, ...]:
        """Present tokens in (short, long) order."""
        return tuple(t for t in (self.short, self.long) if t is not None)

    def matches(self, flag: str) -> bool:
        # Byte-for-byte comparison, declared whitespace is kept on purpose.
        return flag == self.short or flag == self.long

    def __repr__(self):
        return ",".join(self.tokens)


@dataclass(frozen=True)
class OptionSpec:
    prefix: PrefixForm
    tag: str                      # one of TypeTag.ALL
    instruction: str
    default: Value | None = None
    declared: str = ""            # prefix text exactly as passed by the caller


@dataclass(frozen=True)
class Dispatch:
    option: OptionSpec
    flag: str
    value: Value
