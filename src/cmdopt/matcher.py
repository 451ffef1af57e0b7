## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
from typing import Literal, Iterable
from dataclasses import dataclass

from .types import TypeTag, Value, OptionSpec, Dispatch, INT64_MIN, INT64_MAX
from .errors import CmdArgumentError, CmdParseError, CmdUnknownOption
from .formatting import format_value, render_help, render_version


HELP_TOKENS = ('-h', '--help')
VERSION_TOKENS = ('-v', '--version')

# Signed decimal only; int() alone would also take whitespace, underscores and non-ASCII digits.
_INTEGER_RE = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class Outcome:
    kind: Literal["help", "version", "value"]
    text: str
    dispatch: Dispatch | None = None


def find_option(options: Iterable[OptionSpec], flag: str) -> OptionSpec | None:
    """First option in declaration order whose short or long token equals `flag`."""
    return next((opt for opt in options if opt.prefix.matches(flag)), None)


def coerce(tag: str, raw: str, flag: str | None = None, option: OptionSpec | None = None) -> Value:
    subject = f"Option `{flag}`" if flag is not None else "Value"
    match tag:
        case TypeTag.BOOLEAN:
            if raw not in ('true', 'false'):
                raise CmdArgumentError(f"{subject} expects `true` or `false`, got `{raw}`.", cmd_token=raw, cmd_option=option)
            return Value.boolean(raw == 'true')
        case TypeTag.INTEGER:
            if _INTEGER_RE.fullmatch(raw) is None or not (INT64_MIN <= (number := int(raw)) <= INT64_MAX):
                raise CmdParseError(f"{subject} expects a 64-bit integer, got `{raw}`.", cmd_token=raw, cmd_option=option)
            return Value.integer(number)
        case TypeTag.TEXT:
            return Value.text(raw)
        case _:
            raise NotImplementedError(f"No coercion for type tag `{tag}`.")


def execute(args: list[str], options: Iterable[OptionSpec]) -> Dispatch:
    """Match `args[1]` against the declared options and coerce `args[2]`; later tokens are ignored."""
    if len(args) < 3:
        raise CmdArgumentError("No command input", cmd_token=args[1] if len(args) > 1 else None)

    flag, raw_value = args[1], args[2]
    if (option := find_option(options, flag)) is None:
        raise CmdUnknownOption(f"Unknown option `{flag}`.", cmd_token=flag)
    return Dispatch(option=option, flag=flag, value=coerce(option.tag, raw_value, flag=flag, option=option))


def analyse(args: list[str], cmd) -> Outcome:
    """Help and version need only 2 tokens (program, flag); any other flag also needs a value token."""
    if len(args) < 2:
        raise CmdArgumentError("No command input")

    flag = args[1]
    if flag in HELP_TOKENS:
        return Outcome("help", render_help(cmd))
    if flag in VERSION_TOKENS:
        return Outcome("version", render_version(cmd))

    dispatch = execute(args, cmd.options)
    return Outcome("value", format_value(dispatch.value), dispatch)
