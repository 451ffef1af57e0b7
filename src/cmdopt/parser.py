## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark

from .types import PrefixForm
from .errors import CmdPrefixError


GRAMMAR = r"""start: LONG               -> long_only
     | SHORT              -> short_only
     | SHORT "," LONG     -> short_long
     | LONG "," SHORT     -> long_short

// TOKENS
LONG: /--[^,]*/
SHORT: /-(?!-)[^,]*/
"""

# No %ignore directives: whitespace is part of a declared token.
_PARSER = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual")


def parse_prefix(raw: str) -> PrefixForm:
    """Parse a prefix declaration such as `-p`, `--print`, `-p,--print` or `--print,-p`.

    Comma-separated forms are normalized so the result always holds (short, long).
    Anything else raises `CmdPrefixError`, including two long or two short parts.
    """
    if not isinstance(raw, str):
        raise CmdPrefixError(f"Prefix must be a string, got {type(raw).__name__}.", cmd_token=repr(raw))

    try:
        tree = _PARSER.parse(raw)
    except lark.exceptions.UnexpectedInput as exc:
        column = getattr(exc, 'column', None)
        raise CmdPrefixError(f"Invalid prefix `{raw}`; expected `-s`, `--long` or `-s,--long`.",
                             cmd_token=raw, column=column if column and column > 0 else None) from None

    tokens = [str(t) for t in tree.children if isinstance(t, lark.Token)]
    match tree.data:
        case 'long_only':
            return PrefixForm(long=tokens[0])
        case 'short_only':
            return PrefixForm(short=tokens[0])
        case 'short_long':
            return PrefixForm(short=tokens[0], long=tokens[1])
        case 'long_short':
            return PrefixForm(short=tokens[1], long=tokens[0])
    raise NotImplementedError("Unexpected rule from prefix grammar.")


def canonical_key(form: PrefixForm) -> tuple[str, ...]:
    return form.tokens
