## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re

from .types import TypeTag, Value, OptionSpec


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))

def format_diagnostic(label: str, detail: str) -> str:
    return f'\033[30;43m {label} \033[0m {detail}'


def format_value(value: Value) -> str:
    if value.tag == TypeTag.BOOLEAN: return str(value.data).lower()
    return str(value.data)

def format_option(opt: OptionSpec) -> str:
    return (opt.prefix.short or '') + (opt.prefix.long or '') + '\t' + opt.instruction


def render_version(cmd) -> str:
    return "Version:" + cmd.program_version

def render_help(cmd) -> str:
    lines = ["Description:" + cmd.description]
    lines.extend(format_option(opt) for opt in cmd.options)
    return '\n'.join(lines)
