## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys

from .types import TypeTag, TYPE_NAME_MAP, Value, OptionSpec, Dispatch
from .errors import CmdError, CmdPrefixError, CmdTypeError
from .parser import parse_prefix, canonical_key
from .matcher import HELP_TOKENS, VERSION_TOKENS, Outcome, find_option, execute, analyse
from .formatting import format_diagnostic, render_help, render_version


class Commander:
    """Option registry built through chained calls, then consulted with a raw argument list.

        cmd = Commander().name("demo").version("1.0").instruction("Demo tool") \\
                         .option("-p,--print", "print", True) \\
                         .option_int("-c,--count", "repeat count", 2)
        cmd.run(sys.argv)

    Every configuration call returns the same registry. Metadata setters are last-write-wins,
    options are append-only and keep declaration order.
    """

    def __init__(self):
        self.program_name: str = ""
        self.program_version: str = ""
        self.description: str = ""
        self.options: list[OptionSpec] = []
        self.defaults: dict[tuple[str, ...], Value] = {}
        self.errors: list[CmdError] = []

    # Metadata ────────────────────────────────────────────────────────────────────────────────
    def name(self, name: str) -> "Commander":
        self.program_name = name
        return self

    def version(self, version: str) -> "Commander":
        self.program_version = version
        return self

    def instruction(self, description: str) -> "Commander":
        self.description = description
        return self

    # Declaration ─────────────────────────────────────────────────────────────────────────────
    def option(self, prefix: str, instruction: str, default: bool | None = None) -> "Commander":
        return self.add_option(prefix, TypeTag.BOOLEAN, instruction, default)

    def option_str(self, prefix: str, instruction: str, default: str | None = None) -> "Commander":
        return self.add_option(prefix, TypeTag.TEXT, instruction, default)

    def option_int(self, prefix: str, instruction: str, default: int | None = None) -> "Commander":
        return self.add_option(prefix, TypeTag.INTEGER, instruction, default)

    def add_option(self, prefix: str, tag: str, instruction: str, default=None) -> "Commander":
        if (resolved := TYPE_NAME_MAP.get(tag.lower()) if isinstance(tag, str) else None) is None:
            raise CmdTypeError(f"Unknown option type `{tag}`.", cmd_token=str(tag))

        try:
            form = parse_prefix(prefix)
        except CmdPrefixError as exc:
            # Malformed declarations are reported and skipped, the rest of the chain still applies.
            self.errors.append(exc)
            print(format_diagnostic(exc.label, f"{exc} Option `{instruction}` was skipped."), file=sys.stderr)
            return self

        if shadowed := [t for t in form.tokens if t in HELP_TOKENS + VERSION_TOKENS]:
            print(format_diagnostic("WARNING.", f"Option `{prefix}` is shadowed by built-in `{shadowed[0]}`."), file=sys.stderr)

        value = Value(resolved, default) if default is not None else None
        if value is not None:
            self.defaults[canonical_key(form)] = value
        self.options.append(OptionSpec(prefix=form, tag=resolved, instruction=instruction, default=value, declared=prefix))
        return self

    # Lookup ──────────────────────────────────────────────────────────────────────────────────
    def get_default(self, prefix: str) -> Value | None:
        return self.defaults.get(canonical_key(parse_prefix(prefix)))

    def find(self, flag: str) -> OptionSpec | None:
        return find_option(self.options, flag)

    # Dispatch ────────────────────────────────────────────────────────────────────────────────
    def execute(self, args: list[str]) -> Dispatch:
        return execute(args, self.options)

    def analyse(self, args: list[str]) -> Outcome:
        return analyse(args, self)

    def render_help(self) -> str:
        return render_help(self)

    def render_version(self) -> str:
        return render_version(self)

    def run(self, args: list[str] | None = None, file=None, err=None) -> int:
        """Analyse `args` (default `sys.argv`), print the outcome, and return a process exit code."""
        args = list(sys.argv if args is None else args)
        try:
            outcome = self.analyse(args)
        except CmdError as exc:
            print(format_diagnostic(exc.label, str(exc)), file=err or sys.stderr)
            return exc.exit_code
        print(outcome.text, file=file or sys.stdout)
        return 0

    def __repr__(self):
        return f"Commander(name={self.program_name!r}, version={self.program_version!r}, options={len(self.options)})"
