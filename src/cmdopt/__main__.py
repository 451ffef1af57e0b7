## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# cmdopt — A small typed option registry and single-flag dispatcher.
#

import sys
from dataclasses import dataclass

import click

from .commander import Commander
from .errors import CmdError, CmdUnknownOption, CmdPrefixError
from .formatting import write_without_ansi, format_diagnostic


PROGRAM = 'cmdopt'


@dataclass(frozen=True)
class RunnerConfig:
    plain: bool
    strict: bool


class CmdRunner:
    def __init__(self, config: RunnerConfig):
        self.plain = config.plain
        self.strict = config.strict

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

    def _report(self, message: str, detail: str) -> None:
        print(format_diagnostic(message, detail), file=sys.stderr)

    def _handle_exception(self, exc: CmdError) -> int:
        if isinstance(exc, CmdUnknownOption):
            self._report(exc.label, f"Flag `\033[1;97m{exc.cmd_token}\033[0m` matches no declared option; try `-h`.")
        elif type(exc) is CmdError:
            self._report(exc.label, f"{exc} (Exception: \033[33m{type(exc).__name__}\033[0m)")
        else:
            self._report(exc.label, str(exc))
        return exc.exit_code

    def run(self, commander: Commander, args: list[str]) -> int:
        if self.strict and commander.errors:
            self._report("CONFIGURATION ERROR.", f"{len(commander.errors)} option declaration(s) were rejected.")
            return CmdPrefixError.exit_code

        try:
            outcome = commander.analyse(args)
        except CmdError as exc:
            return self._handle_exception(exc)
        print(outcome.text)
        return 0


def demo_commander() -> Commander:
    return Commander() \
        .name(PROGRAM) \
        .version("1.0") \
        .instruction("typed option dispatcher") \
        .option("-p,--print", "print", True) \
        .option_str("-n,--name", "print name", PROGRAM) \
        .option_int("-c,--count", "print count", 2)


@click.command(context_settings={'ignore_unknown_options': True, 'allow_extra_args': True, 'help_option_names': []})
@click.option('--plain', is_flag=True, envvar='CMDOPT_PLAIN', help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--strict', is_flag=True, help='Refuse to dispatch when any option declaration was rejected.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, plain: bool, strict: bool, tokens: tuple[str, ...]) -> None:
    runner = CmdRunner(RunnerConfig(plain=plain, strict=strict))
    ctx.exit(runner.run(demo_commander(), [PROGRAM, *tokens]))


def main(argv: list[str] | None = None) -> None:
    a = list(sys.argv[1:] if argv is None else argv)
    # Runner flags are only recognized before the first dispatch token.
    split = next((i for i, t in enumerate(a) if t not in ('--plain', '--strict')), len(a))
    cli.main(args=[*a[:split], '--', *a[split:]], prog_name=PROGRAM)


if __name__ == "__main__":
    main()
