## cmdopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from cmdopt.commander import Commander
from cmdopt.types import Value
from cmdopt.formatting import render_help, render_version, format_value, format_diagnostic, write_without_ansi


def test_version_has_no_separator():
    cmd = Commander().version("2.3.1")
    assert render_version(cmd) == "Version:2.3.1"
    assert cmd.render_version() == "Version:2.3.1"


def test_help_lists_options_in_declaration_order():
    cmd = Commander().instruction("test command") \
        .option("-p,--print", "print", True) \
        .option_str("--name", "print name") \
        .option_int("-c", "count")

    assert render_help(cmd).split('\n') == [
        "Description:test command",
        "-p--print\tprint",
        "--name\tprint name",
        "-c\tcount",
    ]


def test_help_without_options_is_description_only():
    assert Commander().render_help() == "Description:"


def test_values_render_as_plain_text():
    assert format_value(Value.boolean(True)) == "true"
    assert format_value(Value.boolean(False)) == "false"
    assert format_value(Value.integer(-3)) == "-3"
    assert format_value(Value.text("")) == ""


def test_ansi_codes_are_stripped_from_diagnostics():
    written = []
    write = write_without_ansi(written.append)
    write(format_diagnostic("PARSE ERROR.", "\033[1;97mbad\033[0m token"))
    assert written == [" PARSE ERROR.  bad token"]
