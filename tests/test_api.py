## cmdopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import cmdopt.api as C


def test_default_commander_is_configured_through_module():
    result = C.name("api-demo").version("3.0").instruction("through the facade")
    assert result is C._COMMANDER
    assert C.render_version() == "Version:3.0"


def test_declare_and_execute_through_module():
    C.option_int("--api-level", "level", 1)
    dispatch = C.execute(["prog", "--api-level", "9"])
    assert dispatch.value == C.Value.integer(9)
    assert C.get_default("--api-level") == C.Value.integer(1)


def test_types_and_errors_are_reexported():
    assert C.parse_prefix("-a,--api") == C.PrefixForm(short="-a", long="--api")
    assert issubclass(C.CmdUnknownOption, C.CmdError)
    assert C.TypeTag.TEXT == "text"
