## cmdopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import dataclasses

import pytest

from cmdopt.types import TypeTag, TYPE_NAME_MAP, Value, PrefixForm, INT64_MAX, INT64_MIN
from cmdopt.errors import CmdTypeError


def test_value_constructors_carry_their_tag():
    assert Value.boolean(True) == Value(TypeTag.BOOLEAN, True)
    assert Value.integer(-7).tag == TypeTag.INTEGER
    assert Value.text("").data == ""


def test_value_is_immutable():
    value = Value.integer(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.data = 2


@pytest.mark.parametrize("tag, data", [
    (TypeTag.BOOLEAN, 1),
    (TypeTag.BOOLEAN, "true"),
    (TypeTag.INTEGER, True),     # bool is an int subclass, still rejected
    (TypeTag.INTEGER, "42"),
    (TypeTag.TEXT, 3),
])
def test_value_rejects_mismatched_data(tag, data):
    with pytest.raises(CmdTypeError):
        Value(tag, data)


def test_integer_value_is_limited_to_64_bits():
    assert Value.integer(INT64_MAX).data == 2**63 - 1
    assert Value.integer(INT64_MIN).data == -2**63
    with pytest.raises(CmdTypeError, match=r"64 bits"):
        Value.integer(INT64_MAX + 1)


def test_unknown_tag_is_rejected():
    with pytest.raises(CmdTypeError, match=r"Unknown type tag"):
        Value("float", 1.5)


def test_type_names_resolve_to_tags():
    assert TYPE_NAME_MAP['bool'] == TYPE_NAME_MAP['boolean'] == TypeTag.BOOLEAN
    assert TYPE_NAME_MAP['int'] == TypeTag.INTEGER
    assert {TYPE_NAME_MAP[n] for n in ('str', 'string', 'text')} == {TypeTag.TEXT}


def test_prefix_form_matches_either_token_exactly():
    form = PrefixForm(short="-p", long="--print")
    assert form.matches("-p") and form.matches("--print")
    assert not form.matches("--p")
    assert not form.matches("-P")
    assert repr(form) == "-p,--print"
