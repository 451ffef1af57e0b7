## cmdopt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import TypeTag, Value, PrefixForm, OptionSpec, Dispatch
from .errors import *
from .parser import parse_prefix
from .commander import Commander

_COMMANDER = Commander()

def __getattr__(name):
    return getattr(_COMMANDER, name)
