## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class CmdError(Exception):
    exit_code: int = 1
    label: str = "ERROR."

    def __init__(self, message: str = "", *, cmd_token=None, cmd_option=None):
        """Base class for all errors raised while declaring or dispatching options."""
        super().__init__(message)
        self.cmd_token: str = cmd_token
        self.cmd_option: object = cmd_option


class CmdTypeError(CmdError, TypeError):
    """Declaration-time problems with a default value of the wrong kind."""
    pass

class CmdArgumentError(CmdError, ValueError):
    """Missing tokens, or a boolean value token that isn't `true` or `false`."""
    exit_code = 2
    label = "INVALID ARGUMENT."

class CmdParseError(CmdError, ValueError):
    """Value token could not be coerced into an integer."""
    exit_code = 3
    label = "PARSE ERROR."

class CmdUnknownOption(CmdError, LookupError):
    exit_code = 4
    label = "UNKNOWN OPTION."


class CmdPrefixError(CmdError, ValueError):
    exit_code = 5
    label = "PREFIX ERROR."

    def __init__(self, message, *, cmd_token=None, cmd_option=None, column=None):
        super().__init__(message, cmd_token=cmd_token, cmd_option=cmd_option)
        self.column = column
