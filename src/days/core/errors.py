"""Error kinds raised by the core."""


class DaysError(Exception):
    """Base class for days errors."""


class MalformedDateError(DaysError, ValueError):
    """A date string is unparseable or not a real calendar date."""


class MissingParameterError(DaysError):
    """An option that needs a value was given without one."""


class InvalidOptionsError(DaysError):
    """Unrecognized or conflicting command options."""
