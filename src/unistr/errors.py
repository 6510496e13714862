"""
Exceptions raised for invalid input.

Failing to find something (a missing delimiter, a pattern that does not
match) is never an error in this package. The operations fall back to
returning the original string, or an empty result, instead.
"""


class InvalidArgument(ValueError):
    """An argument value that the operation cannot work with."""


class InvalidLength(InvalidArgument):
    """Negative length requested where only non-negative lengths make sense."""


class MalformedPattern(ValueError):
    """A regular expression that could not be compiled."""
