"""
Exceptions that are used throughout
"""

from __future__ import annotations

import difflib
from collections.abc import Collection


class SourceAccessError(OSError):
    """
    Raised when the source data cannot be retrieved

    For example, the file does not exist or the server
    did not return a successful response.
    """

    def __init__(self, source: str, reason: str) -> None:
        """
        Initialise the error

        Parameters
        ----------
        source
            Path or URL we tried to read from

        reason
            Description of what went wrong
        """
        error_msg = f"Could not read diet data from {source!r}: {reason}"
        super().__init__(error_msg)
        self.source = source
        self.reason = reason


class UnrecognisedValueError(ValueError):
    """
    Raised when a value is not one of the known values
    """

    def __init__(
        self,
        unrecognised_value: str,
        name: str,
        known_values: Collection[str],
        n_suggestions: int = 3,
    ) -> None:
        """
        Initialise the error

        Parameters
        ----------
        unrecognised_value
            The value that was not recognised

        name
            Name of the thing being looked up

            This is only used to make the error message helpful.

        known_values
            The values we do know about

        n_suggestions
            Maximum number of close matches to suggest
        """
        error_msg = f"{unrecognised_value!r} is not a recognised value for {name}. "

        close = difflib.get_close_matches(
            unrecognised_value, list(known_values), n=n_suggestions
        )
        if close:
            suggestions = " or ".join(repr(v) for v in close)
            error_msg += f"Did you mean {suggestions}? "

        error_msg += f"The full list of known values is: {sorted(known_values)}"

        super().__init__(error_msg)
