"""
Errors raised by the processing pipeline. All of them end the current run;
the user fixes the input or re-runs "Set Variables".
"""


class MissingConfigurationError(LookupError):
    """One or more persisted variables are absent."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__(
            "Variables not set! Run 'Set Variables' first (missing: " + ", ".join(self.missing) + ")"
        )


class InvalidRangeError(ValueError):
    """Baseline shift sample range falls outside the logged readings."""


class InvalidColumnReferenceError(ValueError):
    """Column letter or row number could not be parsed."""


class OutputSheetExistsError(ValueError):
    """The output sheet is already present in the target workbook."""


class DataSheetNotFoundError(LookupError):
    """The configured data sheet is not in the source workbook."""
