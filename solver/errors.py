"""Exceptions raised while reading an equation.

Every error subclasses ``ValueError`` so callers that only know about
``ValueError`` (the API layer, the CLI) handle them without changes.
"""

SEPARATOR_MESSAGE = "Equation must contain exactly one '=' symbol."
TERM_FORMAT_MESSAGE = (
    "Equation is not valid: All terms must be in the form 'coefficient * X^n'."
)
NUMERIC_MESSAGE = "Equation not valid: invalid coefficient or exponent."


class EquationError(ValueError):
    """Base class for every input failure. Carries a fixed user-facing message."""

    message = TERM_FORMAT_MESSAGE

    def __init__(self, detail: str = ""):
        super().__init__(self.message)
        self.detail = detail


class SeparatorError(EquationError):
    message = SEPARATOR_MESSAGE


class TermFormatError(EquationError):
    message = TERM_FORMAT_MESSAGE


class EmptySideError(TermFormatError):
    pass


class NumericError(EquationError):
    message = NUMERIC_MESSAGE
