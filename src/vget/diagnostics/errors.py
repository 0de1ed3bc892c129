"""vget exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class VGetError(Exception):
    """Base exception for all vget errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize VGetError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class TemplateTransformError(VGetError):
    """A template could not be rewritten.

    Raised synchronously from the expansion pass. Aborts the transform of the
    current template; the host compiler decides whether to continue with
    other templates.
    """


class ArgumentCountError(TemplateTransformError):
    """Shorthand invocation has the wrong number of positional arguments.

    Example:
        {{v-get model}}  ← needs a key
    """


class InvalidRootError(TemplateTransformError):
    """Shorthand invocation's first argument is not a path expression.

    Example:
        {{v-get 'model' 'isValid'}}  ← literal, not a bound property
    """
