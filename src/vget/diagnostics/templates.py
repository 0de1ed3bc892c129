"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://github.com/qonto/ember-cp-validations/blob/master/docs"

    @staticmethod
    def too_few_arguments(
        helper_name: str, count: int, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Shorthand invocation has fewer than two positional arguments.

        Args:
            helper_name: Name of the shorthand helper (e.g. "v-get")
            count: Number of positional arguments found
            span: Location of the invocation, if known

        Returns:
            Diagnostic for ARGUMENT_COUNT_INVALID
        """
        msg = f"{{{{{helper_name}}}}} requires at least two arguments"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_COUNT_INVALID,
            message=msg,
            span=span,
            hint=f"Use ({helper_name} model 'isValid') or ({helper_name} model 'attr' 'message')",
            help_url=f"{ErrorTemplate._DOCS_BASE}/templating.md",
            helper_name=helper_name,
            received=f"{count} argument(s)",
        )

    @staticmethod
    def too_many_arguments(
        helper_name: str, count: int, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Shorthand invocation has more than three positional arguments.

        Args:
            helper_name: Name of the shorthand helper
            count: Number of positional arguments found
            span: Location of the invocation, if known

        Returns:
            Diagnostic for ARGUMENT_COUNT_INVALID
        """
        msg = f"{{{{{helper_name}}}}} accepts at most three arguments, got {count}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_COUNT_INVALID,
            message=msg,
            span=span,
            hint="Nested attribute paths are not supported; use a bound property as the root",
            help_url=f"{ErrorTemplate._DOCS_BASE}/templating.md",
            helper_name=helper_name,
            received=f"{count} argument(s)",
        )

    @staticmethod
    def root_not_path(
        helper_name: str, received_kind: str, span: SourceSpan | None = None
    ) -> Diagnostic:
        """First argument to the shorthand helper is not a path expression.

        Args:
            helper_name: Name of the shorthand helper
            received_kind: Node kind found in the root position
            span: Location of the invocation, if known

        Returns:
            Diagnostic for ROOT_NOT_PATH
        """
        msg = f"The first argument to {{{{{helper_name}}}}} must be a stream"
        return Diagnostic(
            code=DiagnosticCode.ROOT_NOT_PATH,
            message=msg,
            span=span,
            hint="Pass a bound property such as model or model.details",
            help_url=f"{ErrorTemplate._DOCS_BASE}/templating.md",
            helper_name=helper_name,
            received=received_kind,
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum traversal depth exceeded.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum template nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="Check the template for runaway sub-expression nesting",
        )
