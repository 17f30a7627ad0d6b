"""Message exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error
information; formatting errors expose the offending argument and component.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MessageError(Exception):
    """Base exception for all message errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MessageSyntaxError(MessageError):
    """Template text could not be parsed into a component tree.

    The diagnostic span (when present) locates the failure in the template.
    """

    @property
    def line(self) -> int | None:
        """Line of the failure (1-indexed), if known."""
        if self.diagnostic is None or self.diagnostic.span is None:
            return None
        return self.diagnostic.span.line

    @property
    def column(self) -> int | None:
        """Column of the failure (1-indexed), if known."""
        if self.diagnostic is None or self.diagnostic.span is None:
            return None
        return self.diagnostic.span.column


class MessageFormatError(MessageError):
    """Runtime error while rendering a component tree.

    Terminal for the current format call: no partial output is produced.
    """

    @property
    def argument_name(self) -> str | None:
        """Name of the argument that caused the failure, if any."""
        return self.diagnostic.argument_name if self.diagnostic else None

    @property
    def component(self) -> str | None:
        """Kind of the component being rendered, if any."""
        return self.diagnostic.component if self.diagnostic else None


class UndefinedArgumentError(MessageFormatError):
    """A component references an argument absent from the environment."""


class UnsupportedArgumentTypeError(MessageFormatError):
    """The argument's runtime type is incompatible with the component.

    Also raised when an argument of an unbindable type (None) is bound
    into an environment.
    """


class InvalidNumberFormatError(MessageFormatError):
    """A value required to be numeric cannot be interpreted as a number.

    Example:
        {count, plural, other {# items}} with count="many"
    """


class MissingDefaultBranchError(MessageFormatError):
    """No branch matches the selector and there is no 'other' branch."""


class MessageNotFoundError(MessageError):
    """A table path could not be resolved by the Localizer facade.

    Tables themselves report missing paths as a boolean outcome; only the
    facade turns that outcome into an exception.

    Attributes:
        path: The table path that was not found
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        super().__init__(message)
        self.path = path
