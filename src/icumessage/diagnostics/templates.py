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

    # ------------------------------------------------------------------
    # Reference errors
    # ------------------------------------------------------------------

    @staticmethod
    def undefined_argument(argument_name: str, component: str) -> Diagnostic:
        """Argument referenced by a component is not defined.

        Args:
            argument_name: The argument name that was not found
            component: Component kind that referenced it

        Returns:
            Diagnostic for UNDEFINED_ARGUMENT
        """
        msg = f'Argument "{argument_name}" is not defined'
        return Diagnostic(
            code=DiagnosticCode.UNDEFINED_ARGUMENT,
            message=msg,
            hint=f"Pass '{argument_name}' in the arguments mapping",
            argument_name=argument_name,
            component=component,
        )

    @staticmethod
    def message_not_found(path: str) -> Diagnostic:
        """Table path could not be resolved.

        Args:
            path: The table path that was looked up

        Returns:
            Diagnostic for MESSAGE_NOT_FOUND
        """
        msg = f"Message '{path}' not found in table"
        return Diagnostic(
            code=DiagnosticCode.MESSAGE_NOT_FOUND,
            message=msg,
            hint="Check that the path is defined in the table for this locale",
        )

    # ------------------------------------------------------------------
    # Formatting errors
    # ------------------------------------------------------------------

    @staticmethod
    def unsupported_argument_type(
        argument_name: str,
        component: str,
        received_type: str,
        expected_type: str,
    ) -> Diagnostic:
        """Argument type is not supported by the component.

        Args:
            argument_name: The offending argument
            component: Component kind being rendered
            received_type: Python type name of the value
            expected_type: Argument kind the component requires

        Returns:
            Diagnostic for UNSUPPORTED_ARGUMENT_TYPE
        """
        msg = (
            f'Argument "{argument_name}" with type {received_type} is unsupported '
            f"by the {component} component"
        )
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_ARGUMENT_TYPE,
            message=msg,
            hint=f"Pass a {expected_type} value for '{argument_name}'",
            argument_name=argument_name,
            component=component,
            expected_type=expected_type,
            received_type=received_type,
        )

    @staticmethod
    def unbindable_argument(argument_name: str, received_type: str) -> Diagnostic:
        """Argument value cannot be bound into an environment at all.

        Args:
            argument_name: The offending argument
            received_type: Python type name of the value

        Returns:
            Diagnostic for UNSUPPORTED_ARGUMENT_TYPE
        """
        msg = f'Argument "{argument_name}" with type {received_type} cannot be bound'
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_ARGUMENT_TYPE,
            message=msg,
            hint="Omit the argument instead of passing None",
            argument_name=argument_name,
            expected_type="number, datetime, text or object",
            received_type=received_type,
        )

    @staticmethod
    def invalid_number_format(
        argument_name: str | None, component: str | None, value: object
    ) -> Diagnostic:
        """Value cannot be interpreted as a number.

        Args:
            argument_name: The offending argument (None outside formatting)
            component: Component kind being rendered (None outside formatting)
            value: The value that failed to convert

        Returns:
            Diagnostic for INVALID_NUMBER_FORMAT
        """
        if argument_name is None:
            msg = f"Value {value!r} has an invalid number format"
        else:
            msg = f'Argument "{argument_name}" has an invalid number format: {value!r}'
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER_FORMAT,
            message=msg,
            hint="Pass an int, float, Decimal, or a numeric string such as '42' or '1.5'",
            argument_name=argument_name,
            component=component,
            expected_type="number",
            received_type=type(value).__name__,
        )

    @staticmethod
    def missing_default_branch(
        argument_name: str, component: str, selector: str
    ) -> Diagnostic:
        """No branch matches and no 'other' branch exists.

        Args:
            argument_name: The selector argument
            component: PluralFormat or SelectFormat
            selector: Resolved selector (category or string)

        Returns:
            Diagnostic for MISSING_DEFAULT_BRANCH
        """
        msg = (
            f'Argument "{argument_name}" is missing a default "other" keyword '
            f"(no branch for '{selector}')"
        )
        return Diagnostic(
            code=DiagnosticCode.MISSING_DEFAULT_BRANCH,
            message=msg,
            hint="Add an 'other' branch to the component",
            argument_name=argument_name,
            component=component,
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Component tree nesting exceeded the depth limit.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum message nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce plural/select nesting in the template",
        )

    @staticmethod
    def formatting_failed(what: str, value: object, reason: str) -> Diagnostic:
        """Locale-aware rendering of a value failed.

        Args:
            what: "Number", "Date", "Time" or "Currency"
            value: The value being rendered
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"{what} formatting failed for '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            received_type=type(value).__name__,
        )

    # ------------------------------------------------------------------
    # Syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_eof(span: SourceSpan, expected: str) -> Diagnostic:
        """Template ended while a construct was still open.

        Args:
            span: Location of the end of input
            expected: Description of what was expected

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected end of template, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=span,
            hint="Check that every '{' has a matching '}'",
        )

    @staticmethod
    def expected_token(span: SourceSpan, expected: str, found: str) -> Diagnostic:
        """Parser found a different character than required.

        Args:
            span: Location of the unexpected character
            expected: Description of what was expected
            found: The character found

        Returns:
            Diagnostic for EXPECTED_TOKEN
        """
        msg = f"Expected {expected} but found {found!r}"
        return Diagnostic(code=DiagnosticCode.EXPECTED_TOKEN, message=msg, span=span)

    @staticmethod
    def unknown_placeholder_type(span: SourceSpan, type_name: str) -> Diagnostic:
        """Placeholder declares an unsupported format type.

        Args:
            span: Location of the type keyword
            type_name: The unknown keyword

        Returns:
            Diagnostic for UNKNOWN_PLACEHOLDER_TYPE
        """
        msg = f"Unknown placeholder type '{type_name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PLACEHOLDER_TYPE,
            message=msg,
            span=span,
            hint="Use one of: number, date, time, plural, select",
        )

    @staticmethod
    def invalid_plural_offset(span: SourceSpan, text: str) -> Diagnostic:
        """Plural offset is not an integer.

        Args:
            span: Location of the offset value
            text: The offending text

        Returns:
            Diagnostic for INVALID_PLURAL_OFFSET
        """
        msg = f"Invalid plural offset '{text}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PLURAL_OFFSET,
            message=msg,
            span=span,
            hint="Write the offset as an integer, e.g. offset:1",
        )

    @staticmethod
    def invalid_branch_key(span: SourceSpan, key: str) -> Diagnostic:
        """Branch key is malformed (e.g. '=' followed by a non-number).

        Args:
            span: Location of the key
            key: The offending key

        Returns:
            Diagnostic for INVALID_BRANCH_KEY
        """
        msg = f"Invalid branch key '{key}'"
        return Diagnostic(code=DiagnosticCode.INVALID_BRANCH_KEY, message=msg, span=span)

    @staticmethod
    def duplicate_branch(span: SourceSpan, key: str) -> Diagnostic:
        """Branch key appears twice in one component.

        Args:
            span: Location of the second occurrence
            key: The duplicated key

        Returns:
            Diagnostic for DUPLICATE_BRANCH
        """
        msg = f"Duplicate branch '{key}'"
        return Diagnostic(code=DiagnosticCode.DUPLICATE_BRANCH, message=msg, span=span)

    @staticmethod
    def no_branches(span: SourceSpan, argument_name: str) -> Diagnostic:
        """Plural or select placeholder declares no branches.

        Args:
            span: Location of the placeholder end
            argument_name: Selector argument name

        Returns:
            Diagnostic for NO_BRANCHES
        """
        msg = f"Placeholder for '{argument_name}' has no branches"
        return Diagnostic(
            code=DiagnosticCode.NO_BRANCHES,
            message=msg,
            span=span,
            argument_name=argument_name,
            hint="Add at least an 'other {...}' branch",
        )

    @staticmethod
    def parse_depth_exceeded(span: SourceSpan, max_depth: int) -> Diagnostic:
        """Branch nesting in the template exceeded the depth limit.

        Args:
            span: Location where the limit was hit
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for PARSE_NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum template nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
        )
