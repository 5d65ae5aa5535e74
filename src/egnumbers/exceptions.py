"""
Domain-specific exceptions for egnumbers.

Only contract violations raise. Classification lookups and the lenient
checksum entry points (``luhn_validate``, ``luhn_trace``) are total and
return fallback values instead, and the identifier parsers report bad
input through their result records.

Usage:
    from egnumbers.exceptions import InvalidArgumentError

    try:
        digit = luhn_check_digit(raw)
    except InvalidArgumentError as e:
        logger.error(f"Bad card prefix: {e}")

Exception Hierarchy:
    EgNumbersError (base)
    ├── InvalidArgumentError - empty or non-digit input to strict operations
    │   └── ArgumentOutOfRangeError - numeric argument outside its allowed range
    └── ConfigurationError - unreadable or malformed settings
"""

from typing import Any, Optional


class EgNumbersError(Exception):
    """
    Base exception for all egnumbers errors.

    Provides consistent error formatting with optional context.

    Attributes:
        message: Human-readable error description
        context: Additional context about what was being done
        details: Technical details (parameter names, offending values, etc.)
    """

    def __init__(
        self,
        message: str,
        context: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with context and details."""
        parts = [self.message]
        if self.context:
            parts.append(f"Context: {self.context}")
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            parts.append(f"Details: {detail_str}")
        return ". ".join(parts)


class InvalidArgumentError(EgNumbersError, ValueError):
    """
    Raised when a caller passes an argument that violates an operation's contract.

    Examples:
        - Empty digit string passed to ``luhn_checksum``
        - Digit string containing spaces, letters or Arabic-Indic digits
        - Non-numeric card prefix passed to ``generate_test_number``

    This is a programming error to be fixed at the call site, not a
    per-request condition. It subclasses ``ValueError`` so generic
    callers can still catch it.
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if parameter:
            details["parameter"] = parameter
        super().__init__(message, details=details, **kwargs)
        self.parameter = parameter


class ArgumentOutOfRangeError(InvalidArgumentError):
    """
    Raised when a numeric argument falls outside its permitted range.

    Example:
        generate_test_number("411111", total_length=7)  # no room for filler
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if value is not None:
            details["value"] = value
        super().__init__(message, parameter=parameter, details=details, **kwargs)
        self.value = value


class ConfigurationError(EgNumbersError):
    """
    Raised when configuration or settings are invalid.

    Examples:
        - YAML settings file is not valid YAML
        - YAML settings file does not contain a mapping

    Usage:
        try:
            settings = get_settings()
        except ConfigurationError as e:
            logger.error(f"Invalid configuration: {e}")
            sys.exit(1)
    """

    def __init__(
        self,
        message: str,
        setting_name: Optional[str] = None,
        setting_value: Optional[Any] = None,
        **kwargs,
    ):
        details = kwargs.pop("details", {})
        if setting_name:
            details["setting"] = setting_name
        if setting_value is not None:
            details["value"] = repr(setting_value)
        super().__init__(message, details=details, **kwargs)
        self.setting_name = setting_name
        self.setting_value = setting_value
