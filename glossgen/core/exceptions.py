"""
Custom exceptions for the glossary generator.
Provides a clear error hierarchy and meaningful error messages.
"""

from contextlib import contextmanager
from typing import Optional, Dict, Any, Type
import logging

__all__ = [
    # Base
    'GlossarySystemError',
    # Glossary
    'GlossaryError', 'DuplicateTermError', 'InvalidTermError',
    'TermNotFoundError', 'GlossaryFrozenError',
    # Parser
    'ParserError', 'RecordReadError',
    # Output
    'OutputError', 'PageWriteError',
    # Pipeline
    'PipelineError', 'ConfigurationError',
    # Validation
    'ValidationError', 'InvalidConfigError',
    # Utilities
    'error_context', 'wrap_error',
]


# ============================================================================
# BASE EXCEPTION
# ============================================================================

class GlossarySystemError(Exception):
    """
    Base exception for all glossary generator errors.

    All custom exceptions inherit from this class for unified error handling.
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize exception with message and optional context.

        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context."""
        if not self.context:
            return self.message

        context_str = ', '.join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'context': self.context
        }


# ============================================================================
# GLOSSARY EXCEPTIONS
# ============================================================================

class GlossaryError(GlossarySystemError):
    """Base exception for glossary index errors."""
    pass


class DuplicateTermError(GlossaryError):
    """Raised when a term is added to an index that already holds it."""

    def __init__(self, message: str, term: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, term=term, **context)
        self.term = term


class InvalidTermError(GlossaryError):
    """Raised when a term doesn't meet requirements (e.g. empty)."""

    def __init__(self, message: str, term: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, term=term, **context)
        self.term = term


class TermNotFoundError(GlossaryError, KeyError):
    """Raised when a definition is requested for an unknown term."""

    def __init__(self, message: str, term: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, term=term, **context)
        self.term = term

    # KeyError.__str__ would repr() the message
    __str__ = GlossarySystemError.__str__


class GlossaryFrozenError(GlossaryError):
    """Raised when modifying an index after it has been frozen."""
    pass


# ============================================================================
# PARSER EXCEPTIONS
# ============================================================================

class ParserError(GlossarySystemError):
    """Base exception for record source errors."""
    pass


class RecordReadError(ParserError):
    """Raised when the record source cannot be opened or read."""

    def __init__(self, message: str, path: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, path=path, **context)
        self.path = path


# ============================================================================
# OUTPUT EXCEPTIONS
# ============================================================================

class OutputError(GlossarySystemError):
    """Base exception for page sink errors."""
    pass


class PageWriteError(OutputError):
    """Raised when a page cannot be opened, written or closed."""

    def __init__(self, message: str, page: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, page=page, **context)
        self.page = page


# ============================================================================
# PIPELINE EXCEPTIONS
# ============================================================================

class PipelineError(GlossarySystemError):
    """Raised for general pipeline failures during generation."""

    def __init__(self, message: str, stage: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, stage=stage, **context)
        self.stage = stage


class ConfigurationError(GlossarySystemError):
    """Raised when component configuration is invalid."""

    def __init__(self, message: str, component: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, component=component, **context)
        self.component = component


# ============================================================================
# VALIDATION EXCEPTIONS
# ============================================================================

class ValidationError(GlossarySystemError):
    """Base exception for validation errors."""

    def __init__(self, message: str, field: Optional[str] = None, **context: Any) -> None:
        super().__init__(message, field=field, **context)
        self.field = field


class InvalidConfigError(ValidationError):
    """Raised when configuration values are invalid."""
    pass


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def wrap_error(
    error: Exception,
    error_class: Type[GlossarySystemError],
    message: Optional[str] = None,
    **context: Any
) -> GlossarySystemError:
    """
    Wrap an exception in a custom exception type.

    Args:
        error: Original exception
        error_class: Exception class to wrap with
        message: Optional custom message
        **context: Extra context passed to the new exception

    Returns:
        Wrapped exception with ``__cause__`` set to the original

    Raises:
        TypeError: If error_class is not a GlossarySystemError subclass

    Example:
        >>> try:
        ...     open("missing.txt")
        ... except OSError as e:
        ...     raise wrap_error(e, RecordReadError, "Cannot open terms file")
    """
    if not issubclass(error_class, GlossarySystemError):
        raise TypeError(
            f"error_class must be subclass of GlossarySystemError, "
            f"got {error_class.__name__}"
        )

    error_msg = f"{message}: {error}" if message else str(error)
    wrapped = error_class(error_msg, **context)
    wrapped.__cause__ = error
    return wrapped


@contextmanager
def error_context(
    operation: str,
    error_class: Type[GlossarySystemError] = GlossarySystemError,
    logger: Optional[logging.Logger] = None,
    **context: Any
):
    """
    Context manager for consistent error handling and wrapping.

    Args:
        operation: Name of operation being performed
        error_class: Exception class to wrap errors with
        logger: Optional logger for error logging
        **context: Extra context attached to the wrapped exception

    Raises:
        error_class: Wrapped exception if error occurs

    Example:
        >>> with error_context("writing page", PageWriteError, page="map.html"):
        ...     handle.write(text)
    """
    try:
        yield
    except error_class:
        # Already the correct type
        raise
    except KeyboardInterrupt:
        raise
    except Exception as e:
        if logger:
            logger.error(f"Error during {operation}: {e}")

        raise wrap_error(e, error_class, f"Error during {operation}", **context)
