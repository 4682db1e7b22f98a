"""
Error handling utilities for the Knapsack Heuristics CLI.

Provides custom exception classes and decorators for handling errors
with informative messages and actionable suggestions.
"""

import functools
import sys
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

import click

# Type variable for decorators
F = TypeVar("F", bound=Callable[..., Any])


# ============================================================================
# Custom Exception Hierarchy
# ============================================================================


class KnapsackHeuristicsError(Exception):
    """Base exception for Knapsack Heuristics errors."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        """
        Initialize error with message and optional suggestion.

        Args:
            message: Error description
            suggestion: Actionable suggestion for fixing the error
        """
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def format_error(self) -> str:
        """Format error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        return "\n".join(parts)


class ConfigurationError(KnapsackHeuristicsError):
    """Error related to configuration files or parameters."""

    pass


class DataError(KnapsackHeuristicsError):
    """Error related to loading or parsing instance files."""

    pass


class ValidationError(KnapsackHeuristicsError):
    """Error related to input validation."""

    pass


# ============================================================================
# Error Handlers
# ============================================================================


def handle_cli_errors(
    debug_flag_name: str = "debug",
) -> Callable[[F], F]:
    """
    Decorator for CLI commands to handle errors gracefully.

    Args:
        debug_flag_name: Name of the debug flag in the command signature

    Returns:
        Decorator function

    Example:
        >>> @click.command()
        >>> @click.option("--debug", is_flag=True)
        >>> @handle_cli_errors()
        >>> def compare(debug):
        ...     pass
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            debug_mode = kwargs.get(debug_flag_name, False)

            try:
                return func(*args, **kwargs)

            except (click.exceptions.Abort, click.exceptions.ClickException):
                # Let click report its own usage errors and aborts
                raise

            except KnapsackHeuristicsError as e:
                click.secho(e.format_error(), fg="red", err=True)
                if debug_mode:
                    click.secho("\nFull traceback:", fg="yellow", err=True)
                    traceback.print_exc()
                sys.exit(1)

            except PermissionError as e:
                msg = f"Permission denied: {e.filename}"
                suggestion = "Check file permissions or run with appropriate privileges."
                click.secho(f"Error: {msg}", fg="red", err=True)
                click.secho(f"Suggestion: {suggestion}", fg="yellow", err=True)
                if debug_mode:
                    traceback.print_exc()
                sys.exit(1)

            except KeyboardInterrupt:
                click.secho("\n\nOperation cancelled by user.", fg="yellow", err=True)
                sys.exit(130)  # Standard exit code for SIGINT

            except Exception as e:
                if debug_mode:
                    click.secho("Unexpected error occurred:", fg="red", err=True)
                    traceback.print_exc()
                else:
                    error_type = type(e).__name__
                    click.secho(f"Unexpected error ({error_type}): {str(e)}", fg="red", err=True)
                    click.secho(
                        "\nTip: Run with --debug flag to see full traceback", fg="yellow", err=True
                    )
                sys.exit(1)

        return wrapper  # type: ignore

    return decorator


# ============================================================================
# Validation Utilities
# ============================================================================


def require_positive_int(value: int, name: str) -> int:
    """
    Validate that value is a positive integer.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Validated value

    Raises:
        ValidationError: If value is not positive
    """
    if value <= 0:
        raise ValidationError(
            f"{name} must be positive, got: {value}",
            suggestion=f"Provide a positive integer for {name}.",
        )
    return value


def require_fraction(value: float, name: str) -> float:
    """
    Validate that value lies in the half-open interval (0.0, 1.0].

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Validated value

    Raises:
        ValidationError: If value is not in (0, 1]
    """
    if not 0.0 < value <= 1.0:
        raise ValidationError(
            f"{name} must be in (0.0, 1.0], got: {value}",
            suggestion=f"Provide a fraction greater than 0 and at most 1 for {name}.",
        )
    return value
