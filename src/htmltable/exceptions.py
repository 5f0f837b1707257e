#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the htmltable library.

This module defines the exception classes raised while building and
rendering markup. All of them are programmer errors: they are raised at the
call site and never caught inside the library.

Exception Hierarchy
-------------------
- HtmlTableError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a table)

  - UnknownOperationError (no such chainable operation; also AttributeError)

  - RenderingError (output generation failures)
    - MissingColumnError (row data lacks a column key; also KeyError)

  - DefinitionError (table definition files and mappings)

"""

from typing import Any


class HtmlTableError(Exception):
    """Base exception class for all htmltable-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        return self.message


class ValidationError(HtmlTableError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when a table receives an options object of the wrong type.

    Parameters
    ----------
    expected_type : type
        The expected options class type
    received_type : type
        The actual type that was received
    message : str, optional
        Custom error message. If not provided, generates one

    """

    def __init__(
        self,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error with type details."""
        if message is None:
            message = f"Expected options of type {expected_type.__name__}, but received {received_type.__name__}."
        super().__init__(
            message,
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )
        self.expected_type = expected_type
        self.received_type = received_type


class UnknownOperationError(HtmlTableError, AttributeError):
    """Exception raised when calling an operation that does not exist.

    Since it is also an ``AttributeError``, ``hasattr()`` and ``getattr()``
    with a default keep their usual behavior.

    Parameters
    ----------
    class_name : str
        Name of the class the operation was looked up on
    method_name : str
        The operation that was attempted

    """

    def __init__(self, class_name: str, method_name: str):
        """Initialize the error with the offending class and method names."""
        message = f"Cannot call {class_name}::{method_name}() because it does not exist"
        super().__init__(message)
        self.class_name = class_name
        self.method_name = method_name


class RenderingError(HtmlTableError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class MissingColumnError(RenderingError, KeyError):
    """Exception raised when row data has no value for a column.

    Parameters
    ----------
    column : str or int
        The column key that could not be found
    section : str
        Table section being rendered ("thead", "tbody" or "tfoot")
    row_index : int, optional
        Position of the offending row inside the body

    """

    def __init__(
        self,
        column: Any,
        section: str,
        row_index: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the error with the column and where it was missing."""
        location = f"row {row_index} of {section}" if row_index is not None else section
        message = f"Missing value for column {column!r} in {location}"
        super().__init__(message, rendering_stage=section, original_error=original_error)
        self.column = column
        self.section = section
        self.row_index = row_index


class DefinitionError(HtmlTableError):
    """Exception raised when a table definition cannot be loaded.

    Parameters
    ----------
    message : str
        Description of the problem
    source : str, optional
        File path (or other origin) of the definition
    original_error : Exception, optional
        The underlying exception, e.g. a decoder error

    """

    def __init__(self, message: str, source: str | None = None, original_error: Exception | None = None):
        """Initialize the definition error."""
        super().__init__(message, original_error)
        self.source = source
