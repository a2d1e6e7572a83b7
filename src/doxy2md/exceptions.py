#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the doxy2md library.

This module defines specialized exception classes for the error conditions
that can occur while rendering a Doxygen documentation tree. Only two kinds of
problem stop a render: an incomplete renderer registry and a node tree that
breaks its own contract. Everything else (unresolved references, unknown
highlight classes and similar) is logged and rendered in a plainer form.

Exception Hierarchy
-------------------
- Doxy2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class given to a renderer)

  - RenderingError (output generation failures)
    - MissingRendererError (no renderer anywhere in a node's type chain)
    - MalformedNodeError (node violates a structural contract)

"""

from typing import Any


class Doxy2MdError(Exception):
    """Base exception class for all doxy2md-specific errors.

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


class ValidationError(Doxy2MdError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation failure
    parameter_name : str, optional
        Name of the parameter that failed validation
    parameter_value : Any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception, if any

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object has the wrong type.

    Parameters
    ----------
    expected_type : type
        The options class the caller expected
    received_type : type
        The class that was actually received

    """

    def __init__(self, expected_type: type, received_type: type):
        """Initialize with the expected and received option types."""
        message = f"Expected options of type {expected_type.__name__}, got {received_type.__name__}"
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(Doxy2MdError):
    """Exception raised when output generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    node_kind : str, optional
        Kind of the node that was being rendered
    original_error : Exception, optional
        The original exception, if any

    """

    def __init__(self, message: str, node_kind: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with the offending node kind."""
        super().__init__(message, original_error)
        self.node_kind = node_kind


class MissingRendererError(RenderingError):
    """Raised when no renderer is registered for a node type or any of its ancestors.

    This is a configuration error: the registry does not cover the schema in
    use, and continuing would silently drop documentation content.

    Parameters
    ----------
    node_type : type
        The node class that could not be rendered
    chain : tuple of str
        The kind names that were searched, most specific first

    """

    def __init__(self, node_type: type, chain: tuple[str, ...] = ()):
        """Initialize with the unrenderable node type and the searched chain."""
        searched = " -> ".join(chain) if chain else node_type.__name__
        message = f"No renderer registered for {node_type.__name__} (searched: {searched})"
        super().__init__(message, node_kind=chain[0] if chain else None)
        self.node_type = node_type
        self.chain = chain


class MalformedNodeError(RenderingError):
    """Raised when a node breaks a structural contract of the documentation schema.

    Examples are a ``par`` simple section without a title or an anchor without
    an id. The upstream parser guarantees these never occur for valid input.

    Parameters
    ----------
    message : str
        Description of the violated contract
    node : Any, optional
        The offending node

    """

    def __init__(self, message: str, node: Any = None):
        """Initialize with a description and the offending node."""
        super().__init__(message, node_kind=getattr(node, "kind", None))
        self.node = node
