"""
Custom exception hierarchy for the Virtual Stylist.

Provides a structured exception hierarchy for different error scenarios:
- AppException: Base for all application errors
- ConfigError: Configuration-related errors
- CatalogError: Product catalog errors (empty catalog, unknown product)
- SuggestionSourceError: External suggestion source failures
- CartError: Cart store errors

Each exception includes:
- Descriptive message
- Optional error code for programmatic handling
- Optional context dictionary for debugging

Example:
    >>> from stylist.utils.exceptions import ProductNotFoundError
    >>> raise ProductNotFoundError(product_id="sku404")
"""

from __future__ import annotations

from typing import Any, Dict, Optional


# ============================================
# Base Exception
# ============================================


class AppException(Exception):
    """
    Base exception for all Virtual Stylist application errors.

    Attributes:
        message: Human-readable error description.
        code: Optional error code for programmatic handling.
        context: Optional dictionary with debugging context.

    Example:
        >>> try:
        ...     raise AppException("Something went wrong", code="APP_001")
        ... except AppException as e:
        ...     print(f"Error {e.code}: {e.message}")
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self._default_code()
        self.context = context or {}
        super().__init__(self.message)

    def _default_code(self) -> str:
        """Generate default error code from class name."""
        # Convert CamelCase to UPPER_SNAKE_CASE
        name = self.__class__.__name__
        code = ""
        for i, char in enumerate(name):
            if char.isupper() and i > 0:
                code += "_"
            code += char.upper()
        return code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "context": self.context,
        }


# ============================================
# Configuration Errors
# ============================================


class ConfigError(AppException):
    """
    Base exception for configuration-related errors.

    Raised when there are issues with:
    - Loading configuration files
    - Parsing YAML
    - Validating configuration values
    """

    pass


class ConfigFileNotFoundError(ConfigError):
    """
    Raised when an explicitly requested configuration file is not found.

    Example:
        >>> raise ConfigFileNotFoundError(path="/path/to/config.yaml")
    """

    def __init__(
        self,
        message: str = "Configuration file not found",
        path: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if path:
            context["path"] = path
        super().__init__(message, code="CONFIG_FILE_NOT_FOUND", context=context, **kwargs)


class ConfigurationError(ConfigError):
    """Raised when configuration is invalid or cannot be parsed."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        **kwargs,
    ) -> None:
        super().__init__(message, code="CONFIG_INVALID", **kwargs)


# ============================================
# Catalog Errors
# ============================================


class CatalogError(AppException):
    """
    Base exception for product catalog errors.

    Raised when there are issues with:
    - Loading the catalog file
    - Duplicate product ids
    - Looking up products
    """

    pass


class EmptyCatalogError(CatalogError):
    """
    Raised when a recommendation is requested against an empty catalog.

    There is no valid suggestion in that case; callers render nothing.
    """

    def __init__(
        self,
        message: str = "Catalog is empty, no suggestion available",
        **kwargs,
    ) -> None:
        super().__init__(message, code="CATALOG_EMPTY", **kwargs)


class ProductNotFoundError(CatalogError):
    """
    Raised when a product id is not part of the catalog.

    Example:
        >>> raise ProductNotFoundError(product_id="sku404")
    """

    def __init__(
        self,
        message: str = "Product not found",
        product_id: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if product_id:
            context["product_id"] = product_id
        super().__init__(message, code="PRODUCT_NOT_FOUND", context=context, **kwargs)


class CatalogLoadError(CatalogError):
    """Raised when the catalog file cannot be read or validated."""

    def __init__(
        self,
        message: str = "Failed to load catalog",
        path: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if path:
            context["path"] = path
        super().__init__(message, code="CATALOG_LOAD", context=context, **kwargs)


# ============================================
# Suggestion Source Errors
# ============================================


class SuggestionSourceError(AppException):
    """
    Base exception for external suggestion source failures.

    These never reach the caller of the recommender: the two-tier
    pipeline turns them into a failed external attempt and runs the
    local heuristic instead.
    """

    pass


class SourceRequestError(SuggestionSourceError):
    """
    Raised when the HTTP request to the suggestion source fails.

    Example:
        >>> raise SourceRequestError(
        ...     "Chat endpoint returned an error",
        ...     provider="glm",
        ...     status_code=502
        ... )
    """

    def __init__(
        self,
        message: str = "Suggestion source request failed",
        provider: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if provider:
            context["provider"] = provider
        if status_code:
            context["status_code"] = status_code
        super().__init__(message, code="SOURCE_REQUEST", context=context, **kwargs)


class SourceTimeoutError(SuggestionSourceError):
    """Raised when the suggestion source does not answer in time."""

    def __init__(
        self,
        message: str = "Suggestion source timed out",
        timeout_seconds: Optional[float] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if timeout_seconds:
            context["timeout_seconds"] = timeout_seconds
        super().__init__(message, code="SOURCE_TIMEOUT", context=context, **kwargs)


class MalformedSuggestionError(SuggestionSourceError):
    """
    Raised when the source answered but the payload is not a suggestion.

    Example:
        >>> raise MalformedSuggestionError(
        ...     "No JSON object in completion",
        ...     content="Sure! Here is my pick..."
        ... )
    """

    def __init__(
        self,
        message: str = "Malformed suggestion payload",
        content: Optional[str] = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if content:
            context["content"] = content[:200]  # Limit content length
        super().__init__(message, code="SOURCE_MALFORMED", context=context, **kwargs)


# ============================================
# Cart Errors
# ============================================


class CartError(AppException):
    """Base exception for cart store errors."""

    pass


class InvalidQuantityError(CartError):
    """Raised when a cart line would get a non-positive quantity."""

    def __init__(
        self,
        message: str = "Quantity must be a positive integer",
        quantity: Any = None,
        **kwargs,
    ) -> None:
        context = kwargs.pop("context", {})
        if quantity is not None:
            context["quantity"] = quantity
        super().__init__(message, code="INVALID_QUANTITY", context=context, **kwargs)


# Alias for common import pattern
StylistError = AppException
