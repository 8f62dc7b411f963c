"""Domain error classes.

Protocol-agnostic errors that represent failures of the catalog browser.
The HTTP screen shell translates them to status codes; the coordinator
folds upstream failures into state instead of raising them.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains error information that can be translated to HTTP (or any
    other presentation protocol) by an adapter.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., url, operation)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Invalid intent input.

    Examples:
        - Searching with an empty (or whitespace-only) query
        - Selecting an entry without a name

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "query", "message": "Must not be empty"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class UpstreamError(DomainError):
    """An upstream catalog call failed.

    This is the only failure kind the coordinator knows about: network
    errors, non-2xx responses and malformed bodies all end up here.

    Protocol mappings:
        - REST: 502 Bad Gateway
    """

    error_code: str = "UPSTREAM_ERROR"

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
        **context: Any,
    ) -> None:
        """Create an upstream error.

        Args:
            message: What went wrong
            url: URL of the failed request, if known
            status_code: HTTP status returned upstream, if any
            **context: Additional context
        """
        self.url = url
        self.status_code = status_code
        super().__init__(message, url=url, status_code=status_code, **context)


class NotFoundError(UpstreamError):
    """Upstream reported that the requested entity does not exist.

    Searching an unknown name is a normal outcome, so this stays a kind
    of UpstreamError: callers that only care about "the call failed"
    never need to distinguish it.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(
        self,
        resource: str,
        identifier: str | None = None,
        url: str | None = None,
        **context: Any,
    ) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "CatalogEntry")
            identifier: Resource identifier (e.g., entry name)
            url: URL that returned 404
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(
            message,
            url=url,
            status_code=404,
            resource=resource,
            identifier=identifier,
            **context,
        )


class InternalError(DomainError):
    """Internal error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"
