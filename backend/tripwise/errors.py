"""Error taxonomy for the recommendation pipeline.

Validation errors are fatal and surface as HTTP 400 before any provider is
called. Provider errors are recoverable and end up in the response's
``errors`` list. Catalog / profile configuration errors indicate a broken
catalog and abort the request.
"""


class TripWiseError(Exception):
    """Base class for all application errors."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class ValidationError(TripWiseError):
    """Client input cannot be processed."""

    code = "VALIDATION_ERROR"


class RequestValidationError(ValidationError):
    """Required request fields are missing or malformed."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []

    def to_dict(self) -> dict:
        d = super().to_dict()
        if self.missing:
            d["missing"] = self.missing
        return d


class ThemeResolutionError(ValidationError):
    code = "INVALID_THEME"


class InvalidThemeError(ThemeResolutionError):
    code = "INVALID_THEME"


class InvalidSubThemeError(ThemeResolutionError):
    code = "INVALID_SUB_THEME"


class ProfileNotFoundError(ThemeResolutionError):
    code = "PROFILE_NOT_FOUND"


class CatalogError(TripWiseError):
    """A catalog entry violates a profile invariant."""

    code = "CATALOG_ERROR"


class ProfileConfigurationError(TripWiseError):
    """An adapter received a structurally invalid profile."""

    code = "PROFILE_CONFIGURATION_ERROR"


class ProviderError(TripWiseError):
    """An external provider call failed."""

    code = "EXTERNAL_API_ERROR"

    def __init__(self, service: str, message: str):
        super().__init__(f"{service} API error: {message}")
        self.service = service
