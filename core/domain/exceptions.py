"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class AuthorizationError(DomainException):
    """Raised when the caller is not the shop owner."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


class CatalogException(DomainException):
    """Base exception for catalog-related errors."""

    pass


class ProductValidationError(CatalogException):
    """Raised when submitted product data is missing or malformed."""

    def __init__(self, message: str = "Invalid product data"):
        super().__init__(message, code="VALIDATION_ERROR")


class MissingProductIdentifierError(CatalogException):
    """Raised when an edit or delete is submitted without a product id."""

    def __init__(self, message: str = "Missing product identifier"):
        super().__init__(message, code="MISSING_PRODUCT_ID")


class ProductNotFoundError(CatalogException):
    """Raised when a product is not found."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(message, code="PRODUCT_NOT_FOUND")


class PersistenceError(CatalogException):
    """Raised when the store rejects a write. Carries the store's message."""

    def __init__(self, message: str = "The store rejected the change"):
        super().__init__(message, code="PERSISTENCE_ERROR")


class SubmissionInProgressError(CatalogException):
    """Raised when a form is submitted while its previous submit is in flight."""

    def __init__(self, message: str = "A submission is already in progress"):
        super().__init__(message, code="SUBMISSION_IN_PROGRESS")


class AssetException(DomainException):
    """Base exception for asset-related errors."""

    pass


class UploadError(AssetException):
    """Raised when the blob store rejects or fails an upload."""

    def __init__(self, message: str = "Upload failed"):
        super().__init__(message, code="UPLOAD_ERROR")
