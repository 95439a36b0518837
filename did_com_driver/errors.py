"""Custom exception classes for the did:com driver."""

class DriverError(Exception):
    """Base class for driver-specific errors."""
    def __init__(self, message: str, error_code: str = "DriverError"):
        self.message = message
        self.error_code = error_code
        super().__init__(f"[{error_code}] {message}")

class ConfigurationError(DriverError):
    """Error related to configuration or environment setup."""
    def __init__(self, message: str):
        super().__init__(message, error_code="ConfigurationError")

class InvalidInputError(DriverError):
    """Error for input that is not a DID at all."""
    def __init__(self, message: str):
        super().__init__(message, error_code="InvalidInput")

class ResolutionError(DriverError):
    """Raised when a did:com DID could not be resolved."""
    def __init__(self, message: str, error_code: str = "ResolutionError"):
        super().__init__(message, error_code=error_code)

class TransportError(ResolutionError):
    """The Commercio network could not be reached or answered with an error status."""
    def __init__(self, message: str):
        super().__init__(message, error_code="TransportFailure")

class DecodeError(ResolutionError):
    """The identity record returned by the network is malformed."""
    def __init__(self, message: str):
        super().__init__(message, error_code="DecodeFailure")
