
class RentalApiUpstreamError(RuntimeError):
    """Raised when the rental API fails (timeouts, network errors, error status codes)."""
    pass


class RentalApiContractError(RuntimeError):
    """Raised when the rental API answers with a body the adapter cannot map."""
    pass
