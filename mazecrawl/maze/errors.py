class InvalidDimension(ValueError):
    """Raised when a maze size is not an odd integer of at least ``MIN_SIZE``."""

    def __init__(self, size, message: str, code: str = "size"):
        super().__init__(message)
        self.size = size
        self.message = message
        self.code = code


__all__ = ["InvalidDimension"]
