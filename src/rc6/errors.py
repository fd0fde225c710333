"""Exceptions raised by the RC6 package."""


class RC6Error(Exception):
    """Base class for all RC6 errors."""


class InvalidInputLength(RC6Error, ValueError):
    """Input length is not usable for the requested operation.

    Raised by decrypt() for ciphertext that is not a whole number of
    blocks, and by the single-block methods for anything but 16 bytes.
    """

    def __init__(
        self,
        length: int,
        block_size: int = 16,
        what: str = "Ciphertext",
        exact: bool = False,
    ):
        self.length = length
        self.block_size = block_size
        if exact:
            message = f"{what} must be {block_size} bytes, got {length}"
        else:
            message = (
                f"{what} length must be a multiple of {block_size} bytes, "
                f"got {length}"
            )
        super().__init__(message)


class PaddingError(RC6Error, ValueError):
    """Recovered plaintext does not carry valid padding."""
