"""Error type shared by the data structures, and a checked integer division."""

DEFAULT_MESSAGE = "No Error Set"


class StructureError(Exception):
    """Raised when a data structure operation cannot be carried out."""

    def __init__(self, message: str = DEFAULT_MESSAGE) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def divide(a: int, b: int) -> float:
    """Divide two integers, truncating toward zero; raise on a zero divisor."""
    if b == 0:
        raise StructureError("myerror")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return float(quotient)