from typing import Optional

from Syntax.errors import Span, ValidationError

MAX_PREMISE_NUMBER = 0xFFFF


class NumberingContext:
    """Tracks the premise number expected next inside one section."""

    def __init__(self):
        self.current_number = 0

    def expect_next(self) -> int:
        return self.current_number + 1

    def advance(self, number: int, span: Optional[Span] = None) -> None:
        """Accept `number` as the next premise, or raise ValidationError if it is out of sequence."""
        expected = self.expect_next()
        if number != expected:
            raise ValidationError(f"Expected exercise number to be {expected}, got {number}", span)
        self.current_number = number

    def reset(self) -> None:
        self.current_number = 0
