from typing import List, Optional, Union

from pydantic import BaseModel, Field


class OperationResult(BaseModel):
    """Outcome of a single operation evaluated by the demonstration run.

    Attributes:
        operation (str): Name of the operation, e.g. "gcd".
        arguments (List[int]): Arguments the operation was called with.
        result (Union[bool, int]): Value returned by the operation.
        expected (Optional[Union[bool, int]]): Known correct value, if any.
    """
    operation: str = Field(..., min_length=1, description="Name of the operation")
    arguments: List[int] = Field(default_factory=list, description="Call arguments")
    result: Union[bool, int] = Field(..., description="Returned value")
    expected: Optional[Union[bool, int]] = Field(None, description="Expected value")

    @property
    def matches_expected(self) -> bool:
        """True when no expectation is set or the result equals it."""
        if self.expected is None:
            return True
        return type(self.result) is type(self.expected) and self.result == self.expected

    def describe(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.operation}({args}) = {self.result}"
