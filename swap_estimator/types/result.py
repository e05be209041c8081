"""
Result type definitions for quotes and estimates
"""

from dataclasses import dataclass
from typing import Optional

from .common import ZERO_AMOUNT


@dataclass(frozen=True)
class SwapQuoteResult:
    """
    Exact-input quote result

    Exactly one of amount_out or error is meaningful. On failure amount_out
    is "0" so display code always has a value.

    Attributes:
        amount_out: Output amount in human units
        error: Error message if every backend failed or input was invalid
        error_code: Error code for programmatic handling
        backend: Name of the quoter that answered
        raw_amount_out: Output amount as returned on-chain (fixed point)
    """
    amount_out: str = ZERO_AMOUNT
    error: Optional[str] = None
    error_code: Optional[str] = None
    backend: Optional[str] = None
    raw_amount_out: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failed(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, amount_out: str, backend: Optional[str] = None, raw_amount_out: Optional[int] = None) -> "SwapQuoteResult":
        """Create successful result"""
        return cls(amount_out=amount_out, backend=backend, raw_amount_out=raw_amount_out)

    @classmethod
    def failed(cls, error: str, error_code: Optional[str] = None) -> "SwapQuoteResult":
        """Create failed result"""
        return cls(amount_out=ZERO_AMOUNT, error=error, error_code=error_code)

    def __str__(self) -> str:
        if self.is_success:
            return f"SwapQuoteResult({self.amount_out} via {self.backend})"
        return f"SwapQuoteResult(error={self.error})"


@dataclass(frozen=True)
class ExactOutputResult:
    """
    Exact-output quote result

    Attributes:
        amount_in: Required input amount in human units ("0" on failure)
        error: Error message if every backend failed or input was invalid
        error_code: Error code for programmatic handling
        backend: Name of the quoter that answered
        raw_amount_in: Required input as returned on-chain (fixed point)
    """
    amount_in: str = ZERO_AMOUNT
    error: Optional[str] = None
    error_code: Optional[str] = None
    backend: Optional[str] = None
    raw_amount_in: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failed(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, amount_in: str, backend: Optional[str] = None, raw_amount_in: Optional[int] = None) -> "ExactOutputResult":
        """Create successful result"""
        return cls(amount_in=amount_in, backend=backend, raw_amount_in=raw_amount_in)

    @classmethod
    def failed(cls, error: str, error_code: Optional[str] = None) -> "ExactOutputResult":
        """Create failed result"""
        return cls(amount_in=ZERO_AMOUNT, error=error, error_code=error_code)

    def __str__(self) -> str:
        if self.is_success:
            return f"ExactOutputResult({self.amount_in} via {self.backend})"
        return f"ExactOutputResult(error={self.error})"


@dataclass(frozen=True)
class EstimateState:
    """
    Snapshot of a debounced estimate

    Attributes:
        estimate: Latest settled result, None when idle or not yet settled
        is_loading: True while the current input is being resolved
    """
    estimate: Optional[SwapQuoteResult] = None
    is_loading: bool = False

    @property
    def error(self) -> Optional[str]:
        """Error of the settled estimate, if any"""
        return self.estimate.error if self.estimate is not None else None

    @property
    def amount_out(self) -> Optional[str]:
        """Amount of the settled estimate, if any"""
        return self.estimate.amount_out if self.estimate is not None else None
