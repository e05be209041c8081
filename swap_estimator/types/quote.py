"""
Quote request and quoter backend definitions
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class QuoterBackend:
    """
    A quoter contract endpoint

    Attributes:
        name: Display name used in logs and results (e.g., "MixedQuoter")
        address: Contract address (0x-prefixed hex)
    """
    name: str
    address: str

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"QuoterBackend({self.name}, {self.address[:10]}...)"


@dataclass(frozen=True)
class SwapQuoteRequest:
    """
    Exact-input quote request

    Attributes:
        token_in: Input token address
        token_out: Output token address
        amount_in: Input amount in human units (e.g., "1.5")
        fee_tier: Pool fee in hundredths of a bip (resolver default if None)
        decimals_in: Input token decimals (resolver default if None)
        decimals_out: Output token decimals (resolver default if None)
    """
    token_in: str
    token_out: str
    amount_in: str
    fee_tier: Optional[int] = None
    decimals_in: Optional[int] = None
    decimals_out: Optional[int] = None

    def __str__(self) -> str:
        return f"Quote({self.amount_in} {self.token_in[:10]} -> {self.token_out[:10]})"


@dataclass(frozen=True)
class ExactOutputQuoteRequest:
    """
    Exact-output quote request (how much input is needed for amount_out)

    Attributes:
        token_in: Input token address
        token_out: Output token address
        amount_out: Desired output amount in human units
        fee_tier: Pool fee in hundredths of a bip (resolver default if None)
        decimals_in: Input token decimals (resolver default if None)
        decimals_out: Output token decimals (resolver default if None)
    """
    token_in: str
    token_out: str
    amount_out: str
    fee_tier: Optional[int] = None
    decimals_in: Optional[int] = None
    decimals_out: Optional[int] = None

    def __str__(self) -> str:
        return f"Quote({self.token_in[:10]} -> {self.amount_out} {self.token_out[:10]})"
