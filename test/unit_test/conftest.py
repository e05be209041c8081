"""
Shared helpers for unit tests

Provides an in-memory chain client so resolver and estimate tests run
without an RPC endpoint.
"""

import sys
import asyncio
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))


# Test tokens on BSC
WBNB = "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c"
USDT = "0x55d398326f99059fF775485246999027B3197955"

ONE = 10**18


class FakeChainClient:
    """
    ChainClient double keyed by contract address

    Each outcome is an int (returned), an exception (raised) or a callable
    taking the call args and returning either. Addresses without an outcome
    revert.
    """

    def __init__(self, outcomes=None, delay: float = 0.0):
        self.outcomes = dict(outcomes or {})
        self.delay = delay
        self.calls = []

    async def call(self, contract_address, function_name, args):
        self.calls.append((contract_address, function_name, dict(args)))
        if self.delay:
            await asyncio.sleep(self.delay)

        outcome = self.outcomes.get(contract_address, RuntimeError("execution reverted"))
        if not isinstance(outcome, BaseException) and callable(outcome):
            outcome = outcome(args)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def called_addresses(self):
        return [c[0] for c in self.calls]

    async def close(self):
        pass


def doubling_quoter(args):
    """Quote twice the input so results can be told apart"""
    return args.get("amountIn", args.get("amountOut")) * 2


