"""
QuoterClient - Unified entry point for swap estimates

Wires a chain client, the PancakeSwap quote resolver and the debounced
estimate controller together.
"""

from __future__ import annotations

import logging
from typing import Optional

from .infra.chain_client import ChainClient, Web3ChainClient
from .protocols.pancakeswap.quoter import QuoteResolver
from .modules.estimate import EstimateController
from .types import (
    SwapQuoteRequest,
    ExactOutputQuoteRequest,
    SwapQuoteResult,
    ExactOutputResult,
    EstimateState,
)
from .errors import ConfigurationError
from .config import config as global_config

logger = logging.getLogger(__name__)


class QuoterClient:
    """
    Swap estimate client

    Provides:
    - resolve(...): single-shot exact-input quote
    - resolve_exact_output(...): single-shot exact-output quote
    - observe(...): debounced estimate for live input
    - estimates: the underlying EstimateController (listeners, wait_settled)

    Usage:
        async with QuoterClient(rpc_url="https://bsc-dataseed.binance.org") as client:
            result = await client.resolve(WBNB, USDT, "1.5")
            print(result.amount_out, result.error)

            client.observe(WBNB, USDT, "2")
            state = await client.estimates.wait_settled()
    """

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        chain_client: Optional[ChainClient] = None,
        debounce_seconds: Optional[float] = None,
        default_fee_tier: Optional[int] = None,
    ):
        """
        Initialize QuoterClient

        Args:
            rpc_url: BSC RPC URL (uses BSC_RPC_URL if not provided)
            chain_client: Pre-built chain client (skips Web3ChainClient creation)
            debounce_seconds: Debounce window for observe() (uses config default if not provided)
            default_fee_tier: Fee tier for requests without one (uses config default if not provided)

        Raises:
            ConfigurationError: Neither chain_client nor an RPC URL is available
        """
        self._owns_chain_client = chain_client is None
        if chain_client is None:
            rpc_url = rpc_url or global_config.chain.bsc_rpc_url
            if not rpc_url:
                raise ConfigurationError.missing("BSC_RPC_URL")
            chain_client = Web3ChainClient(rpc_url)

        self._chain_client = chain_client
        self._resolver = QuoteResolver(chain_client, default_fee_tier=default_fee_tier)
        self._estimates: Optional[EstimateController] = None
        self._debounce_seconds = debounce_seconds

    @property
    def chain_client(self) -> ChainClient:
        return self._chain_client

    @property
    def resolver(self) -> QuoteResolver:
        return self._resolver

    @property
    def estimates(self) -> EstimateController:
        """
        Debounced estimate controller

        Created lazily so it binds to the running event loop.
        """
        if self._estimates is None:
            self._estimates = EstimateController(self._resolver, delay=self._debounce_seconds)
        return self._estimates

    async def resolve(
        self,
        token_in: str,
        token_out: str,
        amount_in: str,
        fee_tier: Optional[int] = None,
    ) -> SwapQuoteResult:
        """Quote an exact-input swap; never raises"""
        return await self._resolver.resolve(
            SwapQuoteRequest(token_in, token_out, amount_in, fee_tier=fee_tier)
        )

    async def resolve_exact_output(
        self,
        token_in: str,
        token_out: str,
        amount_out: str,
        fee_tier: Optional[int] = None,
    ) -> ExactOutputResult:
        """Quote the input needed for an exact output; never raises"""
        return await self._resolver.resolve_exact_output(
            ExactOutputQuoteRequest(token_in, token_out, amount_out, fee_tier=fee_tier)
        )

    def observe(self, token_in: str, token_out: str, amount_in: str) -> EstimateState:
        """Feed live input to the debounced estimate"""
        return self.estimates.observe(token_in, token_out, amount_in)

    async def close(self):
        """Stop pending estimates and release the chain client if we created it"""
        if self._estimates is not None:
            self._estimates.close()
        if self._owns_chain_client:
            await self._chain_client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return f"QuoterClient(resolver={self._resolver!r})"
