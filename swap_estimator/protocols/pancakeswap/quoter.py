"""
PancakeSwap Infinity Quote Resolver

Quotes single-pool swaps by asking the quoter contracts in priority order
(Mixed, then Bin, then Concentrated Liquidity) and keeping the first answer.
Quotes are not compared across quoters.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Tuple

from ...types.common import (
    MAX_UINT256,
    from_fixed_point,
    to_fixed_point,
    validate_decimals,
    validate_fee_tier,
)
from ...types.quote import QuoterBackend, SwapQuoteRequest, ExactOutputQuoteRequest
from ...types.result import SwapQuoteResult, ExactOutputResult
from ...errors import BackendError, ConfigurationError, ExhaustedError, InputError
from ...infra.tracing import CorrelationContext, log_with_correlation
from ...config import config as global_config

from .api import (
    QUOTER_BACKENDS,
    NO_PRICE_LIMIT,
    QUOTE_EXACT_INPUT_SINGLE,
    QUOTE_EXACT_OUTPUT_SINGLE,
)

if TYPE_CHECKING:
    from ...infra.chain_client import ChainClient

logger = logging.getLogger(__name__)


def decode_amount(output: Any) -> int:
    """
    Extract the quoted amount from a decoded quoter output

    Quoters return either a bare uint256 or a tuple whose first item is the
    amount (QuoterV2 style, followed by gas estimates).

    Raises:
        BackendError: Output has an unexpected shape or does not fit a uint256
    """
    if isinstance(output, (list, tuple)) and output:
        output = output[0]
    if isinstance(output, bool) or not isinstance(output, int) or not 0 <= output <= MAX_UINT256:
        raise BackendError(f"Unexpected quoter output: {output!r}")
    return output


class QuoteResolver:
    """
    Resolve swap quotes against PancakeSwap Infinity quoters on BSC

    resolve() and resolve_exact_output() never raise: input errors and
    backend failures come back in the result's error field.

    Usage:
        resolver = QuoteResolver(Web3ChainClient(rpc_url))
        result = await resolver.resolve(SwapQuoteRequest(WBNB, USDT, "1.5"))
        if result.is_success:
            print(result.amount_out, result.backend)
        else:
            print(result.error)
    """

    name = "pancakeswap"

    def __init__(
        self,
        chain_client: "ChainClient",
        backends: Optional[Iterable[QuoterBackend]] = None,
        default_fee_tier: Optional[int] = None,
        decimals: Optional[int] = None,
    ):
        """
        Initialize resolver

        Args:
            chain_client: Read-only contract call capability
            backends: Quoters in priority order (defaults to Mixed, Bin, CL)
            default_fee_tier: Fee tier for requests without one (uses config default)
            decimals: Token decimals for requests without them (uses config default)
        """
        self._chain_client = chain_client
        self._backends: Tuple[QuoterBackend, ...] = tuple(backends) if backends is not None else QUOTER_BACKENDS
        if not self._backends:
            raise ConfigurationError.invalid("backends", "at least one quoter backend is required")

        self._default_fee_tier = (
            default_fee_tier if default_fee_tier is not None
            else global_config.quoter.default_fee_tier
        )
        self._decimals = decimals if decimals is not None else global_config.quoter.token_decimals

        self._in_flight = 0
        self._last_error: Optional[str] = None

    @property
    def backends(self) -> Tuple[QuoterBackend, ...]:
        """Quoters in priority order"""
        return self._backends

    @property
    def default_fee_tier(self) -> int:
        return self._default_fee_tier

    @property
    def decimals(self) -> int:
        return self._decimals

    @property
    def is_loading(self) -> bool:
        """True while any resolution is running"""
        return self._in_flight > 0

    @property
    def last_error(self) -> Optional[str]:
        """Error of the most recently completed resolution (None on success)"""
        return self._last_error

    async def resolve(self, request: SwapQuoteRequest) -> SwapQuoteResult:
        """
        Quote an exact-input swap

        Args:
            request: Tokens, human-unit input amount and optional fee tier

        Returns:
            SwapQuoteResult with the output amount, or "0" and an error
        """
        with CorrelationContext("quote"):
            self._in_flight += 1
            try:
                backend, raw_amount_out, decimals_out = await self._resolve(
                    QUOTE_EXACT_INPUT_SINGLE,
                    request.token_in,
                    request.token_out,
                    "amountIn",
                    request.amount_in,
                    request.decimals_in,
                    request.decimals_out,
                    request.fee_tier,
                )
                result = SwapQuoteResult.success(
                    from_fixed_point(raw_amount_out, decimals_out),
                    backend=backend.name,
                    raw_amount_out=raw_amount_out,
                )
            except (InputError, ExhaustedError) as e:
                result = SwapQuoteResult.failed(e.message, error_code=e.code.value)
            finally:
                self._in_flight -= 1

        self._last_error = result.error
        return result

    async def resolve_exact_output(self, request: ExactOutputQuoteRequest) -> ExactOutputResult:
        """
        Quote the input required for an exact output amount

        Args:
            request: Tokens, human-unit desired output and optional fee tier

        Returns:
            ExactOutputResult with the required input, or "0" and an error
        """
        with CorrelationContext("quote"):
            self._in_flight += 1
            try:
                backend, raw_amount_in, decimals_in = await self._resolve(
                    QUOTE_EXACT_OUTPUT_SINGLE,
                    request.token_in,
                    request.token_out,
                    "amountOut",
                    request.amount_out,
                    request.decimals_out,
                    request.decimals_in,
                    request.fee_tier,
                )
                result = ExactOutputResult.success(
                    from_fixed_point(raw_amount_in, decimals_in),
                    backend=backend.name,
                    raw_amount_in=raw_amount_in,
                )
            except (InputError, ExhaustedError) as e:
                result = ExactOutputResult.failed(e.message, error_code=e.code.value)
            finally:
                self._in_flight -= 1

        self._last_error = result.error
        return result

    def _decimals_or_default(self, decimals: Optional[int]) -> int:
        return validate_decimals(decimals if decimals is not None else self._decimals)

    async def _resolve(
        self,
        function_name: str,
        token_in: str,
        token_out: str,
        amount_key: str,
        amount: str,
        amount_decimals: Optional[int],
        quoted_decimals: Optional[int],
        fee_tier: Optional[int],
    ) -> Tuple[QuoterBackend, int, int]:
        """
        Validate, scale and run the fallback chain

        Args:
            amount_key: ABI field carrying the known amount ("amountIn" or "amountOut")
            amount_decimals: Decimals of the known amount's token
            quoted_decimals: Decimals of the quoted amount's token

        Returns:
            (winning backend, quoted fixed-point amount, quoted_decimals resolved)

        Raises:
            InputError: Amount is invalid or zero, or decimals or fee tier is invalid (no backend is called)
            ExhaustedError: Every backend failed
        """
        try:
            fee = validate_fee_tier(fee_tier if fee_tier is not None else self._default_fee_tier)
            scale = self._decimals_or_default(amount_decimals)
            quoted_scale = self._decimals_or_default(quoted_decimals)
            raw_amount = to_fixed_point(amount, scale)
            if raw_amount == 0:
                raise InputError.zero_amount(str(amount))
        except InputError as e:
            log_with_correlation(
                logging.WARNING,
                f"Rejected input: {e.message}",
                function_name,
                log=logger,
            )
            raise

        args = {
            "tokenIn": token_in,
            "tokenOut": token_out,
            amount_key: raw_amount,
            "sqrtPriceLimitX96": NO_PRICE_LIMIT,
            "fee": fee,
        }
        backend, quoted = await self._call_backends(function_name, args)
        return backend, quoted, quoted_scale

    async def _call_backends(self, function_name: str, args: Dict[str, Any]) -> Tuple[QuoterBackend, int]:
        """
        Try each backend in order until one answers

        Raises:
            ExhaustedError: Every backend failed; carries the last failure only
        """
        total = len(self._backends)
        last_error: Optional[BackendError] = None

        for attempt, backend in enumerate(self._backends, start=1):
            log_with_correlation(
                logging.DEBUG,
                f"Trying {backend.name} ({backend.address})",
                function_name,
                attempt,
                total,
                log=logger,
                backend=backend.name,
            )
            try:
                output = await self._chain_client.call(backend.address, function_name, args)
                raw_amount = decode_amount(output)
            except Exception as e:
                last_error = BackendError.from_exception(backend.name, e)
                next_step = "trying next quoter" if attempt < total else "no quoters left"
                log_with_correlation(
                    logging.WARNING,
                    f"{backend.name} failed, {next_step}: {last_error.message}",
                    function_name,
                    attempt,
                    total,
                    log=logger,
                    backend=backend.name,
                )
                continue

            log_with_correlation(
                logging.INFO,
                f"{backend.name} success",
                function_name,
                attempt,
                total,
                log=logger,
                backend=backend.name,
            )
            return backend, raw_amount

        log_with_correlation(
            logging.ERROR,
            f"All {total} quoters failed: {last_error.message}",
            function_name,
            log=logger,
        )
        raise ExhaustedError.from_last(last_error, total)

    def __repr__(self) -> str:
        names = ", ".join(b.name for b in self._backends)
        return f"QuoteResolver(backends=[{names}])"
