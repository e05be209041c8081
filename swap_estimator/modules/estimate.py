"""
Estimate Module

Debounced swap estimates for interactive input. Each observe() call starts a
new generation: a pending timer for an older input is cancelled outright, and
a resolution that is already running is left alone but its result is
dropped on arrival if a newer input has been observed since.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Callable, List, Optional, Set

from ..types import EstimateState, SwapQuoteRequest, SwapQuoteResult, is_positive_amount
from ..errors import ConfigurationError, error_message
from ..config import config as global_config

if TYPE_CHECKING:
    from ..protocols.pancakeswap.quoter import QuoteResolver

logger = logging.getLogger(__name__)

EstimateListener = Callable[[EstimateState], None]


class EstimateController:
    """
    Debounced estimate for a changing (token_in, token_out, amount_in) triple

    Must be driven from a running asyncio event loop.

    Usage:
        controller = EstimateController(resolver, delay=0.3)
        controller.add_listener(lambda state: render(state))

        controller.observe(WBNB, USDT, "1")
        controller.observe(WBNB, USDT, "1.5")   # cancels the "1" timer
        await controller.wait_settled()
        print(controller.estimate.amount_out)
    """

    def __init__(
        self,
        resolver: "QuoteResolver",
        delay: Optional[float] = None,
        fee_tier: Optional[int] = None,
    ):
        """
        Initialize controller

        Args:
            resolver: Quote resolver (anything with an async resolve(request))
            delay: Debounce window in seconds (uses config default if not provided)
            fee_tier: Fee tier for every request (resolver default if None)
        """
        delay = delay if delay is not None else global_config.estimate.debounce_seconds
        if delay < 0:
            raise ConfigurationError.invalid("delay", f"must be non-negative, got {delay}")

        self._resolver = resolver
        self._delay = delay
        self._fee_tier = fee_tier

        self._generation = 0
        self._timer: Optional[asyncio.TimerHandle] = None
        self._tasks: Set[asyncio.Task] = set()
        self._state = EstimateState()
        self._listeners: List[EstimateListener] = []
        self._settled = asyncio.Event()
        self._settled.set()

    @property
    def state(self) -> EstimateState:
        """Latest published snapshot"""
        return self._state

    @property
    def estimate(self) -> Optional[SwapQuoteResult]:
        return self._state.estimate

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def generation(self) -> int:
        """Number of the most recent observe() call"""
        return self._generation

    @property
    def has_pending_timer(self) -> bool:
        return self._timer is not None

    def add_listener(self, listener: EstimateListener) -> None:
        """Register a callback invoked with every published state"""
        self._listeners.append(listener)

    def remove_listener(self, listener: EstimateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def observe(self, token_in: str, token_out: str, amount_in: str) -> EstimateState:
        """
        Feed the latest input triple

        Empty fields or a zero/negative amount clear the estimate immediately.
        Anything else is resolved after the debounce window unless a newer
        triple arrives first.

        Returns:
            Current snapshot (the new estimate arrives later through listeners
            or wait_settled())

        Raises:
            RuntimeError: No running event loop
        """
        loop = asyncio.get_running_loop()

        self._generation += 1
        generation = self._generation
        self._cancel_timer()

        if not token_in or not token_out or not is_positive_amount(amount_in):
            logger.debug(f"Estimate idle (generation {generation}): incomplete input")
            self._publish(EstimateState(estimate=None, is_loading=False))
            self._settled.set()
            return self._state

        request = SwapQuoteRequest(
            token_in=token_in,
            token_out=token_out,
            amount_in=amount_in,
            fee_tier=self._fee_tier,
        )
        self._settled.clear()
        self._timer = loop.call_later(self._delay, self._start, generation, request)
        logger.debug(f"Estimate scheduled (generation {generation}) in {self._delay}s: {request}")
        return self._state

    async def wait_settled(self, timeout: Optional[float] = None) -> EstimateState:
        """
        Wait until the latest input is idle or its result is published

        Raises:
            asyncio.TimeoutError: Not settled within timeout
        """
        await asyncio.wait_for(self._settled.wait(), timeout)
        return self._state

    def close(self) -> None:
        """Cancel the pending timer and drop results of running resolutions"""
        self._generation += 1
        self._cancel_timer()
        if self._state.is_loading:
            self._publish(replace(self._state, is_loading=False))
        self._settled.set()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _start(self, generation: int, request: SwapQuoteRequest) -> None:
        """Timer callback: begin resolving if the input is still current"""
        self._timer = None
        if generation != self._generation:
            return

        self._publish(replace(self._state, is_loading=True))
        task = asyncio.get_running_loop().create_task(self._resolve(generation, request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _resolve(self, generation: int, request: SwapQuoteRequest) -> None:
        try:
            result = await self._resolver.resolve(request)
        except Exception as e:
            logger.exception(f"Resolver raised for {request}")
            result = SwapQuoteResult.failed(error_message(e))

        if generation != self._generation:
            logger.debug(
                f"Discarding superseded estimate (generation {generation}, current {self._generation})"
            )
            return

        self._publish(EstimateState(estimate=result, is_loading=False))
        self._settled.set()

    def _publish(self, state: EstimateState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("Estimate listener failed")

    def __repr__(self) -> str:
        return f"EstimateController(delay={self._delay}, generation={self._generation})"
