"""
Swap Estimator - PancakeSwap Infinity swap quotes on BSC

Provides:
- QuoteResolver: quotes through Mixed, Bin and CL quoters in priority order
- EstimateController: debounced estimates for live user input
- QuoterClient: one object wiring both to a web3.py chain client
"""

from .client import QuoterClient
from .types import (
    SwapQuoteRequest,
    ExactOutputQuoteRequest,
    SwapQuoteResult,
    ExactOutputResult,
    EstimateState,
    QuoterBackend,
    to_fixed_point,
    from_fixed_point,
)
from .errors import (
    ErrorCode,
    SwapEstimatorError,
    RpcError,
    InputError,
    BackendError,
    ExhaustedError,
    ConfigurationError,
)
from .infra.chain_client import ChainClient, Web3ChainClient
from .protocols.pancakeswap import QuoteResolver, QUOTER_BACKENDS
from .modules.estimate import EstimateController

__all__ = [
    # Client
    "QuoterClient",
    # Types
    "SwapQuoteRequest",
    "ExactOutputQuoteRequest",
    "SwapQuoteResult",
    "ExactOutputResult",
    "EstimateState",
    "QuoterBackend",
    "to_fixed_point",
    "from_fixed_point",
    # Errors
    "ErrorCode",
    "SwapEstimatorError",
    "RpcError",
    "InputError",
    "BackendError",
    "ExhaustedError",
    "ConfigurationError",
    # Components
    "ChainClient",
    "Web3ChainClient",
    "QuoteResolver",
    "QUOTER_BACKENDS",
    "EstimateController",
]

__version__ = "0.1.0"
