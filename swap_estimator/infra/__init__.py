"""
Infrastructure layer for Swap Estimator

Provides:
- ChainClient: Read-only contract call capability
- Web3ChainClient: ChainClient over web3.py AsyncWeb3
- CorrelationContext: Correlation-ID scoping for quote logs
"""

from .tracing import (
    CorrelationContext,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
    log_with_correlation,
)
from .chain_client import ChainClient, Web3ChainClient, create_async_web3

__all__ = [
    # Tracing
    "CorrelationContext",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    "log_with_correlation",
    # Chain access
    "ChainClient",
    "Web3ChainClient",
    "create_async_web3",
]
