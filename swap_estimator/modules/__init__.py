"""
Functional modules for QuoterClient

Provides:
- EstimateController: Debounced, supersession-safe swap estimates
"""

from .estimate import EstimateController, EstimateListener

__all__ = [
    "EstimateController",
    "EstimateListener",
]
