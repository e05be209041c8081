"""
Error definitions for Swap Estimator
"""

from .exceptions import (
    ErrorCode,
    SwapEstimatorError,
    RpcError,
    InputError,
    BackendError,
    ExhaustedError,
    ConfigurationError,
    OperationNotSupported,
    DEFAULT_ERROR_MESSAGE,
    error_message,
)

__all__ = [
    "ErrorCode",
    "SwapEstimatorError",
    "RpcError",
    "InputError",
    "BackendError",
    "ExhaustedError",
    "ConfigurationError",
    "OperationNotSupported",
    "DEFAULT_ERROR_MESSAGE",
    "error_message",
]
