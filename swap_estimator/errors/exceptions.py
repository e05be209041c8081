"""
Exception definitions for Swap Estimator
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """
    Unified error codes for quote operations

    1xxx - RPC errors
    2xxx - Input errors
    3xxx - Quoter backend errors
    7xxx - Operation errors
    9xxx - Configuration errors
    """
    # RPC errors (recoverable)
    RPC_CONNECTION_FAILED = "1001"
    RPC_TIMEOUT = "1002"
    RPC_RATE_LIMITED = "1003"
    RPC_CALL_FAILED = "1004"

    # Input errors (terminal)
    INPUT_INVALID_AMOUNT = "2001"
    INPUT_NON_POSITIVE_AMOUNT = "2002"
    INPUT_INVALID_FEE = "2003"
    INPUT_INVALID_DECIMALS = "2004"

    # Quoter backend errors
    BACKEND_FAILED = "3001"
    BACKENDS_EXHAUSTED = "3002"

    # Operation errors
    OPERATION_NOT_SUPPORTED = "7001"

    # Configuration errors
    CONFIG_INVALID = "9001"
    CONFIG_MISSING = "9002"


class SwapEstimatorError(Exception):
    """
    Base exception for all swap estimator errors

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        recoverable: Whether another attempt (or another backend) might succeed
        original_error: The underlying exception if any
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        recoverable: bool = False,
        original_error: Optional[Exception] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.recoverable = recoverable
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"

    @property
    def should_retry(self) -> bool:
        """Indicate if the operation should be retried"""
        return self.recoverable


class RpcError(SwapEstimatorError):
    """
    RPC-related errors - typically recoverable

    Raised when:
    - Connection to RPC endpoint fails
    - Request times out
    - eth_call fails at the transport level
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.RPC_CONNECTION_FAILED,
        original_error: Optional[Exception] = None,
        endpoint: Optional[str] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=True,
            original_error=original_error,
            details={"endpoint": endpoint} if endpoint else None,
        )
        self.endpoint = endpoint

    @classmethod
    def connection_failed(cls, endpoint: str, error: Exception = None) -> "RpcError":
        return cls(
            f"Failed to connect to RPC endpoint: {endpoint}",
            ErrorCode.RPC_CONNECTION_FAILED,
            original_error=error,
            endpoint=endpoint,
        )

    @classmethod
    def timeout(cls, endpoint: str, timeout_seconds: float) -> "RpcError":
        return cls(
            f"RPC request timed out after {timeout_seconds}s",
            ErrorCode.RPC_TIMEOUT,
            endpoint=endpoint,
        )

    @classmethod
    def call_failed(cls, contract_address: str, error: Exception, endpoint: Optional[str] = None) -> "RpcError":
        return cls(
            f"eth_call to {contract_address} failed: {error}",
            ErrorCode.RPC_CALL_FAILED,
            original_error=error,
            endpoint=endpoint,
        )


class InputError(SwapEstimatorError):
    """
    Invalid quote input - terminal, never retried

    Raised when:
    - Amount string cannot be parsed as a number
    - Amount is zero, negative, NaN, infinite or beyond a uint256
    - Fee tier does not fit a uint24
    - Token decimals are out of range
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INPUT_INVALID_AMOUNT,
        value: Optional[str] = None,
    ):
        super().__init__(
            message,
            code,
            recoverable=False,
            details={"value": value},
        )
        self.value = value

    @classmethod
    def invalid_amount(cls, value: str) -> "InputError":
        return cls(f"Invalid amount: {value!r} is not a number", value=value)

    @classmethod
    def amount_too_large(cls, value: str) -> "InputError":
        return cls(f"Invalid amount: {value!r} is too large", value=value)

    @classmethod
    def negative_amount(cls, value: str) -> "InputError":
        return cls(
            f"Invalid amount: {value!r} must be non-negative",
            ErrorCode.INPUT_NON_POSITIVE_AMOUNT,
            value=value,
        )

    @classmethod
    def zero_amount(cls, value: str) -> "InputError":
        return cls(
            f"Invalid amount: {value!r} must be greater than zero",
            ErrorCode.INPUT_NON_POSITIVE_AMOUNT,
            value=value,
        )

    @classmethod
    def invalid_decimals(cls, decimals: int) -> "InputError":
        return cls(
            f"Invalid token decimals: {decimals!r}",
            ErrorCode.INPUT_INVALID_DECIMALS,
            value=str(decimals),
        )

    @classmethod
    def invalid_fee(cls, fee: int) -> "InputError":
        return cls(
            f"Invalid fee tier: {fee!r} (expected 1..16777215)",
            ErrorCode.INPUT_INVALID_FEE,
            value=str(fee),
        )


class BackendError(SwapEstimatorError):
    """
    A single quoter backend failed - recoverable by trying the next backend

    Raised when:
    - The quoter contract reverts (no pool, no liquidity)
    - The RPC call to the quoter fails
    - The decoded output has an unexpected shape
    """

    def __init__(
        self,
        message: str,
        backend: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            ErrorCode.BACKEND_FAILED,
            recoverable=True,
            original_error=original_error,
            details={"backend": backend},
        )
        self.backend = backend

    @classmethod
    def reverted(cls, contract_address: str, reason: str, error: Optional[Exception] = None) -> "BackendError":
        return cls(
            f"Quoter {contract_address} reverted: {reason}",
            backend=contract_address,
            original_error=error,
        )

    @classmethod
    def from_exception(cls, backend: str, error: Exception) -> "BackendError":
        return cls(error_message(error), backend=backend, original_error=error)


class ExhaustedError(SwapEstimatorError):
    """
    Every quoter backend failed - not recoverable

    The message is the last backend's failure message only.
    """

    def __init__(
        self,
        message: str,
        attempts: int = 0,
        last_backend: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message,
            ErrorCode.BACKENDS_EXHAUSTED,
            recoverable=False,
            original_error=original_error,
            details={"attempts": attempts, "last_backend": last_backend},
        )
        self.attempts = attempts
        self.last_backend = last_backend

    @classmethod
    def from_last(cls, last: BackendError, attempts: int) -> "ExhaustedError":
        return cls(
            last.message,
            attempts=attempts,
            last_backend=last.backend,
            original_error=last.original_error,
        )


class ConfigurationError(SwapEstimatorError):
    """
    Configuration-related errors

    Raised when:
    - Required configuration is missing
    - Configuration values are invalid
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
    ):
        super().__init__(message, code, recoverable=False)

    @classmethod
    def missing(cls, param: str) -> "ConfigurationError":
        return cls(f"Missing required configuration: {param}", ErrorCode.CONFIG_MISSING)

    @classmethod
    def invalid(cls, param: str, reason: str) -> "ConfigurationError":
        return cls(f"Invalid configuration '{param}': {reason}", ErrorCode.CONFIG_INVALID)


class OperationNotSupported(SwapEstimatorError):
    """
    Operation not supported by the quoter contracts

    Raised when:
    - A function name is not part of the quoter ABI
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
    ):
        super().__init__(
            message,
            ErrorCode.OPERATION_NOT_SUPPORTED,
            recoverable=False,
            details={"operation": operation},
        )
        self.operation = operation

    @classmethod
    def unknown_function(cls, function_name: str) -> "OperationNotSupported":
        return cls(
            f"Function '{function_name}' is not part of the quoter ABI",
            operation=function_name,
        )


DEFAULT_ERROR_MESSAGE = "Failed to get quote"


def error_message(error: BaseException) -> str:
    """
    Human-readable message for any exception

    Library errors expose their bare message (without the code prefix);
    other exceptions use str(). Empty messages fall back to a generic one.
    """
    if isinstance(error, SwapEstimatorError):
        message = error.message
    else:
        message = str(error)
    return message or DEFAULT_ERROR_MESSAGE
