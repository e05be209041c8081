"""
Test Errors Module

Tests for swap_estimator.errors package.
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))


def test_error_code():
    """Test ErrorCode enum"""
    from swap_estimator.errors import ErrorCode

    print("Testing ErrorCode...")

    assert ErrorCode.RPC_CONNECTION_FAILED.value == "1001"
    assert ErrorCode.RPC_CALL_FAILED.value == "1004"
    assert ErrorCode.INPUT_INVALID_AMOUNT.value == "2001"
    assert ErrorCode.BACKENDS_EXHAUSTED.value == "3002"
    assert ErrorCode.CONFIG_MISSING.value == "9002"

    print("  ErrorCode: PASSED")


def test_swap_estimator_error():
    """Test SwapEstimatorError base class"""
    from swap_estimator.errors import SwapEstimatorError, ErrorCode

    print("Testing SwapEstimatorError...")

    error = SwapEstimatorError(
        message="Test error",
        code=ErrorCode.RPC_CONNECTION_FAILED,
        recoverable=True,
    )

    # __str__ returns "[code] message" format
    assert str(error) == "[1001] Test error"
    assert error.message == "Test error"
    assert error.should_retry
    assert error.details == {}

    print("  SwapEstimatorError: PASSED")


def test_rpc_error():
    """Test RpcError exception"""
    from swap_estimator.errors import RpcError, ErrorCode

    print("Testing RpcError...")

    error1 = RpcError.connection_failed("https://rpc.example.com")
    assert error1.code == ErrorCode.RPC_CONNECTION_FAILED
    assert error1.recoverable
    assert error1.endpoint == "https://rpc.example.com"

    error2 = RpcError.timeout("https://rpc.example.com", 30.0)
    assert error2.code == ErrorCode.RPC_TIMEOUT
    assert "30.0" in error2.message

    cause = ConnectionError("reset by peer")
    error3 = RpcError.call_failed("0xQuoter", cause, endpoint="https://rpc.example.com")
    assert error3.code == ErrorCode.RPC_CALL_FAILED
    assert error3.message == "eth_call to 0xQuoter failed: reset by peer"
    assert error3.original_error is cause
    assert error3.details == {"endpoint": "https://rpc.example.com"}

    print("  RpcError: PASSED")


def test_input_error():
    """Test InputError exception"""
    from swap_estimator.errors import InputError, ErrorCode

    print("Testing InputError...")

    error1 = InputError.invalid_amount("abc")
    assert error1.code == ErrorCode.INPUT_INVALID_AMOUNT
    assert not error1.recoverable
    assert error1.value == "abc"
    assert "'abc'" in error1.message

    error2 = InputError.negative_amount("-1")
    assert error2.code == ErrorCode.INPUT_NON_POSITIVE_AMOUNT
    assert InputError.zero_amount("0").code == ErrorCode.INPUT_NON_POSITIVE_AMOUNT

    error3 = InputError.invalid_fee(0)
    assert error3.code == ErrorCode.INPUT_INVALID_FEE
    assert error3.value == "0"

    error4 = InputError.invalid_decimals(99)
    assert error4.code == ErrorCode.INPUT_INVALID_DECIMALS

    error5 = InputError.amount_too_large("1e400")
    assert error5.code == ErrorCode.INPUT_INVALID_AMOUNT

    print("  InputError: PASSED")


def test_backend_error():
    """Test BackendError exception"""
    from swap_estimator.errors import BackendError, SwapEstimatorError, ErrorCode

    print("Testing BackendError...")

    error1 = BackendError.reverted("0xQuoter", "execution reverted")
    assert error1.code == ErrorCode.BACKEND_FAILED
    assert error1.recoverable
    assert error1.message == "Quoter 0xQuoter reverted: execution reverted"

    # Foreign exceptions keep their message as-is
    cause = ValueError("no pool")
    error2 = BackendError.from_exception("BinQuoter", cause)
    assert error2.message == "no pool"
    assert error2.backend == "BinQuoter"
    assert error2.original_error is cause

    # Library exceptions lose the code prefix
    wrapped = SwapEstimatorError("inner", ErrorCode.RPC_TIMEOUT)
    assert BackendError.from_exception("CLQuoter", wrapped).message == "inner"

    # Empty messages fall back to the generic one
    assert BackendError.from_exception("CLQuoter", RuntimeError()).message == "Failed to get quote"

    print("  BackendError: PASSED")


def test_exhausted_error():
    """Test ExhaustedError carries only the last failure"""
    from swap_estimator.errors import BackendError, ExhaustedError, ErrorCode

    print("Testing ExhaustedError...")

    last = BackendError("m3", backend="CLQuoter")
    error = ExhaustedError.from_last(last, attempts=3)

    assert error.message == "m3"
    assert error.code == ErrorCode.BACKENDS_EXHAUSTED
    assert error.attempts == 3
    assert error.last_backend == "CLQuoter"
    assert not error.recoverable

    print("  ExhaustedError: PASSED")


def test_configuration_error():
    """Test ConfigurationError exception"""
    from swap_estimator.errors import ConfigurationError, ErrorCode

    print("Testing ConfigurationError...")

    error1 = ConfigurationError.missing("BSC_RPC_URL")
    assert error1.code == ErrorCode.CONFIG_MISSING
    assert "BSC_RPC_URL" in error1.message

    error2 = ConfigurationError.invalid("delay", "must be non-negative")
    assert error2.code == ErrorCode.CONFIG_INVALID
    assert str(error2) == "[9001] Invalid configuration 'delay': must be non-negative"

    print("  ConfigurationError: PASSED")


def test_error_message():
    """Test error_message helper"""
    from swap_estimator.errors import error_message, InputError, DEFAULT_ERROR_MESSAGE

    print("Testing error_message...")

    assert error_message(RuntimeError("boom")) == "boom"
    assert error_message(InputError("bad input")) == "bad input"
    assert error_message(Exception()) == DEFAULT_ERROR_MESSAGE

    print("  error_message: PASSED")


def test_error_inheritance():
    """Test error class hierarchy"""
    from swap_estimator.errors import (
        SwapEstimatorError,
        RpcError,
        InputError,
        BackendError,
        ExhaustedError,
        ConfigurationError,
        OperationNotSupported,
    )

    print("Testing error inheritance...")

    for cls in (RpcError, InputError, BackendError, ExhaustedError, ConfigurationError, OperationNotSupported):
        assert issubclass(cls, SwapEstimatorError)
        assert issubclass(cls, Exception)

    print("  Error inheritance: PASSED")


def main():
    """Run all tests"""
    print("=" * 60)
    print("Errors Module Tests")
    print("=" * 60)

    tests = [
        test_error_code,
        test_swap_estimator_error,
        test_rpc_error,
        test_input_error,
        test_backend_error,
        test_exhausted_error,
        test_configuration_error,
        test_error_message,
        test_error_inheritance,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"  FAILED: {e}")
            failed += 1

    print("=" * 60)
    print(f"Results: {passed} passed, {failed} failed")
    print("=" * 60)

    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
