"""
Chain client for read-only quoter calls using web3.py

ChainClient is the capability the resolver depends on: call a contract
function by name with keyword-style arguments and return the decoded output.
Web3ChainClient implements it over AsyncWeb3 for BSC.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional, Protocol, Tuple

import aiohttp
from web3 import AsyncWeb3, AsyncHTTPProvider
from web3.exceptions import ContractLogicError, Web3Exception
from web3.middleware import ExtraDataToPOAMiddleware

from ..errors import BackendError, ConfigurationError, OperationNotSupported, RpcError
from ..config import config as global_config
from ..protocols.pancakeswap.api import QUOTER_ABI

logger = logging.getLogger(__name__)

# BSC mainnet and testnet use Proof of Staked Authority
POA_CHAIN_IDS = (56, 97)


class ChainClient(Protocol):
    """Read-only contract call capability"""

    async def call(self, contract_address: str, function_name: str, args: Dict[str, Any]) -> Any:
        """
        Call a view function and return its decoded output

        Raises:
            Exception: Transport failures, reverts or ABI mismatches
        """
        ...


def create_async_web3(
    rpc_url: str,
    chain_id: int = 56,
    timeout: float = 30.0,
) -> AsyncWeb3:
    """
    Create AsyncWeb3 instance for a chain

    Args:
        rpc_url: RPC endpoint URL
        chain_id: Chain ID (56 for BSC)
        timeout: HTTP request timeout in seconds

    Returns:
        Configured AsyncWeb3 instance
    """
    if not rpc_url:
        raise ConfigurationError.missing("BSC_RPC_URL")

    provider = AsyncHTTPProvider(
        rpc_url,
        request_kwargs={"timeout": aiohttp.ClientTimeout(total=timeout)},
    )
    web3 = AsyncWeb3(provider)

    if chain_id in POA_CHAIN_IDS:
        web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    return web3


def _function_inputs(abi: List[Dict[str, Any]]) -> Dict[str, Tuple[List[str], bool]]:
    """
    Map function name -> (ordered input names, packed as a single tuple)

    Quoter functions take one struct argument; its component names are
    returned in that case.
    """
    functions = {}
    for entry in abi:
        if entry.get("type") != "function":
            continue
        inputs = entry.get("inputs", [])
        if len(inputs) == 1 and inputs[0].get("type") == "tuple":
            functions[entry["name"]] = ([c["name"] for c in inputs[0]["components"]], True)
        else:
            functions[entry["name"]] = ([i["name"] for i in inputs], False)
    return functions


class Web3ChainClient:
    """
    ChainClient backed by AsyncWeb3

    Usage:
        client = Web3ChainClient("https://bsc-dataseed.binance.org")
        amount_out = await client.call(
            MIXED_QUOTER.address,
            "quoteExactInputSingle",
            {"tokenIn": ..., "tokenOut": ..., "amountIn": 10**18, "sqrtPriceLimitX96": 0, "fee": 3000},
        )
    """

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        chain_id: Optional[int] = None,
        timeout: Optional[float] = None,
        abi: Optional[List[Dict[str, Any]]] = None,
        web3: Optional[AsyncWeb3] = None,
    ):
        """
        Initialize chain client

        Args:
            rpc_url: RPC URL (uses config default if not provided)
            chain_id: Chain ID (uses config default if not provided)
            timeout: HTTP timeout in seconds (uses config default if not provided)
            abi: Contract ABI (defaults to the PancakeSwap quoter ABI)
            web3: Pre-built AsyncWeb3 instance (skips provider creation)
        """
        self._rpc_url = rpc_url or global_config.chain.bsc_rpc_url
        self._chain_id = chain_id if chain_id is not None else global_config.chain.bsc_chain_id
        self._abi = abi if abi is not None else QUOTER_ABI
        self._functions = _function_inputs(self._abi)
        self._contracts: Dict[str, Any] = {}

        if web3 is None:
            web3 = create_async_web3(
                self._rpc_url,
                self._chain_id,
                timeout if timeout is not None else global_config.chain.timeout,
            )
        self._web3 = web3

        logger.info(f"Initialized Web3ChainClient for chain {self._chain_id}")

    @property
    def web3(self) -> AsyncWeb3:
        """AsyncWeb3 instance"""
        return self._web3

    @property
    def chain_id(self) -> int:
        return self._chain_id

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    def _get_contract(self, contract_address: str):
        address = AsyncWeb3.to_checksum_address(contract_address)
        contract = self._contracts.get(address)
        if contract is None:
            contract = self._web3.eth.contract(address=address, abi=self._abi)
            self._contracts[address] = contract
        return contract

    def encode_args(self, function_name: str, args: Dict[str, Any]) -> tuple:
        """
        Order keyword args by the ABI and checksum address values

        Raises:
            OperationNotSupported: Function is not in the ABI
            KeyError: A required argument is missing
        """
        if function_name not in self._functions:
            raise OperationNotSupported.unknown_function(function_name)

        names, _ = self._functions[function_name]
        values = []
        for name in names:
            value = args[name]
            if isinstance(value, str) and AsyncWeb3.is_address(value):
                value = AsyncWeb3.to_checksum_address(value)
            values.append(value)
        return tuple(values)

    async def call(self, contract_address: str, function_name: str, args: Dict[str, Any]) -> Any:
        """
        Execute eth_call against a quoter contract

        Raises:
            OperationNotSupported: Function is not in the ABI
            BackendError: Contract reverted
            RpcError: Transport failure
        """
        params = self.encode_args(function_name, args)
        _, packed = self._functions[function_name]
        function = self._get_contract(contract_address).functions[function_name]

        try:
            if packed:
                return await function(params).call()
            return await function(*params).call()
        except ContractLogicError as e:
            reason = getattr(e, "message", None) or str(e)
            raise BackendError.reverted(contract_address, reason, e) from e
        except (Web3Exception, aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise RpcError.call_failed(contract_address, e, endpoint=self._rpc_url) from e

    async def close(self):
        """Release the provider's HTTP sessions"""
        disconnect = getattr(self._web3.provider, "disconnect", None)
        if disconnect is not None:
            await disconnect()

    def __repr__(self) -> str:
        return f"Web3ChainClient(chain_id={self._chain_id})"
