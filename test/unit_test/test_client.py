"""
Test QuoterClient

Tests for the top-level client wiring with an in-memory chain client.
"""

import sys
import unittest
from pathlib import Path
from unittest.mock import patch, AsyncMock

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from swap_estimator import QuoterClient, ConfigurationError
from swap_estimator.protocols.pancakeswap import MIXED_QUOTER, BIN_QUOTER

from conftest import FakeChainClient, doubling_quoter, WBNB, USDT, ONE


class TestQuoterClientInit(unittest.TestCase):
    """Construction rules"""

    @patch("swap_estimator.client.global_config")
    def test_missing_rpc_url(self, mock_config):
        mock_config.chain.bsc_rpc_url = ""
        with self.assertRaises(ConfigurationError):
            QuoterClient()

    @patch("swap_estimator.client.Web3ChainClient")
    def test_builds_web3_client_from_url(self, mock_chain_client_cls):
        client = QuoterClient(rpc_url="http://localhost:8545")
        mock_chain_client_cls.assert_called_once_with("http://localhost:8545")
        self.assertIs(client.chain_client, mock_chain_client_cls.return_value)

    def test_uses_given_chain_client(self):
        chain_client = FakeChainClient()
        client = QuoterClient(chain_client=chain_client, default_fee_tier=500)
        self.assertIs(client.chain_client, chain_client)
        self.assertEqual(client.resolver.default_fee_tier, 500)


class TestQuoterClient(unittest.IsolatedAsyncioTestCase):
    """Quoting through the client"""

    def setUp(self):
        self.chain_client = FakeChainClient({
            MIXED_QUOTER.address: RuntimeError("no mixed route"),
            BIN_QUOTER.address: doubling_quoter,
        })
        self.client = QuoterClient(
            chain_client=self.chain_client,
            debounce_seconds=0.01,
            default_fee_tier=3000,
        )

    async def asyncTearDown(self):
        await self.client.close()

    async def test_resolve(self):
        result = await self.client.resolve(WBNB, USDT, "1.5")

        self.assertEqual(result.amount_out, "3")
        self.assertEqual(result.backend, "BinQuoter")

    async def test_resolve_with_fee_tier(self):
        await self.client.resolve(WBNB, USDT, "1", fee_tier=100)
        self.assertEqual(self.chain_client.calls[0][2]["fee"], 100)

    async def test_resolve_exact_output(self):
        result = await self.client.resolve_exact_output(WBNB, USDT, "2")

        self.assertEqual(result.amount_in, "4")
        self.assertEqual(result.raw_amount_in, 4 * ONE)

    async def test_observe(self):
        self.assertEqual(self.client.estimates.delay, 0.01)

        self.client.observe(WBNB, USDT, "1")
        state = await self.client.estimates.wait_settled(1)

        self.assertEqual(state.amount_out, "2")

    async def test_given_chain_client_not_closed(self):
        self.chain_client.close = AsyncMock()

        async with QuoterClient(chain_client=self.chain_client) as client:
            await client.resolve(WBNB, USDT, "1")

        self.chain_client.close.assert_not_awaited()


if __name__ == "__main__":
    unittest.main()
