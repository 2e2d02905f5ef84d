"""
Тесты для адаптера и реестра хоста
"""

import unittest
from unittest.mock import MagicMock

from moacchain.adapter import MoacChainAdapter
from moacchain.config import Settings
from moacchain.registry import AssetRegistry, AssetRegistryError, register_assets
from moacchain.schemas.block import Block
from moacchain.services.moac_rpc import basic_auth


class TestMoacChainAdapter(unittest.TestCase):
    """Тесты для сборки адаптера"""

    def test_from_settings(self):
        config = Settings(
            MOAC_RPC_URL="http://node:8545",
            MOAC_RPC_USER="user",
            MOAC_RPC_PASSWORD="secret",
            MOAC_RPC_TIMEOUT=5.0,
            SYMBOL="MOAC",
        )
        signer = MagicMock()

        adapter = MoacChainAdapter.from_settings(config, signer=signer)

        self.assertEqual(adapter.symbol, "MOAC")
        self.assertEqual(adapter.rpc.base_url, "http://node:8545")
        self.assertEqual(adapter.rpc.access_token, basic_auth("user", "secret"))
        self.assertEqual(adapter.rpc.timeout, 5.0)
        self.assertIs(adapter.transactions.signer, signer)
        self.assertIs(adapter.blocks.rpc, adapter.rpc)
        self.assertIs(adapter.addresses.rpc, adapter.rpc)

    def test_access_token_wins_over_user_password(self):
        config = Settings(
            MOAC_RPC_USER="user",
            MOAC_RPC_PASSWORD="secret",
            MOAC_RPC_ACCESS_TOKEN="token",
        )
        self.assertEqual(config.rpc_access_token, "token")

    def test_no_credentials(self):
        config = Settings(
            MOAC_RPC_USER=None, MOAC_RPC_PASSWORD=None, MOAC_RPC_ACCESS_TOKEN=None
        )
        self.assertIsNone(config.rpc_access_token)

    def test_block_header_uses_adapter_symbol(self):
        adapter = MoacChainAdapter(MagicMock(), symbol="MOAC")
        block = Block(
            hash="0xb",
            prev_block_hash="0xa",
            transaction_merkle_root="0xr",
            timestamp=1,
            height=2,
        )

        header = adapter.block_header(block)

        self.assertEqual(header.symbol, "MOAC")
        self.assertEqual(header.height, 2)


class TestAssetRegistry(unittest.TestCase):
    """Тесты для явной регистрации адаптера"""

    def test_register_assets(self):
        registry = AssetRegistry()
        adapter = MoacChainAdapter(MagicMock(), symbol="MOAC")

        register_assets(registry, adapter)

        self.assertIs(registry.get("MOAC"), adapter)
        self.assertEqual(registry.symbols(), ["MOAC"])

    def test_duplicate_registration(self):
        registry = AssetRegistry()
        adapter = MoacChainAdapter(MagicMock(), symbol="MOAC")
        register_assets(registry, adapter)

        with self.assertRaises(AssetRegistryError):
            register_assets(registry, adapter)

    def test_unknown_symbol(self):
        with self.assertRaises(AssetRegistryError):
            AssetRegistry().get("ETH")

    def test_import_registers_nothing(self):
        self.assertEqual(AssetRegistry().symbols(), [])


if __name__ == "__main__":
    unittest.main()
