"""
Тесты для сервиса блоков
"""

import unittest
from unittest.mock import MagicMock

from moacchain.services.block_service import BlockService, decode_block
from moacchain.services.codec import DecodeError
from moacchain.services.errors import MoacNotFoundError


def make_raw_block(**overrides):
    raw = {
        "hash": "0x7f1c7c0b0a2b3cbb5b2d0e5d2f9c1f7a2e4d3c2b1a0f9e8d7c6b5a4938271605",
        "parentHash": "0x5b0e3c1c4a1f0e9d8c7b6a5948372615f4e3d2c1b0a9f8e7d6c5b4a392817060",
        "transactionsRoot": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        "timestamp": "0x5c8a1f2e",
        "number": "0x2a1e5b",
        "transactions": ["0xaaa", "0xccc", "0xbbb"],
    }
    raw.update(overrides)
    return raw


class TestDecodeBlock(unittest.TestCase):
    """Тесты для разбора блока"""

    def test_decode_block(self):
        raw = make_raw_block()

        block = decode_block(raw)

        self.assertEqual(block.height, 2760283)
        self.assertEqual(block.timestamp, 0x5C8A1F2E)
        self.assertEqual(block.hash, raw["hash"])
        self.assertEqual(block.prev_block_hash, raw["parentHash"])
        self.assertEqual(block.transaction_merkle_root, raw["transactionsRoot"])
        self.assertEqual(block.transactions, ["0xaaa", "0xccc", "0xbbb"])

    def test_empty_transactions(self):
        block = decode_block(make_raw_block(transactions=[]))
        self.assertEqual(block.transactions, [])

    def test_full_transaction_objects(self):
        block = decode_block(
            make_raw_block(transactions=[{"hash": "0x1"}, {"hash": "0x2"}])
        )
        self.assertEqual(block.transactions, ["0x1", "0x2"])

    def test_missing_field(self):
        raw = make_raw_block()
        del raw["number"]

        with self.assertRaises(DecodeError):
            decode_block(raw)

    def test_malformed_height(self):
        with self.assertRaises(DecodeError):
            decode_block(make_raw_block(number="2a1e5b"))

    def test_null_hash_is_decode_error(self):
        with self.assertRaises(DecodeError):
            decode_block(make_raw_block(hash=None))

    def test_non_string_merkle_root_is_decode_error(self):
        with self.assertRaises(DecodeError):
            decode_block(make_raw_block(transactionsRoot=123))

    def test_non_string_parent_hash_is_decode_error(self):
        with self.assertRaises(DecodeError):
            decode_block(make_raw_block(parentHash=["0xa"]))

    def test_genesis_parent_hash(self):
        """У генезис блока parentHash может быть пустым"""
        for parent_hash in [None, ""]:
            with self.subTest(parent_hash=parent_hash):
                block = decode_block(make_raw_block(parentHash=parent_hash))
                self.assertEqual(block.prev_block_hash, "")

    def test_transactions_not_a_list(self):
        with self.assertRaises(DecodeError):
            decode_block(make_raw_block(transactions="0xaaa"))

    def test_block_header_projection(self):
        block = decode_block(make_raw_block())

        header = block.block_header("MOAC")

        self.assertEqual(header.hash, block.hash)
        self.assertEqual(header.merkleroot, block.transaction_merkle_root)
        self.assertEqual(header.previousblockhash, block.prev_block_hash)
        self.assertEqual(header.height, 2760283)
        self.assertEqual(header.time, block.timestamp)
        self.assertEqual(header.symbol, "MOAC")


class TestBlockService(unittest.TestCase):
    """Тесты для запросов блоков через RPC"""

    def setUp(self):
        self.rpc = MagicMock()
        self.service = BlockService(self.rpc)

    def test_get_block_height(self):
        self.rpc.block_number.return_value = "0x2a1e5b"

        self.assertEqual(self.service.get_block_height(), 2760283)

    def test_get_block_height_malformed(self):
        self.rpc.block_number.return_value = "latest"

        with self.assertRaises(DecodeError):
            self.service.get_block_height()

    def test_get_block_hash(self):
        raw = make_raw_block()
        self.rpc.get_block_by_number.return_value = raw

        self.assertEqual(self.service.get_block_hash(2760283), raw["hash"])
        self.rpc.get_block_by_number.assert_called_once_with(2760283)

    def test_get_block_by_height(self):
        self.rpc.get_block_by_number.return_value = make_raw_block()

        block = self.service.get_block_by_height(2760283)

        self.assertEqual(block.height, 2760283)

    def test_get_block_by_height_not_found(self):
        self.rpc.get_block_by_number.return_value = None

        with self.assertRaises(MoacNotFoundError):
            self.service.get_block_by_height(99999999)

    def test_get_block_by_hash(self):
        raw = make_raw_block()
        self.rpc.get_block_by_hash.return_value = raw

        block = self.service.get_block(raw["hash"])

        self.assertEqual(block.hash, raw["hash"])
        self.rpc.get_block_by_hash.assert_called_once_with(raw["hash"])

    def test_get_block_by_hash_not_found(self):
        self.rpc.get_block_by_hash.return_value = None

        with self.assertRaises(MoacNotFoundError):
            self.service.get_block("0xdead")


if __name__ == "__main__":
    unittest.main()
