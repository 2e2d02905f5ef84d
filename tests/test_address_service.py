"""
Тесты для сервиса адресов
"""

import unittest
from unittest.mock import MagicMock

from moacchain.services.address_service import AddressService
from moacchain.services.codec import DecodeError

ADDRESS = "0x25ff183be76c9583db211e66dbd481a923f40635"


class TestAddressService(unittest.TestCase):
    """Тесты для получения балансов"""

    def setUp(self):
        self.rpc = MagicMock()
        self.service = AddressService(self.rpc)

    def test_get_balance(self):
        self.rpc.get_balance.return_value = "0x1bc16d674ec800000"

        balance = self.service.get_balance(ADDRESS)

        self.assertEqual(balance.address, ADDRESS)
        self.assertEqual(balance.balance, 32 * 10**18)
        self.rpc.get_balance.assert_called_once_with(ADDRESS, "latest")

    def test_get_balance_malformed(self):
        self.rpc.get_balance.return_value = "0xnothex"

        with self.assertRaises(DecodeError) as ctx:
            self.service.get_balance(ADDRESS)
        self.assertIn(ADDRESS, str(ctx.exception))

    def test_get_balances(self):
        self.rpc.get_balance.side_effect = ["0x1", "0x0"]

        balances = self.service.get_balances([ADDRESS, "0xother"])

        self.assertEqual([b.balance for b in balances], [1, 0])
        self.assertEqual([b.address for b in balances], [ADDRESS, "0xother"])


if __name__ == "__main__":
    unittest.main()
