"""
Сервис для работы с балансами адресов MOAC
"""

import logging
from typing import Iterable, List

from moacchain.schemas.balance import AddrBalance
from moacchain.services.codec import DecodeError, hex_to_bigint
from moacchain.services.moac_rpc import MoacRPCClient, get_moac_rpc

logger = logging.getLogger(__name__)


class AddressService:
    """Сервис для работы с адресами"""

    def __init__(self, rpc: MoacRPCClient):
        self.rpc = rpc

    def get_balance(self, address: str) -> AddrBalance:
        """
        Получение баланса адреса на последнем блоке

        Args:
            address: Адрес MOAC
        """
        raw = self.rpc.get_balance(address, "latest")
        try:
            balance = hex_to_bigint(raw)
        except DecodeError as e:
            logger.error(f"Некорректный баланс адреса {address}: {raw!r}")
            raise DecodeError(f"Failed to get balance of :{address}") from e
        return AddrBalance(address=address, balance=balance)

    def get_balances(self, addresses: Iterable[str]) -> List[AddrBalance]:
        """Получение балансов нескольких адресов по очереди"""
        return [self.get_balance(address) for address in addresses]


def get_address_service(rpc: MoacRPCClient = None) -> AddressService:
    """Получение экземпляра сервиса адресов"""
    if rpc is None:
        rpc = get_moac_rpc()
    return AddressService(rpc)
