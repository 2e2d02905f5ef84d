"""
Реестр адаптеров цепей хоста

Импорт пакета ничего не регистрирует: хост вызывает register_assets()
при старте.
"""

import logging
from typing import Dict, List

from moacchain.adapter import MoacChainAdapter

logger = logging.getLogger(__name__)


class AssetRegistryError(Exception):
    """Исключение для ошибок реестра"""

    pass


class AssetRegistry:
    """Соответствие символа цепи и ее адаптера"""

    def __init__(self):
        self._assets: Dict[str, MoacChainAdapter] = {}

    def register(self, symbol: str, adapter: MoacChainAdapter) -> None:
        if symbol in self._assets:
            raise AssetRegistryError(f"Символ {symbol} уже зарегистрирован")
        self._assets[symbol] = adapter

    def get(self, symbol: str) -> MoacChainAdapter:
        try:
            return self._assets[symbol]
        except KeyError:
            raise AssetRegistryError(f"Символ {symbol} не зарегистрирован")

    def symbols(self) -> List[str]:
        return sorted(self._assets)


def register_assets(registry: AssetRegistry, adapter: MoacChainAdapter) -> None:
    """Регистрация адаптера MOAC в реестре хоста"""
    registry.register(adapter.symbol, adapter)
    logger.info(f"Wallet Manager {adapter.symbol} Load Successfully.")
