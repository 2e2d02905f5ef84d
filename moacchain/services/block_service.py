"""
Сервис для работы с блоками MOAC
"""

import logging
from typing import Any

from moacchain.schemas.block import Block
from moacchain.services.codec import DecodeError, hex_to_uint, require_fields
from moacchain.services.errors import MoacNotFoundError
from moacchain.services.moac_rpc import MoacRPCClient, get_moac_rpc

logger = logging.getLogger(__name__)

BLOCK_FIELDS = (
    "hash",
    "parentHash",
    "transactionsRoot",
    "timestamp",
    "number",
    "transactions",
)


def decode_block(raw: Any) -> Block:
    """
    Построение блока из результата mc_getBlockBy*

    Args:
        raw: Объект блока с сокращенным телом (только ID транзакций)
    """
    require_fields(raw, BLOCK_FIELDS, "block")
    for name in ("hash", "transactionsRoot"):
        if not isinstance(raw[name], str):
            raise DecodeError(f"block: поле {name} должно быть строкой")
    # parentHash пуст только у генезис блока
    if raw["parentHash"] is not None and not isinstance(raw["parentHash"], str):
        raise DecodeError("block: поле parentHash должно быть строкой")

    transactions = raw["transactions"]
    if not isinstance(transactions, list):
        raise DecodeError("block: поле transactions должно быть массивом")

    txids = []
    for tx in transactions:
        if isinstance(tx, str):
            txids.append(tx)
        elif isinstance(tx, dict) and isinstance(tx.get("hash"), str):
            # Полный объект транзакции
            txids.append(tx["hash"])
        else:
            raise DecodeError(f"block: некорректный элемент transactions: {tx!r}")

    return Block(
        hash=raw["hash"],
        prev_block_hash=raw["parentHash"] or "",
        transaction_merkle_root=raw["transactionsRoot"],
        timestamp=hex_to_uint(raw["timestamp"]),
        height=hex_to_uint(raw["number"]),
        transactions=txids,
    )


class BlockService:
    """Сервис для работы с блоками"""

    def __init__(self, rpc: MoacRPCClient):
        self.rpc = rpc

    def get_block_height(self) -> int:
        """Получение текущей высоты цепи"""
        return hex_to_uint(self.rpc.block_number())

    def get_block_hash(self, height: int) -> str:
        """
        Получение подписи блока по высоте

        Args:
            height: Высота блока
        """
        raw = self.rpc.get_block_by_number(height)
        if raw is None:
            raise MoacNotFoundError(f"Блок на высоте {height} не найден")
        return require_fields(raw, ("hash",), "block")["hash"]

    def get_block_by_height(self, height: int) -> Block:
        """
        Получение блока по высоте

        Args:
            height: Высота блока
        """
        raw = self.rpc.get_block_by_number(height)
        if raw is None:
            raise MoacNotFoundError(f"Блок на высоте {height} не найден")
        return decode_block(raw)

    def get_block(self, block_hash: str) -> Block:
        """
        Получение блока по подписи

        Args:
            block_hash: Подпись блока
        """
        raw = self.rpc.get_block_by_hash(block_hash)
        if raw is None:
            raise MoacNotFoundError(f"Блок {block_hash} не найден")
        return decode_block(raw)

    decode_block = staticmethod(decode_block)


def get_block_service(rpc: MoacRPCClient = None) -> BlockService:
    """Получение экземпляра сервиса блоков"""
    if rpc is None:
        rpc = get_moac_rpc()
    return BlockService(rpc)
