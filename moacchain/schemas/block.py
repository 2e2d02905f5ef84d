"""
Pydantic схемы для блоков MOAC
"""

from typing import List

from pydantic import BaseModel, Field


class BlockHeader(BaseModel):
    """Заголовок блока для хоста, сканирующего несколько цепей"""

    hash: str = Field(..., description="Подпись блока")
    merkleroot: str = Field(..., description="Корень дерева транзакций")
    previousblockhash: str = Field(..., description="Подпись предыдущего блока")
    height: int = Field(..., ge=0, description="Высота блока")
    time: int = Field(..., ge=0, description="Время блока (Unix timestamp)")
    symbol: str = Field(..., description="Символ цепи")

    class Config:
        frozen = True


class Block(BaseModel):
    """Блок MOAC"""

    # В MOAC это подпись блока, а не PoW хеш
    hash: str = Field(..., description="Подпись блока")
    prev_block_hash: str = Field("", description="Подпись предыдущего блока")
    transaction_merkle_root: str = Field(..., description="Корень дерева транзакций")
    timestamp: int = Field(..., ge=0, description="Время блока (Unix timestamp)")
    height: int = Field(..., ge=0, description="Высота блока")
    transactions: List[str] = Field(
        default_factory=list, description="ID транзакций в порядке включения"
    )

    class Config:
        frozen = True

    def block_header(self, symbol: str) -> BlockHeader:
        """Проекция блока в заголовок для хоста"""
        return BlockHeader(
            hash=self.hash,
            merkleroot=self.transaction_merkle_root,
            previousblockhash=self.prev_block_hash,
            height=self.height,
            time=self.timestamp,
            symbol=symbol,
        )
