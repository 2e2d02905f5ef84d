"""
Pydantic схемы для транзакций MOAC
"""

from typing import Optional

from pydantic import BaseModel, Field


class Transaction(BaseModel):
    """
    Транзакция MOAC

    Для системных (coinbase) транзакций заполнен только is_coinbase.
    """

    is_coinbase: bool = Field(False, description="Системная транзакция")
    txid: Optional[str] = Field(None, description="Hash транзакции")
    fee: Optional[int] = Field(None, ge=0, description="Комиссия: gasUsed * gasPrice")
    from_address: Optional[str] = Field(None, description="Адрес отправителя")
    to_address: Optional[str] = Field(None, description="Адрес получателя")
    amount: Optional[int] = Field(None, ge=0, description="Сумма перевода")
    block_height: Optional[int] = Field(None, ge=0, description="Высота блока")
    block_hash: Optional[str] = Field(None, description="Подпись блока")
    status: Optional[str] = Field(None, description="Статус подтверждения")

    class Config:
        frozen = True
