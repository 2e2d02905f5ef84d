"""
Pydantic схемы для балансов адресов
"""

from pydantic import BaseModel, Field


class AddrBalance(BaseModel):
    """Баланс адреса на последнем подтвержденном состоянии"""

    address: str = Field(..., description="Адрес")
    balance: int = Field(..., ge=0, description="Баланс в минимальных единицах")

    class Config:
        frozen = True
