# Pydantic schemas package

from .balance import AddrBalance
from .block import Block, BlockHeader
from .transaction import Transaction

__all__ = [
    # Block schemas
    "Block",
    "BlockHeader",
    # Transaction schemas
    "Transaction",
    # Balance schemas
    "AddrBalance",
]
