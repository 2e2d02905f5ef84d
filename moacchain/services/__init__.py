# Node access services package
#
# sync_service не импортируется здесь: он подключает базу данных.
# Используйте moacchain.services.sync_service напрямую.

from moacchain.services.address_service import AddressService, get_address_service
from moacchain.services.block_service import BlockService, get_block_service
from moacchain.services.moac_rpc import MoacRPCClient, get_moac_rpc
from moacchain.services.transaction_service import (
    TransactionService,
    get_transaction_service,
)

__all__ = [
    "MoacRPCClient",
    "get_moac_rpc",
    "AddressService",
    "get_address_service",
    "BlockService",
    "get_block_service",
    "TransactionService",
    "get_transaction_service",
]
