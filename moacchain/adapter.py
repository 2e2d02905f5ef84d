"""
Адаптер цепи MOAC для хоста управления кошельками
"""

from typing import Optional

from moacchain.config import Settings, settings
from moacchain.schemas.block import Block, BlockHeader
from moacchain.services.address_service import AddressService
from moacchain.services.block_service import BlockService
from moacchain.services.moac_rpc import MoacRPCClient
from moacchain.services.transaction_service import TransactionService
from moacchain.services.tx_signer import TransactionSigner


class MoacChainAdapter:
    """Клиент узла и сервисы, собранные под одним символом цепи"""

    def __init__(
        self,
        rpc: MoacRPCClient,
        symbol: str = "MOAC",
        signer: Optional[TransactionSigner] = None,
    ):
        self.symbol = symbol
        self.rpc = rpc
        self.blocks = BlockService(rpc)
        self.transactions = TransactionService(rpc, signer)
        self.addresses = AddressService(rpc)

    @classmethod
    def from_settings(
        cls,
        config: Optional[Settings] = None,
        signer: Optional[TransactionSigner] = None,
    ) -> "MoacChainAdapter":
        """Создание адаптера по настройкам"""
        config = config or settings
        rpc = MoacRPCClient(
            config.MOAC_RPC_URL,
            access_token=config.rpc_access_token,
            debug=config.DEBUG,
            timeout=config.MOAC_RPC_TIMEOUT,
        )
        return cls(rpc, symbol=config.SYMBOL, signer=signer)

    def block_header(self, block: Block) -> BlockHeader:
        """Заголовок блока с символом этой цепи"""
        return block.block_header(self.symbol)
