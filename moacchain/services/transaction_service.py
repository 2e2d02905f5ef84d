"""
Сервис для работы с транзакциями MOAC
"""

import logging
from typing import Any, Dict, Optional, Union

from moacchain.schemas.transaction import Transaction
from moacchain.services.codec import (
    DecodeError,
    hex_to_bigint,
    hex_to_uint,
    int_to_hex,
    require_fields,
)
from moacchain.services.errors import MoacNotFoundError
from moacchain.services.moac_rpc import MoacRPCClient, get_moac_rpc
from moacchain.services.tx_signer import (
    ECC_CURVE_SECP256K1,
    TransactionSigner,
    TransactionSignerError,
)

logger = logging.getLogger(__name__)

# Зарезервированные системные адреса
SYSTEM_SENDER_ADDRESS = "0x0000000000000000000000000000000000000064"
SYSTEM_RECEIVER_ADDRESS = "0x0000000000000000000000000000000000000065"

TRANSACTION_FIELDS = (
    "hash",
    "from",
    "to",
    "value",
    "gasPrice",
    "blockNumber",
    "blockHash",
)


def is_coinbase_transaction(raw: Dict[str, Any]) -> bool:
    """
    Проверка, является ли транзакция системной

    Условия проверяются по порядку: системный отправитель, системный
    получатель, нулевая подпись (v, r, s).
    """
    if raw.get("from") == SYSTEM_SENDER_ADDRESS:
        return True
    if raw.get("to") == SYSTEM_RECEIVER_ADDRESS:
        return True
    return raw.get("v") == "0x0" and raw.get("r") == "0x0" and raw.get("s") == "0x0"


class TransactionService:
    """Сервис для работы с транзакциями"""

    def __init__(self, rpc: MoacRPCClient, signer: Optional[TransactionSigner] = None):
        self.rpc = rpc
        self.signer = signer

    def get_transaction(self, txid: str) -> Transaction:
        """
        Получение транзакции по ID

        Args:
            txid: Hash транзакции
        """
        raw = self.rpc.get_transaction_by_hash(txid)
        if raw is None:
            raise MoacNotFoundError("Transaction does not exist!")
        return self.decode_transaction(raw)

    def decode_transaction(self, raw: Any) -> Transaction:
        """
        Построение транзакции из результата mc_getTransactionByHash

        Комиссия запрашивается отдельным вызовом mc_getTransactionReceipt.
        Если он завершился ошибкой, транзакция считается недоступной целиком.
        """
        require_fields(raw, (), "transaction")
        if is_coinbase_transaction(raw):
            return Transaction(is_coinbase=True)

        require_fields(raw, TRANSACTION_FIELDS, "transaction")
        for name in ("hash", "from", "blockHash"):
            if not isinstance(raw[name], str):
                raise DecodeError(f"transaction: поле {name} должно быть строкой")
        if raw["to"] is not None and not isinstance(raw["to"], str):
            raise DecodeError("transaction: поле to должно быть строкой")
        txid = raw["hash"]
        gas_price = hex_to_bigint(raw["gasPrice"])
        amount = hex_to_bigint(raw["value"])
        block_height = hex_to_uint(raw["blockNumber"])

        gas_used = self.get_gas_used(txid)

        return Transaction(
            txid=txid,
            fee=gas_used * gas_price,
            from_address=raw["from"],
            # to == null у транзакций создания контракта
            to_address=raw["to"] or "",
            amount=amount,
            block_height=block_height,
            block_hash=raw["blockHash"],
        )

    def get_gas_used(self, txid: str) -> int:
        """Получение gasUsed из квитанции транзакции"""
        raw = self.rpc.get_transaction_receipt(txid)
        if raw is None:
            raise MoacNotFoundError("Transaction does not exist!")
        return hex_to_bigint(require_fields(raw, ("gasUsed",), "receipt")["gasUsed"])

    def get_gas_price(self) -> int:
        """Получение текущей цены газа"""
        return hex_to_bigint(self.rpc.gas_price())

    def get_nonce(self, address: str) -> int:
        """Получение nonce адреса с учетом ожидающих транзакций"""
        return hex_to_uint(self.rpc.get_transaction_count(address, "pending"))

    def get_gas_estimated(
        self,
        from_address: str,
        to_address: str,
        gas_limit: int,
        gas_price: int,
        amount: Optional[int] = None,
    ) -> int:
        """
        Оценка газа для перевода или вызова контракта

        Args:
            from_address: Адрес отправителя
            to_address: Адрес получателя
            gas_limit: Лимит газа
            gas_price: Цена газа
            amount: Сумма; если None, поле value не передается

        Returns:
            Оценка узла минус 1
        """
        call_params = {
            "from": from_address,
            "to": to_address,
            "gas": int_to_hex(gas_limit),
            "gasPrice": int_to_hex(gas_price),
        }
        if amount is not None:
            call_params["value"] = int_to_hex(amount)

        estimated = hex_to_bigint(self.rpc.estimate_gas(call_params))
        # Узел завышает оценку на единицу
        return estimated - 1

    def sign_transaction_hash(self, msg: bytes, private_key: bytes) -> bytes:
        """
        Подпись хеша транзакции внешним подписчиком

        Args:
            msg: Хеш транзакции
            private_key: Закрытый ключ
        """
        if self.signer is None:
            raise TransactionSignerError("Подписчик транзакций не настроен")
        try:
            return self.signer.sign_transaction_hash(
                msg, private_key, ECC_CURVE_SECP256K1
            )
        except Exception as e:
            logger.error(f"Ошибка подписи транзакции: {e}")
            raise TransactionSignerError("ECC sign hash failed") from e

    def send_transaction(self, raw_tx: Union[bytes, str]) -> str:
        """
        Отправка подписанной транзакции

        Args:
            raw_tx: Подписанная транзакция в байтах или hex

        Returns:
            ID транзакции, который вернул узел
        """
        if isinstance(raw_tx, bytes):
            raw_tx = raw_tx.hex()
        if not raw_tx.startswith("0x"):
            raw_tx = "0x" + raw_tx

        txid = self.rpc.send_raw_transaction(raw_tx)
        logger.info(f"Транзакция отправлена: {txid}")
        return txid


def get_transaction_service(
    rpc: MoacRPCClient = None, signer: Optional[TransactionSigner] = None
) -> TransactionService:
    """Получение экземпляра сервиса транзакций"""
    if rpc is None:
        rpc = get_moac_rpc()
    return TransactionService(rpc, signer)
