"""
Внешний подписчик транзакций

Адаптер не хранит ключей и не знает алгоритма подписи: подписчик
передается явно туда, где он нужен.
"""

from typing import Protocol, runtime_checkable

# Идентификатор кривой secp256k1 в кошельке хоста
ECC_CURVE_SECP256K1 = 0x00000000


class TransactionSignerError(Exception):
    """Исключение для ошибок подписи транзакций"""

    pass


@runtime_checkable
class TransactionSigner(Protocol):
    """Подпись хеша транзакции закрытым ключом"""

    def sign_transaction_hash(
        self, msg: bytes, private_key: bytes, ecc_type: int
    ) -> bytes: ...
