"""
SQLAlchemy модель для блоков и транзакций, которые не удалось просканировать
"""

import hashlib

from sqlalchemy import BigInteger, Column, DateTime, String, Text
from sqlalchemy.sql import func

from moacchain.database import Base


def unscan_record_id(height: int, txid: str) -> str:
    """ID записи: sha256 от строки "<height>_<txid>" в hex"""
    return hashlib.sha256(f"{height}_{txid}".encode("utf-8")).hexdigest()


class UnscanRecord(Base):
    """Модель записи о неудачном сканировании"""

    __tablename__ = "unscan_records"

    id = Column(String(64), primary_key=True)
    block_height = Column(BigInteger, nullable=False, index=True)
    txid = Column(String(128), nullable=False, default="")  # "" - ошибка уровня блока
    reason = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, default=func.now())

    def __repr__(self):
        return (
            f"<UnscanRecord(block_height={self.block_height}, "
            f"txid='{self.txid[:12]}...', reason='{self.reason}')>"
        )


def new_unscan_record(height: int, txid: str, reason: str) -> UnscanRecord:
    """
    Создание записи о неудачном сканировании

    ID зависит только от (height, txid), поэтому повторная запись той же
    пары перезаписывает существующую.
    """
    return UnscanRecord(
        id=unscan_record_id(height, txid),
        block_height=height,
        txid=txid,
        reason=reason,
    )
