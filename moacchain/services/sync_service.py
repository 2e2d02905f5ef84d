"""
Сервис сканирования блоков MOAC с учетом неудачных попыток
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from moacchain.database import get_db, init_db
from moacchain.models.unscan_record import (
    UnscanRecord,
    new_unscan_record,
    unscan_record_id,
)
from moacchain.services.block_service import BlockService, get_block_service
from moacchain.services.moac_rpc import get_moac_rpc
from moacchain.services.transaction_service import (
    TransactionService,
    get_transaction_service,
)

logger = logging.getLogger(__name__)


class SyncServiceError(Exception):
    """Исключение для ошибок сервиса синхронизации"""

    pass


class SyncService:
    """
    Сканирование блоков и транзакций

    Ошибки отдельных блоков и транзакций не прерывают сканирование:
    для каждой сохраняется UnscanRecord, который затем обрабатывает
    rescan_unscanned().
    """

    def __init__(
        self,
        db: Session,
        block_service: BlockService,
        transaction_service: TransactionService,
    ):
        self.db = db
        self.block_service = block_service
        self.transaction_service = transaction_service

    # Записи о неудачном сканировании

    def save_unscan_record(self, record: UnscanRecord) -> UnscanRecord:
        """
        Сохранение записи о неудачном сканировании

        Запись с тем же ID перезаписывается, дубликаты не создаются.
        """
        try:
            merged = self.db.merge(record)
            self.db.commit()
            return merged
        except Exception as e:
            self.db.rollback()
            logger.error(f"Ошибка сохранения UnscanRecord {record.id}: {e}")
            raise SyncServiceError(f"Не удалось сохранить запись: {e}")

    def delete_unscan_record(self, height: int, txid: str = "") -> bool:
        """
        Удаление записи после успешного повторного сканирования

        Returns:
            True если запись существовала
        """
        try:
            record = self.db.get(UnscanRecord, unscan_record_id(height, txid))
            if record is None:
                return False
            self.db.delete(record)
            self.db.commit()
            return True
        except Exception as e:
            self.db.rollback()
            logger.error(f"Ошибка удаления UnscanRecord ({height}, {txid}): {e}")
            raise SyncServiceError(f"Не удалось удалить запись: {e}")

    def get_unscan_records(self, height: Optional[int] = None) -> List[UnscanRecord]:
        """Получение записей, при необходимости только для одной высоты"""
        query = self.db.query(UnscanRecord)
        if height is not None:
            query = query.filter(UnscanRecord.block_height == height)
        return query.order_by(UnscanRecord.block_height, UnscanRecord.txid).all()

    def _record_failure(self, height: int, txid: str, reason: str) -> None:
        self.save_unscan_record(new_unscan_record(height, txid, reason))

    # Сканирование

    def scan_block(self, height: int) -> Dict[str, Any]:
        """
        Сканирование блока и его транзакций

        Args:
            height: Высота блока

        Returns:
            Блок (или None), несистемные транзакции и количество ошибок
        """
        try:
            block = self.block_service.get_block_by_height(height)
        except Exception as e:
            logger.error(f"Ошибка получения блока {height}: {e}")
            self._record_failure(height, "", f"[{height}] get block failed: {e}")
            return {"block": None, "transactions": [], "errors": 1}

        transactions = []
        errors = 0
        for txid in block.transactions:
            try:
                tx = self.transaction_service.get_transaction(txid)
            except Exception as e:
                logger.warning(f"Ошибка получения транзакции {txid}: {e}")
                self._record_failure(
                    height, txid, f"[{height}] get transaction {txid} failed: {e}"
                )
                errors += 1
                continue

            if tx.is_coinbase:
                continue
            transactions.append(tx)

        logger.info(
            f"Просканирован блок {height}: транзакций={len(transactions)}, "
            f"ошибок={errors}"
        )
        return {"block": block, "transactions": transactions, "errors": errors}

    def scan_range(self, start_height: int, end_height: int) -> Dict[str, Any]:
        """
        Сканирование диапазона высот включительно

        Returns:
            Сводка по диапазону, просканированные блоки и все несистемные
            транзакции в порядке высот
        """
        if start_height > end_height:
            raise SyncServiceError(
                f"Некорректный диапазон: {start_height} > {end_height}"
            )

        blocks = []
        transactions = []
        errors = 0

        for height in range(start_height, end_height + 1):
            result = self.scan_block(height)
            if result["block"] is not None:
                blocks.append(result["block"])
            transactions.extend(result["transactions"])
            errors += result["errors"]

        logger.info(
            f"Сканирование завершено: блоков={len(blocks)}, "
            f"транзакций={len(transactions)}, ошибок={errors}"
        )
        return {
            "scanned_blocks": len(blocks),
            "scanned_transactions": len(transactions),
            "errors": errors,
            "blocks": blocks,
            "transactions": transactions,
        }

    def rescan_unscanned(self) -> Dict[str, Any]:
        """
        Повторная обработка всех сохраненных записей

        Запись удаляется, как только повтор прошел успешно. Восстановленные
        несистемные транзакции возвращаются в поле transactions, блоки
        записей уровня блока - в поле blocks.
        """
        records = [(r.block_height, r.txid) for r in self.get_unscan_records()]
        recovered = 0
        blocks = []
        transactions = []

        for height, txid in records:
            if not txid:
                result = self.scan_block(height)
                if result["block"] is None:
                    continue
                blocks.append(result["block"])
                transactions.extend(result["transactions"])
            else:
                try:
                    tx = self.transaction_service.get_transaction(txid)
                except Exception as e:
                    logger.warning(f"Повтор транзакции {txid} неудачен: {e}")
                    self._record_failure(
                        height, txid, f"[{height}] get transaction {txid} failed: {e}"
                    )
                    continue
                if not tx.is_coinbase:
                    transactions.append(tx)

            self.delete_unscan_record(height, txid)
            recovered += 1

        remaining = self.db.query(UnscanRecord).count()
        logger.info(
            f"Повторное сканирование: записей={len(records)}, "
            f"восстановлено={recovered}, осталось={remaining}"
        )
        return {
            "retried": len(records),
            "recovered": recovered,
            "remaining": remaining,
            "blocks": blocks,
            "transactions": transactions,
        }


def get_sync_service(db: Session = None) -> SyncService:
    """Получение экземпляра сервиса синхронизации"""
    if db is None:
        init_db()
        db = next(get_db())
    rpc = get_moac_rpc()
    return SyncService(db, get_block_service(rpc), get_transaction_service(rpc))
