"""
MOAC RPC клиент для взаимодействия с узлом по JSON-RPC 2.0 поверх HTTP
"""

import base64
import logging
import uuid
from typing import Any, Dict, List, Optional

import requests

from moacchain.config import settings
from moacchain.services.codec import height_to_hex_param
from moacchain.services.errors import (
    MoacEmptyResponseError,
    MoacNodeError,
    MoacNotFoundError,
    MoacRPCError,
    MoacTransportError,
)

logger = logging.getLogger(__name__)

__all__ = [
    "MoacRPCClient",
    "MoacRPCError",
    "MoacTransportError",
    "MoacNodeError",
    "MoacEmptyResponseError",
    "MoacNotFoundError",
    "basic_auth",
    "get_moac_rpc",
]


def basic_auth(username: str, password: str) -> str:
    """
    Токен для Basic авторизации (RFC 2617)

    Логин и пароль разделяются двоеточием и кодируются в base64 без urlencode.
    """
    auth = f"{username}:{password}"
    return base64.b64encode(auth.encode("utf-8")).decode("ascii")


def check_response(payload: Any) -> Any:
    """
    Классификация ответа узла

    Args:
        payload: Разобранное JSON тело ответа

    Returns:
        Содержимое поля result

    Raises:
        MoacNodeError: в ответе есть объект error
        MoacEmptyResponseError: в ответе нет ни error, ни result
    """
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        raise MoacNodeError(error.get("code", 0), error.get("message", ""))

    if not isinstance(payload, dict) or "result" not in payload:
        raise MoacEmptyResponseError("Response is empty!")

    return payload["result"]


class MoacRPCClient:
    """
    Клиент для взаимодействия с узлом MOAC через JSON-RPC

    Клиент не хранит состояния между вызовами и не повторяет запросы:
    политика повторов остается за вызывающей стороной.
    """

    def __init__(
        self,
        base_url: str,
        access_token: Optional[str] = None,
        debug: bool = False,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.access_token = access_token
        self.debug = debug
        self.timeout = timeout
        self._http = session if session is not None else requests

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Basic {self.access_token}"
        return headers

    def call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        Выполнение RPC вызова

        Args:
            method: Имя метода, например mc_blockNumber
            params: Позиционные параметры

        Returns:
            Поле result ответа без дополнительного разбора
        """
        body = {
            "jsonrpc": "2.0",
            "id": uuid.uuid4().hex,
            "method": method,
            "params": list(params) if params else [],
        }

        if self.debug:
            logger.info(f"Start Request API: {method} {body['params']}")

        try:
            response = self._http.post(
                self.base_url,
                json=body,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Сетевая ошибка в {method}: {e}")
            raise MoacTransportError(f"Не удалось выполнить {method}: {e}") from e

        if self.debug:
            logger.info(
                f"Request API Completed: {method} status={response.status_code} "
                f"body={response.text}"
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                f"Нечитаемый ответ в {method} (HTTP {response.status_code}): {e}"
            )
            raise MoacTransportError(
                f"Нечитаемый ответ узла на {method}: HTTP {response.status_code}"
            ) from e

        try:
            return check_response(payload)
        except MoacRPCError as e:
            logger.error(f"JSON RPC ошибка в {method}: {e}")
            raise

    # Методы для работы с блокчейном

    def block_number(self) -> Any:
        """Текущая высота цепи (hex)"""
        return self.call("mc_blockNumber")

    def get_block_by_number(self, height: int, full_transactions: bool = False) -> Any:
        """Блок по высоте"""
        return self.call(
            "mc_getBlockByNumber", [height_to_hex_param(height), full_transactions]
        )

    def get_block_by_hash(self, block_hash: str, full_transactions: bool = False) -> Any:
        """Блок по хешу"""
        return self.call("mc_getBlockByHash", [block_hash, full_transactions])

    # Методы для работы с транзакциями

    def get_transaction_by_hash(self, txid: str) -> Any:
        return self.call("mc_getTransactionByHash", [txid])

    def get_transaction_receipt(self, txid: str) -> Any:
        return self.call("mc_getTransactionReceipt", [txid])

    def get_transaction_count(self, address: str, block_tag: str = "pending") -> Any:
        return self.call("mc_getTransactionCount", [address, block_tag])

    def send_raw_transaction(self, raw_tx: str) -> Any:
        return self.call("mc_sendRawTransaction", [raw_tx])

    # Газ и балансы

    def estimate_gas(self, call_params: Dict[str, Any]) -> Any:
        return self.call("mc_estimateGas", [call_params])

    def gas_price(self) -> Any:
        return self.call("mc_gasPrice")

    def get_balance(self, address: str, block_tag: str = "latest") -> Any:
        return self.call("mc_getBalance", [address, block_tag])


def get_moac_rpc() -> MoacRPCClient:
    """Создание клиента по глобальным настройкам"""
    return MoacRPCClient(
        settings.MOAC_RPC_URL,
        access_token=settings.rpc_access_token,
        debug=settings.DEBUG,
        timeout=settings.MOAC_RPC_TIMEOUT,
    )
