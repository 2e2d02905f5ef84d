"""
Преобразование между hex/JSON форматом узла MOAC и числовыми типами Python

Все числовые значения узла (высоты, время, суммы, газ, цены) передаются
в виде строки "0x" + hex. Разбор выполняется только здесь.
"""

from typing import Any, Dict, Iterable

from moacchain.services.errors import MoacRPCError

UINT64_MAX = 2**64 - 1
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class DecodeError(MoacRPCError, ValueError):
    """Ошибка разбора поля ответа узла"""

    pass


def _strip_hex_prefix(value: Any) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"Ожидалась hex строка, получено: {value!r}")
    if not value.startswith(("0x", "0X")):
        raise DecodeError(f"Hex строка без префикса 0x: {value!r}")
    digits = value[2:]
    if not digits:
        raise DecodeError(f"Пустая hex строка: {value!r}")
    return digits


def height_to_hex_param(height: int) -> str:
    """Высота блока в виде параметра RPC ("0x" + hex в нижнем регистре)"""
    if height < 0 or height > UINT64_MAX:
        raise ValueError(f"Высота вне диапазона uint64: {height}")
    return int_to_hex(height)


def int_to_hex(value: int) -> str:
    """Неотрицательное целое в виде "0x" + hex"""
    if value < 0:
        raise ValueError(f"Отрицательное значение: {value}")
    return "0x" + format(value, "x")


def hex_to_uint(value: Any) -> int:
    """
    Разбор "0x" строки в беззнаковое 64-битное целое

    Raises:
        DecodeError: строка некорректна или значение не помещается в uint64
    """
    result = hex_to_bigint(value)
    if result > UINT64_MAX:
        raise DecodeError(f"Значение не помещается в uint64: {value!r}")
    return result


def hex_to_bigint(value: Any) -> int:
    """
    Разбор "0x" строки в целое произвольной точности

    Raises:
        DecodeError: строка некорректна
    """
    digits = _strip_hex_prefix(value)
    if not all(ch in _HEX_DIGITS for ch in digits):
        raise DecodeError(f"Некорректная hex строка: {value!r}")
    return int(digits, 16)


def require_fields(raw: Any, fields: Iterable[str], context: str) -> Dict[str, Any]:
    """
    Проверка наличия обязательных полей в объекте ответа

    Args:
        raw: Результат RPC вызова
        fields: Имена обязательных полей
        context: Название объекта для сообщения об ошибке

    Returns:
        Тот же объект, если все поля присутствуют
    """
    if not isinstance(raw, dict):
        raise DecodeError(f"{context}: ожидался объект, получено {type(raw).__name__}")
    missing = [name for name in fields if name not in raw]
    if missing:
        raise DecodeError(f"{context}: отсутствуют поля {', '.join(missing)}")
    return raw
