"""
Исключения для ошибок взаимодействия с узлом MOAC
"""


class MoacRPCError(Exception):
    """Базовое исключение для ошибок MOAC RPC"""

    pass


class MoacTransportError(MoacRPCError):
    """Сетевая ошибка, таймаут или нечитаемое тело ответа"""

    pass


class MoacNodeError(MoacRPCError):
    """Узел вернул объект error"""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}]{message}")


class MoacEmptyResponseError(MoacRPCError):
    """В ответе нет ни error, ни result"""

    pass


class MoacNotFoundError(MoacRPCError):
    """Запрошенный объект не существует на узле"""

    pass
