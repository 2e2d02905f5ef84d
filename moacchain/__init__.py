"""
Адаптер узла MOAC: JSON-RPC клиент, разбор блоков и транзакций,
учет непросканированных блоков
"""

__version__ = "0.1.0"
