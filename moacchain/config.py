"""
Конфигурация адаптера MOAC
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки адаптера"""

    # Общие настройки
    PROJECT_NAME: str = "MOAC Chain Adapter"
    VERSION: str = "0.1.0"
    SYMBOL: str = "MOAC"

    # База данных для записей о непросканированных блоках
    DATABASE_URL: str = "sqlite:///./moacchain.db"

    # MOAC RPC настройки
    MOAC_RPC_URL: str = "http://127.0.0.1:8545"
    MOAC_RPC_USER: Optional[str] = None
    MOAC_RPC_PASSWORD: Optional[str] = None
    MOAC_RPC_ACCESS_TOKEN: Optional[str] = None
    MOAC_RPC_TIMEOUT: Optional[float] = None  # None - без таймаута

    # Debug режим
    DEBUG: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def rpc_access_token(self) -> Optional[str]:
        """Токен для заголовка Authorization"""
        if self.MOAC_RPC_ACCESS_TOKEN:
            return self.MOAC_RPC_ACCESS_TOKEN
        if self.MOAC_RPC_USER and self.MOAC_RPC_PASSWORD:
            from moacchain.services.moac_rpc import basic_auth

            return basic_auth(self.MOAC_RPC_USER, self.MOAC_RPC_PASSWORD)
        return None


# Глобальный экземпляр настроек
settings = Settings()
