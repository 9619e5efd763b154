from __future__ import annotations
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.schemas.product import ProductCreate

class Settings(BaseSettings):
    # App
    APP_ENV: str = Field("dev")
    APP_TITLE: str = "produtos-api"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"
    BUILD_SHA: str = ""

    # HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ROOT_PATH: str = ""
    DISABLE_DOCS: bool = False
    CORS_ORIGINS: str = Field("*", description="Listă separată prin virgulă; gol = CORS dezactivat")

    # Produse create la pornire, ex: SEED_PRODUCTS='[{"nome": "Produto A", "preco": 100.0}]'
    SEED_PRODUCTS: List[ProductCreate] = Field(default_factory=list)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
