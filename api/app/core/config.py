"""
Configuracion central de la aplicacion.
Gestiona variables de entorno y configuraciones globales.
Las credenciales de Supabase se leen del entorno (o de un archivo .env).
"""
import json
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


# Origenes conocidos del frontend (desarrollo local y GitHub Pages)
DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:5174",
    "http://localhost:4173",
    "https://egarpxmaster.github.io",
]


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    Lee variables de entorno y proporciona valores por defecto.
    """

    # Configuracion de la aplicacion
    APP_NAME: str = Field(default="Datos API")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Configuracion del servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=5000)

    # Supabase
    SUPABASE_URL: str = Field(default="")
    SUPABASE_KEY: str = Field(default="")
    SUPABASE_TABLE: str = Field(default="datos")
    SUPABASE_TIMEOUT_S: float = Field(default=30.0)

    # CORS (acepta lista JSON, "*" o lista separada por comas)
    CORS_ORIGINS: str = Field(default=json.dumps(DEFAULT_CORS_ORIGINS))

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env


def get_cors_origins(cors_string: str) -> List[str]:
    """
    Parsea la configuracion de CORS.
    Acepta "*" para todos los origenes o una lista JSON.
    """
    if cors_string == "*":
        return ["*"]
    try:
        return json.loads(cors_string)
    except json.JSONDecodeError:
        # Si no es JSON valido, retornar como lista simple
        return [origin.strip() for origin in cors_string.split(",") if origin.strip()]


# Instancia global de configuracion
settings = Settings()
