"""
Configuración centralizada de la aplicación
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "Bikestore Reports API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Reportes de solo lectura sobre la base de datos de la tienda de bicicletas"

    # Database
    DATABASE_URL: str = "postgresql+psycopg2://localhost:5432/bikestores"
    DB_ECHO: bool = False

    # Report parameters (defaults reproduce the standard report run)
    REPORT_STAFF_ID: int = 3
    REPORT_CATEGORY_NAME: str = "Mountain Bikes"
    REPORT_MODEL_YEAR: int = 2020
    REPORT_CATEGORY_ID: int = 1
    REPORT_PRODUCT_ID: int = 1

    # Formatting
    CURRENCY_SYMBOL: str = "$"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
