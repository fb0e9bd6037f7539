from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "json"  # "json" | "memory"
    STORE_DATA_DIR: str = "./data/storage"
    RESERVATIONS_STORAGE_KEY: str = "reservations"

    SHOW_BOOKED_DEFAULT: bool = True


settings = Settings()
