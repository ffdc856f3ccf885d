from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "Payment Optimizer"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Payment rules: id of the reserved loyalty-points method
    POINTS_METHOD_ID: str = "PUNKTY"

    # Safety cap: exhaustive search grows exponentially with the batch size.
    # 0 disables the cap.
    MAX_ORDERS: int = 25


settings = Settings()
