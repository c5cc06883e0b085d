from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Deployed IDL Protocol program (devnet default)
    PROGRAM_ID: str = "BSn7neicVV2kEzgaZmd6tZEBm4tdgzBRyELov65Lq7dt"

    # Which registered ProtocolConstants version the program was built with
    PROTOCOL_CONSTANTS_VERSION: int = 1


settings = Settings()
