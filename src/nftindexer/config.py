from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="NFTINDEXER_", env_file=".env")

    db_host: str = "localhost"
    db_port: int = 54377
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "nftindexer"
    network: str = "ethereum"
    zero_address: str = "0x0000000000000000000000000000000000000000"
    # Empty = use the built-in table for the network
    land_registry_address: str = ""
    estate_registry_address: str = ""
    dcl_registrar_address: str = ""
    wearable_collections: list[str] = []
    # JSON files; empty = no wearable definitions / no plazas or roads
    wearable_catalog_path: str = ""
    land_map_path: str = ""
    debug: bool = False
    log_level: str = "INFO"

    @property
    def database_url(self) -> str:
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"


settings = Settings()
