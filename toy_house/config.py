from urllib.parse import quote_plus

from pydantic_settings import BaseSettings

ATLAS_URI_OPTIONS = "retryWrites=true&w=majority&appName=Cluster0"
LOCAL_MONGO_URI = "mongodb://localhost:27017"


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    DB_USER: str | None = None
    DB_PASS: str | None = None
    MONGO_CLUSTER_HOST: str = "cluster0.at16f.mongodb.net"

    # Full connection string, takes precedence over DB_USER / DB_PASS
    MONGO_URI: str | None = None
    MONGO_DB: str = "toyHouse"
    MONGO_COLLECTION: str = "toys"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def mongo_uri(self) -> str:
        if self.MONGO_URI:
            return self.MONGO_URI
        if not (self.DB_USER and self.DB_PASS):
            return LOCAL_MONGO_URI
        user = quote_plus(self.DB_USER)
        password = quote_plus(self.DB_PASS)
        return f"mongodb+srv://{user}:{password}@{self.MONGO_CLUSTER_HOST}/?{ATLAS_URI_OPTIONS}"

settings = Settings()
