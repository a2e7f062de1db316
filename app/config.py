from pydantic import BaseModel
import os
from dotenv import load_dotenv

load_dotenv()


def _mongo_uri() -> str:
    uri = os.getenv("MONGO_URI")
    if uri:
        return uri
    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASSWORD")
    host = os.getenv("DB_HOST")
    if user and password and host:
        return f"mongodb+srv://{user}:{password}@{host}/?retryWrites=true&w=majority"
    return "mongodb://localhost:27017"


def _origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS")
    if not raw:
        return ["https://volunizehub.web.app", "https://volunizehub.firebaseapp.com"]
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    ACCESS_TOKEN_SECRET: str = os.getenv("ACCESS_TOKEN_SECRET", "secret")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "30"))
    TOKEN_COOKIE: str = "token"
    CORS_ORIGINS: list[str] = _origins()
    MONGO_URI: str = _mongo_uri()
    DB_NAME: str = os.getenv("DB_NAME", "Volunize-Hub")
    POST_COLLECTION: str = "volunteer-post"
    REQUEST_COLLECTION: str = "volunteer-request"
    PREVIEW_LIMIT: int = 6
    ENVIRONMENT: str = os.getenv("NODE_ENV") or os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    PORT: int = int(os.getenv("PORT", "5000"))

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
