"""Application settings and validation."""

import os


class Settings:
    ENV: str
    HOST: str
    PORT: int
    LOG_LEVEL: str
    DOCS_PATH: str
    PUBLIC_URL: str
    ALLOW_DEV_CORS: bool

    def __init__(self):
        self.ENV = os.getenv("ENV", "dev").lower()
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", "3000"))
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.DOCS_PATH = os.getenv("DOCS_PATH", "/api-docs")
        self.PUBLIC_URL = os.getenv("PUBLIC_URL", f"http://localhost:{self.PORT}").rstrip("/")
        self.ALLOW_DEV_CORS = os.getenv("ALLOW_DEV_CORS", "true").lower() == "true"
        self._validate()

    def _validate(self):
        if not 0 < self.PORT < 65536:
            raise RuntimeError(f"PORT must be between 1 and 65535, got {self.PORT}")
        if not self.DOCS_PATH.startswith("/"):
            raise RuntimeError("DOCS_PATH must start with '/'")


settings = Settings()
