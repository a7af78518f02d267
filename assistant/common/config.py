from pydantic import BaseModel
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseModel):
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    session_max: int = int(os.getenv("SESSION_MAX", "1000"))
    budget_low_max: float = float(os.getenv("BUDGET_LOW_MAX", "500"))
    budget_medium_max: float = float(os.getenv("BUDGET_MEDIUM_MAX", "1500"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "5000"))


settings = Settings()
