from pydantic import BaseModel


class GreetingSettings(BaseModel):
    """Fixed runtime parameters of the greeting service."""

    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


settings = GreetingSettings()

__all__ = ["GreetingSettings", "settings"]
