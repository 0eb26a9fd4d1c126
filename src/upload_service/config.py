from pydantic import BaseModel


class UploadSettings(BaseModel):
    """Fixed runtime parameters of the upload service."""

    host: str = "127.0.0.1"
    port: int = 3000
    upload_dir: str = "./data"
    log_level: str = "INFO"


settings = UploadSettings()

__all__ = ["UploadSettings", "settings"]
