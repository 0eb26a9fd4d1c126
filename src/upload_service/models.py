from pydantic import BaseModel, Field

NO_FILE_UPLOADED = "No file uploaded"


class UploadResponse(BaseModel):
    saved: str = Field(
        ...,
        description="Path the file was written to, or 'No file uploaded'",
        examples=["./data/a.txt"],
    )


class AudioUpload(BaseModel):
    """Multipart form accepted by ``POST /upload``."""

    file: bytes = Field(..., description="The audio file (multipart/form-data)")
