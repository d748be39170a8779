from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UploadRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filename: str
    storage_url: str = Field(alias="storageUrl")
    uploaded_at: datetime = Field(alias="uploadedAt")


class UploadResponse(BaseModel):
    message: str
    url: str


class ErrorResponse(BaseModel):
    error: str
