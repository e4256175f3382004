from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str


class ModelStatus(BaseModel):
    loaded: bool
    path: str | None = None
    error: str | None = None
