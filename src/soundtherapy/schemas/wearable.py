from pydantic import BaseModel


class WearableStatus(BaseModel):
    source_type: str
    connected: bool
