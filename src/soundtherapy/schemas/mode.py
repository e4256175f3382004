from pydantic import BaseModel


class TherapyModeRead(BaseModel):
    mode: str
    label: str
    description: str
    requires_unlock: bool = False
    unlocked: bool = True

    model_config = {"from_attributes": True}
