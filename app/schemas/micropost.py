"""Response schema for microposts and feed entries."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class MicropostRead(BaseModel):
    """Micropost as exposed to callers."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    content: str
    created_at: datetime
