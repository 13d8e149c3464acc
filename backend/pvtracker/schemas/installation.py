from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class InstallationCreate(BaseModel):
    """Registration body. Range and length checks happen in the service layer."""

    model_config = ConfigDict(populate_by_name=True)

    longitude: float
    latitude: float
    address: Optional[str] = None
    owner_name: Optional[str] = Field(default=None, alias="ownerName")
    # Accepted for compatibility, always overridden to True
    is_active: Optional[bool] = Field(default=None, alias="isActive")
    comments: Optional[str] = None
