from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductionReportCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    produced_wattage: float = Field(..., alias="producedWattage")
    household_wattage: float = Field(..., alias="householdWattage")
    battery_wattage: float = Field(..., alias="batteryWattage")
    grid_wattage: float = Field(..., alias="gridWattage")
    # Ignored: the installation id from the path is used
    pv_installation_id: Optional[int] = Field(default=None, alias="pvInstallationId")
