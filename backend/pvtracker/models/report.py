from sqlalchemy import Column, DateTime, Float, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from pvtracker.database import Base


class ProductionReport(Base):
    __tablename__ = "productionReports"

    id = Column("ID", Integer, primary_key=True)
    timestamp = Column("Timestamp", DateTime, nullable=False)
    produced_wattage = Column("ProducedWattage", Float, nullable=False)
    household_wattage = Column("HouseholdWattage", Float, nullable=False)
    battery_wattage = Column("BatteryWattage", Float, nullable=False)
    grid_wattage = Column("GridWattage", Float, nullable=False)
    installation_id = Column(
        "PvInstallationId",
        Integer,
        ForeignKey("pvInstallations.ID", ondelete="CASCADE"),
        nullable=False,
    )

    installation = relationship("Installation", back_populates="production_reports")

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "producedWattage": self.produced_wattage,
            "householdWattage": self.household_wattage,
            "batteryWattage": self.battery_wattage,
            "gridWattage": self.grid_wattage,
            "pvInstallationId": self.installation_id,
        }


Index("IX_productionReports_PvInstallationId", ProductionReport.installation_id)


def placeholder_report(timestamp):
    """Timeline entry for a minute without a stored report. Never persisted."""
    return {
        "id": None,
        "timestamp": timestamp.isoformat(),
        "producedWattage": 0.0,
        "householdWattage": 0.0,
        "batteryWattage": 0.0,
        "gridWattage": 0.0,
        "pvInstallationId": None,
    }
