from sqlalchemy import Boolean, Column, Float, Integer, String
from sqlalchemy.orm import relationship

from pvtracker.database import Base


class Installation(Base):
    __tablename__ = "pvInstallations"

    id = Column("ID", Integer, primary_key=True)
    longitude = Column("Longitude", Float, nullable=False)
    latitude = Column("Latitude", Float, nullable=False)
    address = Column("Address", String(1024), nullable=False)
    owner_name = Column("OwnerName", String(512), nullable=False)
    is_active = Column("isActive", Boolean, nullable=False, default=True)
    comments = Column("Comments", String(1024), nullable=True)

    # Reports go with the installation when it is deleted at the storage level
    production_reports = relationship(
        "ProductionReport",
        back_populates="installation",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def to_dict(self):
        return {
            "id": self.id,
            "longitude": self.longitude,
            "latitude": self.latitude,
            "address": self.address,
            "ownerName": self.owner_name,
            "isActive": self.is_active,
            "comments": self.comments,
        }

    def __repr__(self):
        return f"<Installation(id={self.id}, owner={self.owner_name!r}, active={self.is_active})>"
