"""Data access for installations and production reports."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from pvtracker.models.installation import Installation
from pvtracker.models.report import ProductionReport


class InstallationRepository:
    def __init__(self, db: Session):
        self.db = db

    def find(self, installation_id: int) -> Optional[Installation]:
        return self.db.get(Installation, installation_id)

    def insert(self, installation: Installation) -> Installation:
        self.db.add(installation)
        self.db.commit()
        self.db.refresh(installation)
        return installation

    def update(self, installation: Installation) -> Installation:
        self.db.add(installation)
        self.db.commit()
        self.db.refresh(installation)
        return installation


class ReportRepository:
    def __init__(self, db: Session):
        self.db = db

    def insert(self, report: ProductionReport) -> ProductionReport:
        self.db.add(report)
        self.db.commit()
        self.db.refresh(report)
        return report

    def query_by_range(self, installation_id: int, start: datetime, end: datetime) -> List[ProductionReport]:
        """Reports of one installation with start <= timestamp < end, oldest first."""
        return (
            self.db.query(ProductionReport)
            .filter(ProductionReport.installation_id == installation_id)
            .filter(ProductionReport.timestamp >= start)
            .filter(ProductionReport.timestamp < end)
            .order_by(ProductionReport.timestamp, ProductionReport.id)
            .all()
        )

    def sum_produced(self, installation_id: int, start: datetime, end: datetime) -> float:
        total = (
            self.db.query(func.coalesce(func.sum(ProductionReport.produced_wattage), 0.0))
            .filter(ProductionReport.installation_id == installation_id)
            .filter(ProductionReport.timestamp >= start)
            .filter(ProductionReport.timestamp < end)
            .scalar()
        )
        return float(total)
