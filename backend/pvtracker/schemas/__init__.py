from pvtracker.schemas.installation import InstallationCreate
from pvtracker.schemas.report import ProductionReportCreate

__all__ = ['InstallationCreate', 'ProductionReportCreate']
