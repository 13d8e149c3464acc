# Import all models so they are registered with Base.metadata
from pvtracker.models.installation import Installation
from pvtracker.models.report import ProductionReport

__all__ = ['Installation', 'ProductionReport']
