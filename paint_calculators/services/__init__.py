from .coverage_engine import CoverageEngine
from .cost_engine import CostEngine, SurfaceCondition, SurfaceType
from .environmental_engine import EnvironmentalEngine
from .logging_config import JSONFormatter, setup_logging
from .technical_engine import ApplicationMethod, BlastMedia, Shape, TechnicalEngine
