from .coverage_schema import (
    CoatingLayer,
    CoatingSystem,
    CoverageResult,
    CoverageSpec,
    LayerResult,
    MultiCoatResult,
    MultiCoatSpec,
    SystemSummary,
)
from .environmental_schema import (
    DewPointResult,
    DewPointSpec,
    OptimalConditions,
    TemperatureRange,
    VOCResult,
    VOCSpec,
    WeatherForecast,
    WeatherWindowResult,
)
from .cost_schema import (
    CurrentSystem,
    CurrentSystemCost,
    ProjectCostResult,
    ProjectCostSpec,
    ProjectCostSummary,
    ProjectSurface,
    ProposedSystem,
    ProposedSystemSavings,
    ROIMetrics,
    ROIResult,
    ROISpec,
    SurfaceCostLine,
)
from .technical_schema import (
    AreaMeasurement,
    CoatBuild,
    Deduction,
    Dimensions,
    FilmBuildResult,
    MixRatioResult,
    ProfileDepthResult,
    SolventReductionResult,
    SurfaceAreaResult,
    SurfaceAreaSpec,
    WFTResult,
    WFTSpec,
)
