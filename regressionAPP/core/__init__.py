from .batch_step import BatchGradientStep
from .config import RunConfig
from .convergence import has_converged, parameter_change
from .dataset import Dataset, generate_dataset
from .engine import OptimizationEngine, OptimizationRunResult, RunStatus, optimize
from .errors import InvalidConfigurationError
from .functions import (
    ORACLES,
    GradientOracle,
    analytic_gradient,
    cost,
    fitted_values,
    hypothesis,
    total_cost,
)
from .iteration_result import IterationResult
from .results_summary import ResultsSummary
from .step_base import StepExecutor, StepResult

__all__ = [
    "BatchGradientStep",
    "RunConfig",
    "has_converged",
    "parameter_change",
    "Dataset",
    "generate_dataset",
    "OptimizationEngine",
    "OptimizationRunResult",
    "RunStatus",
    "optimize",
    "InvalidConfigurationError",
    "ORACLES",
    "GradientOracle",
    "analytic_gradient",
    "cost",
    "fitted_values",
    "hypothesis",
    "total_cost",
    "IterationResult",
    "ResultsSummary",
    "StepExecutor",
    "StepResult",
]
