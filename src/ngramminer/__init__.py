from .dsl import StepSequenceBuilder, hive_step, define
from .model import Step, RunParameters, JobRequest, InstanceTopology
from .runner import Analyzer, plan_steps
from .validation import ValidationError, validate_run_parameters

__all__ = [
    "StepSequenceBuilder",
    "hive_step",
    "define",
    "Step",
    "RunParameters",
    "JobRequest",
    "InstanceTopology",
    "Analyzer",
    "plan_steps",
    "ValidationError",
    "validate_run_parameters",
]
