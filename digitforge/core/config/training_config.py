"""
Optimization Configuration Schema.

Declarative schema for the training loop: epochs, batch size, optimizer and
learning rate schedule, and the global seed. Boundary validation rejects
unstable settings before the first batch is processed.
"""

# Standard Imports
import argparse

# Third-Party Imports
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Internal Imports
from .types import (
    BatchSize,
    LearningRate,
    Momentum,
    OptimizerName,
    PositiveInt,
    Probability,
    SchedulerName,
    WeightDecay,
)


class TrainingConfig(BaseModel):
    """
    Optimization landscape and scheduling strategies.

    Validates training hyperparameters and provides structure for
    reproducibility, optimization and scheduling.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # ==================== Reproducibility ====================
    seed: int = Field(default=42, description="Random seed")

    # ==================== Training Loop ====================
    batch_size: BatchSize = Field(default=256, description="Samples per batch")
    epochs: PositiveInt = Field(default=3, description="Passes over the training data")
    use_tqdm: bool = Field(default=True, description="Progress bar activation")

    # ==================== Optimization ====================
    optimizer_type: OptimizerName = Field(
        default="adam",
        description="Optimizer: 'adam', 'adamw', 'sgd'",
    )
    learning_rate: LearningRate = Field(default=1e-3, description="Initial learning rate")
    momentum: Momentum = Field(default=0.9, description="SGD momentum")
    weight_decay: WeightDecay = Field(default=0.0, description="L2 regularization")

    # ==================== Scheduler ====================
    scheduler_type: SchedulerName = Field(
        default="none",
        description="LR scheduler: 'none', 'cosine', 'step'",
    )
    min_lr: float = Field(default=1e-6, ge=0.0, description="Cosine annealing floor")
    step_size: PositiveInt = Field(default=1, description="StepLR decay period")
    scheduler_factor: Probability = Field(default=0.1, description="StepLR decay factor")

    @model_validator(mode="after")
    def validate_lr(self) -> "TrainingConfig":
        if self.min_lr > self.learning_rate:
            raise ValueError(
                f"min_lr={self.min_lr} must be <= learning_rate={self.learning_rate}."
            )
        return self

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "TrainingConfig":
        """
        Factory from CLI arguments.

        Only overrides schema fields present in args and not None.

        Args:
            args: Parsed command-line arguments

        Returns:
            TrainingConfig with CLI-overridden values
        """
        args_dict = vars(args)
        valid_fields = cls.model_fields.keys()
        params = {k: v for k, v in args_dict.items() if k in valid_fields and v is not None}
        return cls(**params)
