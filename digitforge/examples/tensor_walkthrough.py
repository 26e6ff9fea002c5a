"""
Tensor API Walkthrough.

A narrated tour of the torch tensor basics every other part of the project
builds on. Each step logs what it does and records the observed value, so
the tour doubles as an executable check of the library's behavior.

Steps:
    1. Creating scalars and the data type each Python value maps to
    2. Converting between data types
    3. Element-wise math
    4. Device placement
    5. Shapes, broadcasting and reshaping
"""

# Standard Imports
import logging
import math
from typing import Any, Dict, Optional

# Third-Party Imports
import torch

# Internal Imports
from ..core import LOGGER_NAME, Logger, LogStyle, detect_best_device


def _section(log: logging.Logger, title: str) -> None:
    log.info("")
    log.info(LogStyle.LIGHT)
    log.info(title)
    log.info(LogStyle.LIGHT)


def run_walkthrough(log: Optional[logging.Logger] = None) -> Dict[str, Any]:
    """
    Runs every step of the tour.

    Args:
        log: Destination of the narration (project logger by default).

    Returns:
        Observed values keyed by step, e.g. ``result["dtypes"]["almost_pi"]``.
    """
    log = log or logging.getLogger(LOGGER_NAME)
    observed: Dict[str, Any] = {}

    # 1. Scalars and data types
    _section(log, "1. Scalars and data types")
    almost_pi = torch.tensor(math.pi, dtype=torch.float32)
    almost_e = torch.tensor(math.e, dtype=torch.float64)
    one = torch.tensor(1, dtype=torch.int8)
    the_answer = torch.tensor(42, dtype=torch.int32)
    big = torch.tensor(2**63 - 1)
    is_true = torch.tensor(True)

    observed["dtypes"] = {
        "almost_pi": almost_pi.dtype,
        "almost_e": almost_e.dtype,
        "one": one.dtype,
        "the_answer": the_answer.dtype,
        "big": big.dtype,
        "is_true": is_true.dtype,
        # Python floats default to float32, Python ints to int64
        "default_float": torch.tensor(1.5).dtype,
        "default_int": torch.tensor(7).dtype,
    }
    for name, dtype in observed["dtypes"].items():
        log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {name:<14}: {dtype}")

    # 2. Conversion
    _section(log, "2. Converting data types")
    half_pi = almost_pi.to(torch.float16)
    answer_u8 = the_answer.to(torch.uint8)
    observed["conversion"] = {
        "half_pi": half_pi.dtype,
        "answer_u8": answer_u8.dtype,
        "answer_u8_value": int(answer_u8),
        # .to() returns a new tensor, the source keeps its type
        "source_unchanged": the_answer.dtype,
    }
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} float32 -> {half_pi.dtype}")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} int32 -> {answer_u8.dtype} (value {int(answer_u8)})")

    # 3. Element-wise math
    _section(log, "3. Element-wise math")
    sin_pi = float(almost_pi.sin())
    values = torch.linspace(0.0, math.pi, steps=5)
    observed["math"] = {
        "sin_pi": sin_pi,
        "sines": values.sin().tolist(),
        "sum": float(values.sum()),
    }
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} sin(float32 pi) = {sin_pi:.6e}")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} sin over {values.tolist()}")

    # 4. Devices
    _section(log, "4. Device placement")
    best = torch.device(detect_best_device())
    on_best = almost_pi.to(best)
    observed["device"] = {
        "default": almost_pi.device.type,
        "best": best.type,
        "moved": on_best.device.type,
    }
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} created on {almost_pi.device}, moved to {on_best.device}")

    # 5. Shapes
    _section(log, "5. Shapes, broadcasting and reshaping")
    scalar_sum = torch.tensor(2) + torch.tensor(2)
    range_sum = torch.arange(0, 8) + torch.arange(10, 18)
    broadcast_scalar = torch.arange(0, 8) + torch.tensor(2)
    matrix = torch.arange(0, 8).reshape(4, 2)
    broadcast_row = matrix + torch.tensor([100, 1000])
    observed["shapes"] = {
        "scalar_sum": int(scalar_sum),
        "scalar_shape": tuple(scalar_sum.shape),
        "range_sum": range_sum.tolist(),
        "broadcast_scalar": broadcast_scalar.tolist(),
        "matrix_shape": tuple(matrix.shape),
        "broadcast_row": broadcast_row.tolist(),
    }
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} 2 + 2 = {int(scalar_sum)}")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} [0..8) + [10..18) = {range_sum.tolist()}")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} [0..8) + 2 = {broadcast_scalar.tolist()}")
    log.info(f"{LogStyle.INDENT}{LogStyle.ARROW} [4, 2] + [100, 1000] = {broadcast_row.tolist()}")

    return observed


def main() -> None:
    """Entry point of ``digitforge-tensors``."""
    run_walkthrough(Logger.setup(name=LOGGER_NAME))


if __name__ == "__main__":
    main()
