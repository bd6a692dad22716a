# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Numerical cross-check of analytic force-model partials.

Central finite differences of an acceleration function with respect to
position, for validating the analytic ∂a/∂r a force model reports.
"""
from typing import Callable

import numpy as np

Vec3 = tuple[float, float, float]


def numerical_position_jacobian(
    accel_fn: Callable[[Vec3], Vec3],
    position: Vec3,
    step_m: float = 1.0e4,
) -> np.ndarray:
    """3x3 Jacobian ∂a/∂r by central differences.

    The step must be large enough for the acceleration change to dominate
    rounding. For heliocentric distances (~1e11 m) 10 km keeps truncation
    error near 1e-14 relative.

    Args:
        accel_fn: Acceleration as a function of position (m → m/s²).
        position: Evaluation point (m).
        step_m: Perturbation applied to each axis (m).

    Returns:
        3x3 numpy array, column j = ∂a/∂r_j.
    """
    if step_m <= 0:
        raise ValueError(f"step_m must be positive, got {step_m}")

    jac = np.zeros((3, 3))
    for axis in range(3):
        plus = list(position)
        plus[axis] += step_m
        minus = list(position)
        minus[axis] -= step_m
        a_plus = np.array(accel_fn((plus[0], plus[1], plus[2])))
        a_minus = np.array(accel_fn((minus[0], minus[1], minus[2])))
        jac[:, axis] = (a_plus - a_minus) / (2.0 * step_m)
    return jac


def relative_jacobian_error(analytic, numeric) -> float:
    """max |analytic - numeric| / max |numeric|, or the absolute error if numeric is zero."""
    a = np.asarray(analytic, dtype=float)
    n = np.asarray(numeric, dtype=float)
    scale = float(np.max(np.abs(n)))
    err = float(np.max(np.abs(a - n)))
    if scale == 0.0:
        return err
    return err / scale
