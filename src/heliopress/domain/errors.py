# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Error types raised by the radiation pressure force model.

Both derive from ValueError so callers that already guard force-model
evaluation with ``except ValueError`` keep working.
"""


class DegenerateGeometryError(ValueError):
    """Spacecraft/Sun/occluder geometry admits no finite result."""


class InvalidPhysicalPropertyError(ValueError):
    """A spacecraft physical property violates a model precondition."""
