"""
Support utilities shared by the algebra and rotations packages.
"""

from photomath.utilities.options import UserOptions
from photomath.utilities.mixin_classes import UserOptionConfigured

__all__ = ["UserOptions", "UserOptionConfigured"]
