"""
This package contains helpful mixin classes to provide basic functionality throughout photomath.
"""

from photomath.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["UserOptionConfigured"]
