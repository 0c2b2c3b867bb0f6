"""
The base class for the options dataclasses that configure photomath objects.
"""

from dataclasses import dataclass, fields

from typing import Any

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    Base dataclass for the settings of a configurable class.

    Each configurable class ``Name`` has a ``NameOptions`` dataclass deriving from this one, whose field defaults are
    the defaults of the class.  An instance of it is given as the ``options`` keyword argument and its fields become
    attributes of the configured object (see :class:`.UserOptionConfigured`):

        >>> from photomath.algebra import LuDecomposition, LuDecompositionOptions
        >>> lu = LuDecomposition([[4., 3.], [6., 3.]], options=LuDecompositionOptions(zero_pivot_policy='raise'))
        >>> lu.zero_pivot_policy
        'raise'

    Subclasses that need to reconcile fields with each other do so in :meth:`override_options`.
    """

    def override_options(self):
        """
        Hook called before the options are read, for adjusting fields that depend on each other.
        """
        pass

    def apply_options(self, target: object) -> None:
        """
        Sets each field of these options as an attribute of ``target``.

        :param target: the object to configure
        """
        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> dict[str, Any]:
        """
        The dataclass fields and their values after :meth:`override_options` has run.
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}
