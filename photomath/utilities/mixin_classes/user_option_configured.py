"""
This module provides the :class:`UserOptionConfigured` mixin which configures a class from a :class:`.UserOptions`
dataclass.

The options are copied onto the instance as attributes, so they can be changed per instance after construction.  The
options given at construction are kept so that :meth:`~UserOptionConfigured.reset_settings` can restore them, and
:meth:`~UserOptionConfigured.current_options` snapshots the attribute values into a new options instance (which is
how matrices produced by arithmetic inherit the settings of their left operand)::

    >>> from photomath.algebra import Matrix, MatrixOptions
    >>> a = Matrix([[1., 2.], [3., 4.]], options=MatrixOptions(bounds_check=False))
    >>> a.singular_tolerance = 1e-12
    >>> (2 * a).singular_tolerance
    1e-12
    >>> a.reset_settings()
    >>> a.singular_tolerance
    0.0

:class:`UserOptionConfigured` must come before the options class in the bases so that its ``__init__`` runs first.
"""

from dataclasses import fields

from typing import Generic, TypeVar

from photomath.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin that applies a :class:`.UserOptions` instance to ``self`` and remembers it.

    Subclasses pass their options type to ``__init__``:

    .. code::

        class LuDecomposition(UserOptionConfigured[LuDecompositionOptions], LuDecompositionOptions):
            def __init__(self, matrix, options=None):
                super().__init__(LuDecompositionOptions, options=options)

    When ``options`` is ``None`` the defaults of the options type are used.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The :class:`.UserOptions` subclass that configures this class
        :param options: The options to apply.  If ``None`` then ``options_type()`` is used
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._options_type: type[OptionsT] = options_type

        self._original_options: OptionsT = options
        """
        The options this instance was constructed with
        """

    def reset_settings(self) -> None:
        """
        Restores every option attribute to the value it had at construction.
        """

        self._original_options.apply_options(self)

    def current_options(self) -> OptionsT:
        """
        Returns a new options instance holding the current values of the option attributes of ``self``.
        """

        return self._options_type(**{field.name: getattr(self, field.name) for field in fields(self._options_type)})

    @property
    def original_options(self) -> OptionsT:
        """
        The options used by :meth:`reset_settings`.

        The object is shared, not copied, so changing it changes what a reset restores.
        """
        return self._original_options

    @original_options.setter
    def original_options(self, value: OptionsT) -> None:
        self._original_options = value
