from unittest import TestCase

from dataclasses import dataclass

from photomath.utilities import UserOptions, UserOptionConfigured


@dataclass
class WidgetOptions(UserOptions):
    size: int = 5
    scale: float = -32.1


class Widget(UserOptionConfigured[WidgetOptions], WidgetOptions):
    def __init__(self, options: WidgetOptions | None = None):
        super().__init__(WidgetOptions, options=options)


@dataclass
class ClampedOptions(UserOptions):
    low: float = 0.0
    high: float = 1.0

    def override_options(self):
        if self.high < self.low:
            self.high = self.low


class TestUserOptions(TestCase):

    def test_options_dict(self):

        self.assertEqual(WidgetOptions().options_dict, {'size': 5, 'scale': -32.1})

    def test_apply_options(self):

        class Target:
            pass

        target = Target()
        WidgetOptions(size=3).apply_options(target)

        self.assertEqual(target.size, 3)
        self.assertEqual(target.scale, -32.1)

    def test_override_options(self):

        self.assertEqual(ClampedOptions(low=2.0, high=1.0).options_dict, {'low': 2.0, 'high': 2.0})


class TestUserOptionConfigured(TestCase):

    def test_defaults(self):

        widget = Widget()

        self.assertEqual(widget.size, 5)
        self.assertEqual(widget.scale, -32.1)

    def test_options(self):

        options = WidgetOptions(size=10)
        widget = Widget(options=options)

        self.assertEqual(widget.size, 10)
        self.assertIs(widget.original_options, options)

    def test_reset_settings(self):

        widget = Widget(WidgetOptions(size=7))
        widget.size = 1
        widget.scale = 0

        widget.reset_settings()

        self.assertEqual(widget.size, 7)
        self.assertEqual(widget.scale, -32.1)

    def test_original_options_setter(self):

        widget = Widget()
        widget.original_options = WidgetOptions(size=2)
        widget.reset_settings()

        self.assertEqual(widget.size, 2)

    def test_current_options(self):

        widget = Widget(WidgetOptions(size=7))
        widget.scale = 2.5

        current = widget.current_options()

        self.assertIsInstance(current, WidgetOptions)
        self.assertEqual(current, WidgetOptions(size=7, scale=2.5))
        self.assertEqual(widget.original_options, WidgetOptions(size=7))
