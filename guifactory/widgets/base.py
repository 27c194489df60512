"""Abstract interfaces for widget products and the factories that build them."""

import sys
from abc import ABC, abstractmethod


class Widget(ABC):
    """Common base for every product in a widget family.

    Products are stateless. The class-level tags identify the family
    (variant) and the product type (kind). Concrete widgets must define
    label, the exact line written by paint().
    """

    variant = None   # 'win' or 'mac'
    kind = None      # 'button' or 'checkbox'

    @property
    @abstractmethod
    def label(self):
        """Line written by paint(); concrete widgets set it as a class attribute."""
        pass

    def paint(self, out=None):
        """Write this widget's label as one line to out (default: stdout)."""
        print(self.label, file=out if out is not None else sys.stdout)

    def __repr__(self):
        return f"{type(self).__name__}(variant={self.variant!r}, kind={self.kind!r})"


class Button(Widget):
    """Abstract button product."""

    kind = 'button'


class CheckBox(Widget):
    """Abstract checkbox product."""

    kind = 'checkbox'


class GUIFactory(ABC):
    """Abstract factory for one family of widgets.

    Both creation methods on the same factory return products of the
    factory's own variant, as a new instance on every call.
    """

    variant = None

    @abstractmethod
    def create_button(self):
        """Return a new Button of this factory's variant."""
        pass

    @abstractmethod
    def create_checkbox(self):
        """Return a new CheckBox of this factory's variant."""
        pass

    def __repr__(self):
        return f"{type(self).__name__}(variant={self.variant!r})"
