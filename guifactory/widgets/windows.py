"""Windows widget family."""

import logging

from guifactory.widgets.base import Button, CheckBox, GUIFactory

logger = logging.getLogger(__name__)


class WinButton(Button):
    variant = 'win'
    label = 'Paint Win Button'


class WinCheckBox(CheckBox):
    variant = 'win'
    # Checkbox label intentionally matches the button label.
    label = 'Paint Win Button'


class WinFactory(GUIFactory):
    variant = 'win'

    def create_button(self):
        logger.debug("WinFactory: creating WinButton")
        return WinButton()

    def create_checkbox(self):
        logger.debug("WinFactory: creating WinCheckBox")
        return WinCheckBox()
