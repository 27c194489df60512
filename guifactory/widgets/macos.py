"""Mac widget family."""

import logging

from guifactory.widgets.base import Button, CheckBox, GUIFactory

logger = logging.getLogger(__name__)


class MacButton(Button):
    variant = 'mac'
    label = 'Paint Mac Button'


class MacCheckBox(CheckBox):
    variant = 'mac'
    # Intentionally lowercase "mac" and reuses the button wording.
    label = 'Paint mac Button'


class MacFactory(GUIFactory):
    variant = 'mac'

    def create_button(self):
        logger.debug("MacFactory: creating MacButton")
        return MacButton()

    def create_checkbox(self):
        logger.debug("MacFactory: creating MacCheckBox")
        return MacCheckBox()
