"""Platform-specific widget families."""

VARIANTS = ('win', 'mac')

_ALIASES = {
    'win': 'win',
    'windows': 'win',
    'mac': 'mac',
    'macos': 'mac',
    'darwin': 'mac',
}


def get_factory(variant):
    """Return a new factory for the named widget family.

    Selection is by name only; the running OS is never inspected.
    """
    key = _ALIASES.get(str(variant).strip().lower())
    if key == 'win':
        from guifactory.widgets.windows import WinFactory
        return WinFactory()
    elif key == 'mac':
        from guifactory.widgets.macos import MacFactory
        return MacFactory()
    else:
        raise ValueError(
            f"Unknown widget variant: {variant!r} "
            f"(expected one of: {', '.join(VARIANTS)})"
        )
