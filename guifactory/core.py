"""Client-side orchestration: works with factories and products only
through their abstract interfaces."""

import logging

logger = logging.getLogger(__name__)

# Operations an object must expose to be used as a widget factory.
FACTORY_OPERATIONS = ('create_button', 'create_checkbox')


class InvalidFactoryError(TypeError):
    """Raised when an object handed to the client is not a widget factory."""


class MixedFamilyError(ValueError):
    """Raised when widgets from different variants end up together."""


def _validate_factory(factory):
    missing = [name for name in FACTORY_OPERATIONS
               if not callable(getattr(factory, name, None))]
    if missing:
        raise InvalidFactoryError(
            f"{type(factory).__name__} is not a widget factory "
            f"(missing: {', '.join(missing)})"
        )


def check_family(products):
    """Return the variant shared by all products.

    Raises MixedFamilyError if the products span more than one variant,
    and ValueError if there are no products at all.
    """
    variants = {getattr(p, 'variant', None) for p in products}
    if not variants:
        raise ValueError("No products to check")
    if len(variants) > 1:
        names = ', '.join(sorted(str(v) for v in variants))
        raise MixedFamilyError(f"Products from mixed variants: {names}")
    return variants.pop()


def application(factory, paint=False, out=None):
    """
    Main entry point: build one button and one checkbox from factory.

    Each creation operation is called exactly once, button first.
      paint: if True, paint both widgets to out (default: stdout) in
             creation order.

    Returns the (button, checkbox) pair.
    """
    _validate_factory(factory)
    logger.debug(f"Running application with {factory!r}")

    button = factory.create_button()
    checkbox = factory.create_checkbox()

    variant = check_family([button, checkbox])
    factory_variant = getattr(factory, 'variant', None)
    if factory_variant is not None and factory_variant != variant:
        raise MixedFamilyError(
            f"{type(factory).__name__} declares variant {factory_variant!r} "
            f"but produced {variant!r} widgets"
        )
    logger.debug(f"Created {button!r} and {checkbox!r}")

    if paint:
        button.paint(out)
        checkbox.paint(out)

    return button, checkbox


def describe_product(product):
    """Return a JSON-ready dict describing a widget."""
    return {
        'variant': product.variant,
        'kind': product.kind,
        'class': type(product).__name__,
        'label': product.label,
    }
