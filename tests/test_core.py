"""Tests for the client entry point and family checks."""

import io

import pytest
from guifactory.core import (
    InvalidFactoryError, MixedFamilyError, application, check_family,
    describe_product,
)
from guifactory.widgets.base import GUIFactory
from guifactory.widgets.macos import MacButton, MacCheckBox, MacFactory
from guifactory.widgets.windows import WinButton, WinCheckBox, WinFactory


class CountingFactory(WinFactory):
    """WinFactory that records every creation call."""

    def __init__(self):
        self.calls = []

    def create_button(self):
        self.calls.append('create_button')
        return super().create_button()

    def create_checkbox(self):
        self.calls.append('create_checkbox')
        return super().create_checkbox()


class TestApplication:
    """Verify application() drives a factory through its abstract interface."""

    @pytest.mark.parametrize("factory_cls", [WinFactory, MacFactory])
    def test_completes_for_each_variant(self, factory_cls):
        button, checkbox = application(factory_cls())
        assert button.kind == 'button'
        assert checkbox.kind == 'checkbox'

    def test_exactly_two_creation_calls(self):
        factory = CountingFactory()
        application(factory)
        assert factory.calls == ['create_button', 'create_checkbox']

    def test_no_paint_by_default(self, capsys):
        application(MacFactory())
        assert capsys.readouterr().out == ""

    def test_paint_writes_both_lines_in_order(self, capsys):
        application(MacFactory(), paint=True)
        assert capsys.readouterr().out == "Paint Mac Button\nPaint mac Button\n"

    def test_paint_to_sink(self):
        sink = io.StringIO()
        application(WinFactory(), paint=True, out=sink)
        assert sink.getvalue().splitlines() == ["Paint Win Button", "Paint Win Button"]

    def test_duck_typed_factory_accepted(self):
        class Duck:
            def create_button(self):
                return MacButton()

            def create_checkbox(self):
                return MacCheckBox()

        button, checkbox = application(Duck())
        assert isinstance(button, MacButton)
        assert isinstance(checkbox, MacCheckBox)

    def test_non_factory_rejected(self):
        with pytest.raises(InvalidFactoryError, match="create_button"):
            application(object())

    def test_partial_factory_rejected(self):
        class OnlyButtons:
            def create_button(self):
                return WinButton()

        with pytest.raises(InvalidFactoryError, match="create_checkbox"):
            application(OnlyButtons())

    def test_non_callable_attribute_rejected(self):
        class Broken:
            create_button = 'nope'
            create_checkbox = 'nope'

        with pytest.raises(TypeError):
            application(Broken())

    def test_cross_variant_factory_rejected(self):
        class CrossedFactory(GUIFactory):
            variant = 'win'

            def create_button(self):
                return WinButton()

            def create_checkbox(self):
                return MacCheckBox()

        with pytest.raises(MixedFamilyError):
            application(CrossedFactory())

    def test_mislabelled_factory_rejected(self):
        class Mislabelled(MacFactory):
            variant = 'win'

        with pytest.raises(MixedFamilyError, match="declares variant"):
            application(Mislabelled())


class TestCheckFamily:

    def test_single_variant(self):
        assert check_family([WinButton(), WinCheckBox()]) == 'win'

    def test_mixed_variants(self):
        with pytest.raises(MixedFamilyError, match="mac, win"):
            check_family([WinButton(), MacCheckBox()])

    def test_empty(self):
        with pytest.raises(ValueError):
            check_family([])


class TestDescribeProduct:

    def test_fields(self):
        assert describe_product(MacCheckBox()) == {
            'variant': 'mac',
            'kind': 'checkbox',
            'class': 'MacCheckBox',
            'label': 'Paint mac Button',
        }
