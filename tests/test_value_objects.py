"""Tests for the Recipient, Address and Weight value objects."""
import dataclasses
import math

import pytest

from gestion_envios.domain.value_objects.address import Address
from gestion_envios.domain.value_objects.export_format import ExportFormat
from gestion_envios.domain.value_objects.recipient import Recipient
from gestion_envios.domain.value_objects.weight import Weight


class TestRecipient:
    def test_trims_name(self):
        assert Recipient("  João Silva  ").name == "João Silva"

    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
    def test_blank_normalizes_to_empty(self, raw):
        assert Recipient(raw).name == ""

    def test_explicit_conversions(self):
        recipient = Recipient.from_string(" Maria ")
        assert recipient.to_string() == "Maria"
        assert str(recipient) == "Maria"

    def test_equality_by_value(self):
        assert Recipient("Ana") == Recipient(" Ana ")

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Recipient("Ana").name = "Outra"


class TestAddress:
    def test_trims_value(self):
        assert Address(" Rua X, 1 ").value == "Rua X, 1"

    @pytest.mark.parametrize("raw", [None, "", "    "])
    def test_blank_normalizes_to_empty(self, raw):
        assert Address(raw).value == ""

    def test_explicit_conversions(self):
        assert Address.from_string("Av. Paulista, 1000").to_string() == "Av. Paulista, 1000"


class TestWeight:
    @pytest.mark.parametrize("raw", [0.0, -3.0, 2.5])
    def test_stores_value_as_given(self, raw):
        assert Weight(raw).value == raw

    def test_accepts_non_finite_values(self):
        assert math.isnan(Weight(float("nan")).value)
        assert Weight(float("inf")).value == float("inf")

    def test_formats_with_two_decimals_and_comma(self):
        assert Weight(2.5).to_string() == "2,50 kg"
        assert str(Weight(10.0)) == "10,00 kg"

    def test_explicit_conversions(self):
        assert Weight.from_float(3.25).to_float() == 3.25

    def test_equality_by_value(self):
        assert Weight(1.5) == Weight(1.5)
        assert Weight(1.5) != Weight(1.6)


class TestExportFormat:
    def test_from_string(self):
        assert ExportFormat.from_string("CSV") == ExportFormat.CSV
        assert ExportFormat.from_string(ExportFormat.JSON) == ExportFormat.JSON

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            ExportFormat.from_string("xml")
