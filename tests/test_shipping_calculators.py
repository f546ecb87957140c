"""Tests for the shipping cost strategies."""
from decimal import Decimal

import pytest

from gestion_envios.domain.services.calculators import (
    EconomyShippingCalculator,
    ExpressShippingCalculator,
    StandardShippingCalculator,
)
from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.domain.value_objects.weight import Weight

WEIGHTS = [0.1, 0.5, 1.0, 1.99, 2.0, 2.5, 3.0, 4.5, 5.0, 10.0, 15.0, 100.0]


class TestExpressShippingCalculator:
    calculator = ExpressShippingCalculator()

    @pytest.mark.parametrize("weight", WEIGHTS)
    def test_cost_is_weight_times_rate_plus_fee(self, weight):
        expected = Decimal(str(weight)) * Decimal("1.5") + Decimal("10")
        assert self.calculator.calculate_shipping_cost(Weight(weight)) == expected

    def test_known_values(self):
        assert self.calculator.calculate_shipping_cost(Weight(3.0)) == Decimal("14.5")
        assert self.calculator.calculate_shipping_cost(Weight(0.5)) == Decimal("10.75")

    @pytest.mark.parametrize("weight", WEIGHTS)
    def test_never_free(self, weight):
        assert self.calculator.is_eligible_for_free_shipping(Weight(weight)) is False
        assert self.calculator.calculate_shipping_cost(Weight(weight)) > 0

    def test_name(self):
        assert self.calculator.get_shipping_type_name() == "Expresso"


class TestStandardShippingCalculator:
    calculator = StandardShippingCalculator()

    @pytest.mark.parametrize("weight", WEIGHTS)
    def test_cost_is_weight_times_rate(self, weight):
        expected = Decimal(str(weight)) * Decimal("1.2")
        assert self.calculator.calculate_shipping_cost(Weight(weight)) == expected

    def test_cost_is_exact_decimal(self):
        cost = self.calculator.calculate_shipping_cost(Weight(2.5))
        assert isinstance(cost, Decimal)
        assert cost == Decimal("3.0")

    @pytest.mark.parametrize("weight", WEIGHTS)
    def test_never_free(self, weight):
        assert self.calculator.is_eligible_for_free_shipping(Weight(weight)) is False
        assert self.calculator.calculate_shipping_cost(Weight(weight)) > 0

    def test_name(self):
        assert self.calculator.get_shipping_type_name() == "Padrão"


class TestEconomyShippingCalculator:
    calculator = EconomyShippingCalculator()

    @pytest.mark.parametrize("weight", [0.1, 1.0, 1.5, 1.99])
    def test_light_packages_ship_free(self, weight):
        assert self.calculator.calculate_shipping_cost(Weight(weight)) == Decimal("0")
        assert self.calculator.is_eligible_for_free_shipping(Weight(weight)) is True

    @pytest.mark.parametrize("weight", [2.0, 2.5, 3.0, 4.5, 5.0, 10.0, 15.0, 100.0])
    def test_cost_formula_from_two_kilos(self, weight):
        expected = max(Decimal(str(weight)) * Decimal("1.1") - Decimal("5"), Decimal("0"))
        assert self.calculator.calculate_shipping_cost(Weight(weight)) == expected
        assert self.calculator.is_eligible_for_free_shipping(Weight(weight)) is False

    def test_known_values(self):
        assert self.calculator.calculate_shipping_cost(Weight(10.0)) == Decimal("6")
        assert self.calculator.calculate_shipping_cost(Weight(5.0)) == Decimal("0.5")

    def test_clamped_to_zero_without_being_free(self):
        assert self.calculator.calculate_shipping_cost(Weight(3.0)) == Decimal("0")
        assert self.calculator.is_eligible_for_free_shipping(Weight(3.0)) is False

    @pytest.mark.parametrize("weight", WEIGHTS)
    def test_free_shipping_implies_zero_cost(self, weight):
        if self.calculator.is_eligible_for_free_shipping(Weight(weight)):
            assert self.calculator.calculate_shipping_cost(Weight(weight)) == 0

    def test_name(self):
        assert self.calculator.get_shipping_type_name() == "Econômico"


@pytest.mark.parametrize("calculator_class", [
    ExpressShippingCalculator, StandardShippingCalculator, EconomyShippingCalculator,
])
def test_name_matches_shipping_type_display_name(calculator_class):
    calculator = calculator_class()
    assert isinstance(calculator.shipping_type, ShippingType)
    assert calculator.get_shipping_type_name() == calculator.shipping_type.to_display_name()


class TestExtremeWeights:
    """Los costos conservan todos los dígitos aunque superen la precisión por defecto."""

    def test_express_large_weight_is_exact(self):
        cost = ExpressShippingCalculator().calculate_shipping_cost(Weight(1e30))
        assert cost == Decimal("1500000000000000000000000000010")
        assert cost - Decimal("1.5E30") == 10

    def test_express_tiny_weight_keeps_fee_and_fraction(self):
        cost = ExpressShippingCalculator().calculate_shipping_cost(Weight(1e-30))
        assert cost - Decimal("10") == Decimal("1.5E-30")

    def test_standard_large_weight_is_exact(self):
        cost = StandardShippingCalculator().calculate_shipping_cost(Weight(1.23456789e40))
        assert cost == Decimal("1.23456789E40") * Decimal("1.2")
        assert cost == Decimal("14814814680000000000000000000000000000000")

    def test_economy_large_weight_is_exact(self):
        cost = EconomyShippingCalculator().calculate_shipping_cost(Weight(1e30))
        assert cost == Decimal("1099999999999999999999999999995")
