"""Implementaciones concretas de ShippingCalculator, una por tipo de envío."""

from .express_shipping_calculator import ExpressShippingCalculator
from .standard_shipping_calculator import StandardShippingCalculator
from .economy_shipping_calculator import EconomyShippingCalculator
