"""Módulo principal para el sistema de gestión de envíos."""

# Para facilitar los imports
from .domain.exceptions import (
    DomainError,
    InvalidAddressError,
    InvalidRecipientError,
    InvalidWeightError,
    MissingArgumentError,
    UnsupportedShippingTypeError,
)
from .domain.models.order import Order, Delivery
# Imports de value_objects
from .domain.value_objects.shipping_type import ShippingType
from .domain.value_objects.recipient import Recipient
from .domain.value_objects.address import Address
from .domain.value_objects.weight import Weight
from .domain.value_objects.export_format import ExportFormat
# Services
from .domain.services.shipping_calculator import ShippingCalculator
from .domain.services.calculators import (
    EconomyShippingCalculator,
    ExpressShippingCalculator,
    StandardShippingCalculator,
)
from .domain.services.shipping_calculator_factory import ShippingCalculatorFactory
from .domain.services.validation_service import ValidationService
