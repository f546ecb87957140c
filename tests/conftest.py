"""Fixtures compartidas por las pruebas."""
import os

import pytest

# Los gráficos se generan sin ventana
os.environ.setdefault("MPLBACKEND", "Agg")

from gestion_envios.application.usecases.create_delivery_usecase import CreateDeliveryUseCase
from gestion_envios.domain.models.order import Order
from gestion_envios.domain.services.shipping_calculator_factory import ShippingCalculatorFactory
from gestion_envios.domain.services.validation_service import ValidationService
from gestion_envios.domain.value_objects.address import Address
from gestion_envios.domain.value_objects.recipient import Recipient
from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.domain.value_objects.weight import Weight


@pytest.fixture
def calculator_factory():
    return ShippingCalculatorFactory()


@pytest.fixture
def validation_service():
    return ValidationService()


@pytest.fixture
def delivery_usecase(validation_service, calculator_factory):
    return CreateDeliveryUseCase(
        validation_service=validation_service,
        calculator_factory=calculator_factory,
    )


@pytest.fixture
def make_order(calculator_factory):
    def _make(weight=5.0, shipping_type=ShippingType.STANDARD,
              recipient="João Silva", address="Rua das Flores, 123"):
        return Order(Recipient(recipient), Address(address), Weight(weight),
                     shipping_type, calculator_factory)
    return _make
