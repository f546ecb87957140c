import logging
from dataclasses import InitVar, dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional

from gestion_envios.domain.exceptions import MissingArgumentError
from gestion_envios.domain.services.shipping_calculator_factory import (
    ShippingCalculatorFactory,
    default_calculator_factory,
)
from gestion_envios.domain.value_objects.address import Address
from gestion_envios.domain.value_objects.recipient import Recipient
from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.domain.value_objects.weight import Weight, format_decimal_ptbr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Order:
    """Representa un pedido de entrega con su costo de envío ya calculado.
    
    El costo y la elegibilidad para envío gratuito se derivan una sola vez al
    construir el pedido, usando la calculadora que la fábrica asigna al tipo de
    envío. La calculadora no forma parte del estado del pedido. El pedido es
    inmutable: aplicar la promoción produce un pedido nuevo.
    """
    
    PROMOTION_WEIGHT_THRESHOLD = 10.0
    PROMOTION_WEIGHT_REDUCTION = 1.0
    
    recipient: Recipient = field(
        metadata={"description": "Destinatario de la entrega"}
    )
    address: Address = field(
        metadata={"description": "Dirección de entrega"}
    )
    weight: Weight = field(
        metadata={"description": "Peso del paquete"}
    )
    shipping_type: ShippingType = field(
        metadata={"description": "Modalidad de envío contratada"}
    )
    calculator_factory: InitVar[Optional[ShippingCalculatorFactory]] = None
    shipping_cost: Decimal = field(
        init=False,
        metadata={"description": "Costo del envío calculado al construir el pedido"}
    )
    is_free_shipping: bool = field(
        init=False,
        metadata={"description": "Indica si el envío es gratuito"}
    )
    
    def __post_init__(self, calculator_factory: Optional[ShippingCalculatorFactory]):
        for name in ("recipient", "address", "weight", "shipping_type"):
            if getattr(self, name) is None:
                raise MissingArgumentError(name)
        
        factory = calculator_factory or default_calculator_factory
        calculator = factory.create_calculator(self.shipping_type)
        
        object.__setattr__(self, "shipping_cost", calculator.calculate_shipping_cost(self.weight))
        object.__setattr__(self, "is_free_shipping", calculator.is_eligible_for_free_shipping(self.weight))
    
    @classmethod
    def create(cls, recipient: Recipient, address: Address, weight: Weight,
               shipping_type: ShippingType,
               calculator_factory: Optional[ShippingCalculatorFactory] = None) -> 'Order':
        """Crea un pedido calculando su costo con la fábrica indicada o la por defecto."""
        return cls(recipient, address, weight, shipping_type, calculator_factory)
    
    def apply_promotional_discount(self) -> 'Order':
        """Aplicar la promoción de peso.
        
        Los paquetes de hasta 10 kg no reciben descuento y se devuelve la misma
        instancia. Por encima de ese límite se crea un pedido nuevo con 1 kg
        menos, recalculado con la fábrica por defecto.
        """
        if self.weight.value <= self.PROMOTION_WEIGHT_THRESHOLD:
            return self
        
        discounted_weight = Weight(self.weight.value - self.PROMOTION_WEIGHT_REDUCTION)
        discounted = Order.create(self.recipient, self.address, discounted_weight, self.shipping_type)
        logger.debug(
            f"Promoción aplicada: {self.weight} -> {discounted_weight}, "
            f"costo {self.shipping_cost} -> {discounted.shipping_cost}"
        )
        return discounted
    
    def to_dict(self) -> Dict[str, Any]:
        """Representación plana del pedido para exportación."""
        return {
            "recipient": self.recipient.name,
            "address": self.address.value,
            "weight": self.weight.value,
            "shipping_type_code": self.shipping_type.to_code(),
            "shipping_type": self.shipping_type.to_display_name(),
            "shipping_cost": self.shipping_cost,
            "is_free_shipping": self.is_free_shipping,
        }
    
    def __str__(self) -> str:
        return (f"Entrega para {self.recipient} - {self.shipping_type.to_display_name()} - "
                f"R$ {format_decimal_ptbr(self.shipping_cost)}")


# En el vocabulario del negocio un pedido también se llama entrega
Delivery = Order
