"""Caso de uso para la creación de entregas y la promoción de peso."""

import logging
from typing import Any, Dict, List, Optional

from gestion_envios.application.ports.input.delivery_service_port import DeliveryServicePort, DiscountQuote
from gestion_envios.domain.models.order import Order
from gestion_envios.domain.services.shipping_calculator_factory import ShippingCalculatorFactory
from gestion_envios.domain.services.validation_service import ValidationService
from gestion_envios.domain.value_objects.address import Address
from gestion_envios.domain.value_objects.recipient import Recipient
from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.domain.value_objects.weight import Weight

logger = logging.getLogger(__name__)


class CreateDeliveryUseCase(DeliveryServicePort):
    """Implementa el puerto DeliveryServicePort sobre los servicios del dominio.
    
    El flujo es siempre el mismo: validar la entrada, construir los objetos de
    valor y dejar que el pedido calcule su costo con la fábrica inyectada.
    """
    
    def __init__(
        self,
        validation_service: ValidationService,
        calculator_factory: ShippingCalculatorFactory
    ):
        self.validation_service = validation_service
        self.calculator_factory = calculator_factory
    
    def create_delivery(self, recipient: Optional[str], address: Optional[str],
                        weight: float, shipping_type_code: Optional[str]) -> Order:
        """Crea un pedido validado.
        
        El tipo de envío no pasa por validate_shipping_type: ShippingType.from_code
        ya rechaza los códigos desconocidos con la misma excepción.
        """
        self.validation_service.validate_recipient(recipient)
        self.validation_service.validate_address(address)
        self.validation_service.validate_weight(weight)
        
        shipping_type = ShippingType.from_code(shipping_type_code)
        
        order = Order.create(
            Recipient.from_string(recipient),
            Address.from_string(address),
            Weight.from_float(weight),
            shipping_type,
            self.calculator_factory
        )
        
        logger.info(f"Pedido creado: {order}")
        return order
    
    def apply_promotional_discount(self, order: Order) -> Order:
        """Aplica la promoción de peso delegando en el propio pedido."""
        return order.apply_promotional_discount()
    
    def quote_promotional_discount(self, recipient: Optional[str], address: Optional[str],
                                   weight: float, shipping_type_code: Optional[str]) -> DiscountQuote:
        """Crea el pedido, aplica la promoción y devuelve ambos pedidos."""
        self.validation_service.validate_delivery_request(recipient, address, weight, shipping_type_code)
        
        original_order = self.create_delivery(recipient, address, weight, shipping_type_code)
        discounted_order = self.apply_promotional_discount(original_order)
        quote = DiscountQuote(original_order=original_order, discounted_order=discounted_order)
        
        if quote.discount_applied:
            logger.info(f"Promoción aplicada a {original_order.recipient}: ahorro de R$ {quote.savings}")
        else:
            logger.info(f"El pedido de {original_order.recipient} no califica para la promoción")
        
        return quote
    
    def list_shipping_types(self) -> List[Dict[str, Any]]:
        """Obtiene los tipos de envío soportados por la fábrica."""
        return [
            {
                "code": shipping_type.to_code(),
                "displayName": shipping_type.to_display_name(),
                "rawName": shipping_type.raw_name,
            }
            for shipping_type in self.calculator_factory.get_supported_shipping_types()
        ]
