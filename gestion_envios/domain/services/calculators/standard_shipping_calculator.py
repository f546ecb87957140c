from decimal import Decimal, localcontext

from gestion_envios.domain.services.shipping_calculator import ShippingCalculator, exact_context, to_decimal
from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.domain.value_objects.weight import Weight


class StandardShippingCalculator(ShippingCalculator):
    """Envío estándar: precio proporcional al peso, sin envío gratuito."""
    
    shipping_type = ShippingType.STANDARD
    
    WEIGHT_MULTIPLIER = Decimal("1.2")
    
    def calculate_shipping_cost(self, weight: Weight) -> Decimal:
        value = to_decimal(weight)
        with localcontext(exact_context(value, self.WEIGHT_MULTIPLIER)):
            return value * self.WEIGHT_MULTIPLIER
    
    def is_eligible_for_free_shipping(self, weight: Weight) -> bool:
        return False
