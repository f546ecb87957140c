from decimal import Decimal, localcontext

from gestion_envios.domain.services.shipping_calculator import ShippingCalculator, exact_context, to_decimal
from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.domain.value_objects.weight import Weight


class ExpressShippingCalculator(ShippingCalculator):
    """Envío expreso: tarifa por kilo más una tasa fija. Nunca es gratuito."""
    
    shipping_type = ShippingType.EXPRESS
    
    WEIGHT_MULTIPLIER = Decimal("1.5")
    FIXED_FEE = Decimal("10")
    
    def calculate_shipping_cost(self, weight: Weight) -> Decimal:
        value = to_decimal(weight)
        with localcontext(exact_context(value, self.WEIGHT_MULTIPLIER, self.FIXED_FEE)):
            return value * self.WEIGHT_MULTIPLIER + self.FIXED_FEE
    
    def is_eligible_for_free_shipping(self, weight: Weight) -> bool:
        return False
