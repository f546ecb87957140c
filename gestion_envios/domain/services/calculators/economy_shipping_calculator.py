from decimal import Decimal, localcontext

from gestion_envios.domain.services.shipping_calculator import ShippingCalculator, exact_context, to_decimal
from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.domain.value_objects.weight import Weight


class EconomyShippingCalculator(ShippingCalculator):
    """Envío económico.
    
    Los paquetes de menos de 2 kg viajan gratis. A partir de ese límite el
    precio es peso * 1,1 menos un descuento fijo de 5, nunca por debajo de cero.
    """
    
    shipping_type = ShippingType.ECONOMY
    
    WEIGHT_MULTIPLIER = Decimal("1.1")
    DISCOUNT = Decimal("5")
    FREE_SHIPPING_WEIGHT_LIMIT = 2.0
    
    def calculate_shipping_cost(self, weight: Weight) -> Decimal:
        # El tramo gratuito se decide con la misma regla que is_eligible_for_free_shipping
        if self.is_eligible_for_free_shipping(weight):
            return Decimal("0")
        
        value = to_decimal(weight)
        with localcontext(exact_context(value, self.WEIGHT_MULTIPLIER, self.DISCOUNT)):
            cost = value * self.WEIGHT_MULTIPLIER - self.DISCOUNT
        return max(cost, Decimal("0"))
    
    def is_eligible_for_free_shipping(self, weight: Weight) -> bool:
        return weight.value < self.FREE_SHIPPING_WEIGHT_LIMIT
