from abc import ABC, abstractmethod
from decimal import Context, Decimal

from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.domain.value_objects.weight import Weight


def to_decimal(weight: Weight) -> Decimal:
    """Convierte el peso (float) a Decimal a partir de su representación más corta."""
    return Decimal(str(weight.value))


def exact_context(*values: Decimal) -> Context:
    """Contexto decimal con precisión suficiente para sumar y multiplicar estos
    operandos sin redondeo.
    
    La precisión se dimensiona con los exponentes de los operandos, así que los
    pesos muy grandes o muy pequeños conservan todos sus dígitos.
    """
    magnitude = max(
        (max(abs(v.adjusted()), abs(v.as_tuple().exponent)) for v in values if v.is_finite()),
        default=0,
    )
    return Context(prec=max(28, 4 * magnitude + 10))


class ShippingCalculator(ABC):
    """Strategy interface for shipping cost algorithms.
    
    This follows the Strategy pattern: there is exactly one stateless
    implementation per ShippingType, selected by ShippingCalculatorFactory.
    Costs are always returned as Decimal since they are monetary values.
    """
    
    shipping_type: ShippingType
    
    @abstractmethod
    def calculate_shipping_cost(self, weight: Weight) -> Decimal:
        """Calculate the shipping cost for a package of the given weight.
        
        Args:
            weight: Package weight
            
        Returns:
            The shipping cost as a Decimal
        """
        pass
    
    @abstractmethod
    def is_eligible_for_free_shipping(self, weight: Weight) -> bool:
        """Check whether a package of the given weight ships for free."""
        pass
    
    def get_shipping_type_name(self) -> str:
        """Get the display name of the shipping type priced by this strategy."""
        return self.shipping_type.to_display_name()
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
