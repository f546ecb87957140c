import logging
from typing import Dict, List

from gestion_envios.domain.exceptions import UnsupportedShippingTypeError
from gestion_envios.domain.services.shipping_calculator import ShippingCalculator
from gestion_envios.domain.services.calculators import (
    EconomyShippingCalculator,
    ExpressShippingCalculator,
    StandardShippingCalculator,
)
from gestion_envios.domain.value_objects.shipping_type import ShippingType

logger = logging.getLogger(__name__)


class ShippingCalculatorFactory:
    """Selecciona la estrategia de cálculo correspondiente a cada tipo de envío.
    
    Las calculadoras no tienen estado, por lo que la fábrica reutiliza una única
    instancia por tipo y puede compartirse entre peticiones sin sincronización.
    """
    
    def __init__(self):
        self.calculators: Dict[ShippingType, ShippingCalculator] = {
            ShippingType.EXPRESS: ExpressShippingCalculator(),
            ShippingType.STANDARD: StandardShippingCalculator(),
            ShippingType.ECONOMY: EconomyShippingCalculator(),
        }
    
    def create_calculator(self, shipping_type: ShippingType) -> ShippingCalculator:
        """Obtiene la calculadora para un tipo de envío.
        
        Args:
            shipping_type: Tipo de envío como enum ShippingType
            
        Returns:
            Estrategia ShippingCalculator para ese tipo
            
        Raises:
            UnsupportedShippingTypeError: Si el valor no es un ShippingType conocido
        """
        if not isinstance(shipping_type, ShippingType) or shipping_type not in self.calculators:
            raise UnsupportedShippingTypeError(str(shipping_type))
        
        return self.calculators[shipping_type]
    
    def get_supported_shipping_types(self) -> List[ShippingType]:
        """Obtiene la lista de tipos de envío que la fábrica sabe atender."""
        return list(self.calculators.keys())


default_calculator_factory = ShippingCalculatorFactory()
