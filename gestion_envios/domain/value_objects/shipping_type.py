from enum import Enum, auto
from typing import List, Optional

from gestion_envios.domain.exceptions import UnsupportedShippingTypeError


class ShippingType(Enum):
    """Representa las modalidades de envío disponibles."""
    
    EXPRESS = auto()
    STANDARD = auto()
    ECONOMY = auto()
    
    @classmethod
    def from_code(cls, code: Optional[str]) -> 'ShippingType':
        """Convierte un código de tres letras a un enum ShippingType.
        
        La comparación no distingue mayúsculas de minúsculas, pero no recorta
        espacios ni acepta coincidencias parciales.
        
        Args:
            code: Código del tipo de envío ("EXP", "PAD" o "ECO")
            
        Returns:
            Enum ShippingType correspondiente
            
        Raises:
            UnsupportedShippingTypeError: Si el código no corresponde a un tipo válido
        """
        code_upper = code.upper() if isinstance(code, str) else None
        
        if code_upper == 'EXP':
            return cls.EXPRESS
        elif code_upper == 'PAD':
            return cls.STANDARD
        elif code_upper == 'ECO':
            return cls.ECONOMY
        else:
            raise UnsupportedShippingTypeError("null" if code is None else str(code))
    
    def to_code(self) -> str:
        """Convierte el enum a su código de tres letras.
        
        Returns:
            Código del tipo de envío
        """
        if self == self.EXPRESS:
            return "EXP"
        elif self == self.STANDARD:
            return "PAD"
        elif self == self.ECONOMY:
            return "ECO"
    
    def to_display_name(self) -> str:
        """Convierte el enum al nombre que se muestra al cliente.
        
        Returns:
            Nombre localizado del tipo de envío
        """
        if self == self.EXPRESS:
            return "Expresso"
        elif self == self.STANDARD:
            return "Padrão"
        elif self == self.ECONOMY:
            return "Econômico"
    
    @property
    def raw_name(self) -> str:
        """Nombre crudo de la variante ("Express", "Standard", "Economy")."""
        return self.name.capitalize()
        
    @classmethod
    def get_all_shipping_types(cls) -> List['ShippingType']:
        """Obtiene una lista con todos los tipos de envío.
        
        Returns:
            Lista de enums ShippingType
        """
        return [cls.EXPRESS, cls.STANDARD, cls.ECONOMY]
