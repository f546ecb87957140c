import math
from numbers import Real
from typing import Any, Optional

from gestion_envios.domain.exceptions import (
    InvalidAddressError,
    InvalidRecipientError,
    InvalidWeightError,
    UnsupportedShippingTypeError,
)
from gestion_envios.domain.value_objects.shipping_type import ShippingType


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class ValidationService:
    """Servicio para rechazar datos de entrada inválidos antes de crear un pedido.
    
    Cada verificación es independiente: no devuelve nada si el dato es válido
    y lanza una excepción específica del dominio en caso contrario.
    """
    
    def validate_weight(self, weight: Any) -> None:
        """Validar que el peso sea un número finito mayor que cero.
        
        Raises:
            InvalidWeightError: Si el peso es nulo, no numérico, <= 0, NaN o infinito
        """
        if weight is None:
            raise InvalidWeightError("null")
        if isinstance(weight, bool) or not isinstance(weight, Real):
            raise InvalidWeightError(weight)
        if math.isnan(weight) or math.isinf(weight) or weight <= 0:
            raise InvalidWeightError(weight)
    
    def validate_address(self, address: Optional[str]) -> None:
        """Validar que la dirección no sea nula, vacía ni solo espacios.
        
        Raises:
            InvalidAddressError: Si la dirección está en blanco
        """
        if _is_blank(address):
            raise InvalidAddressError("null" if address is None else address)
    
    def validate_recipient(self, recipient: Optional[str]) -> None:
        """Validar que el destinatario no sea nulo, vacío ni solo espacios.
        
        Raises:
            InvalidRecipientError: Si el destinatario está en blanco
        """
        if _is_blank(recipient):
            raise InvalidRecipientError("null" if recipient is None else recipient)
    
    def validate_shipping_type(self, shipping_type_code: Optional[str]) -> None:
        """Validar que el código corresponda a uno de los tipos de envío conocidos.
        
        Raises:
            UnsupportedShippingTypeError: Si el código no es EXP, PAD ni ECO
        """
        valid_codes = {st.to_code() for st in ShippingType.get_all_shipping_types()}
        if not isinstance(shipping_type_code, str) or shipping_type_code.upper() not in valid_codes:
            raise UnsupportedShippingTypeError(
                "null" if shipping_type_code is None else str(shipping_type_code)
            )
    
    def validate_delivery_request(self, recipient: Optional[str], address: Optional[str],
                                  weight: Any, shipping_type_code: Optional[str]) -> None:
        """Ejecutar las cuatro verificaciones en orden: destinatario, dirección, peso y tipo."""
        self.validate_recipient(recipient)
        self.validate_address(address)
        self.validate_weight(weight)
        self.validate_shipping_type(shipping_type_code)
