from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Any, Dict, List, Optional

from gestion_envios.domain.models.order import Order
from gestion_envios.domain.services.shipping_calculator import exact_context


@dataclass(frozen=True)
class DiscountQuote:
    """Resultado de simular la promoción sobre un pedido recién creado."""
    original_order: Order
    discounted_order: Order
    
    @property
    def original_cost(self) -> Decimal:
        return self.original_order.shipping_cost
    
    @property
    def discounted_cost(self) -> Decimal:
        return self.discounted_order.shipping_cost
    
    @property
    def savings(self) -> Decimal:
        with localcontext(exact_context(self.original_cost, self.discounted_cost)):
            return self.original_cost - self.discounted_cost
    
    @property
    def discount_applied(self) -> bool:
        return self.original_cost != self.discounted_cost


class DeliveryServicePort(ABC):
    """Puerto de entrada para la creación de entregas.
    
    Define la interfaz que los adaptadores de entrada (HTTP, CLI) utilizan para
    crear pedidos y aplicarles la promoción.
    """
    
    @abstractmethod
    def create_delivery(self, recipient: Optional[str], address: Optional[str],
                        weight: float, shipping_type_code: Optional[str]) -> Order:
        """Valida los datos de entrada y crea un pedido con su costo calculado.
        
        Args:
            recipient: Nombre del destinatario
            address: Dirección de entrega
            weight: Peso del paquete en kilogramos
            shipping_type_code: Código del tipo de envío (EXP, PAD o ECO)
            
        Returns:
            Pedido creado
            
        Raises:
            DomainError: Si alguno de los datos es inválido
        """
        pass
    
    @abstractmethod
    def apply_promotional_discount(self, order: Order) -> Order:
        """Aplica la promoción de peso a un pedido existente.
        
        Returns:
            El mismo pedido si no aplica la promoción, o uno nuevo con el descuento
        """
        pass
    
    @abstractmethod
    def quote_promotional_discount(self, recipient: Optional[str], address: Optional[str],
                                   weight: float, shipping_type_code: Optional[str]) -> DiscountQuote:
        """Crea un pedido, le aplica la promoción y devuelve la comparación de costos.
        
        Raises:
            DomainError: Si alguno de los datos es inválido
        """
        pass
    
    @abstractmethod
    def list_shipping_types(self) -> List[Dict[str, Any]]:
        """Obtiene los tipos de envío disponibles como diccionarios
        con las claves code, displayName y rawName.
        """
        pass
