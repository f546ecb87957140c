from abc import ABC, abstractmethod

from gestion_envios.domain.models.order import Order


class LabelRenderingPort(ABC):
    """Puerto de salida para la representación textual de un pedido.
    
    Solo consume los campos públicos del pedido ya construido.
    """
    
    @abstractmethod
    def generate_shipping_label(self, order: Order) -> str:
        """Genera la etiqueta de entrega con formato de caja.
        
        Raises:
            MissingArgumentError: Si el pedido es None
        """
        pass
    
    @abstractmethod
    def generate_order_summary(self, order: Order) -> str:
        """Genera un resumen de una línea del pedido.
        
        Raises:
            MissingArgumentError: Si el pedido es None
        """
        pass
