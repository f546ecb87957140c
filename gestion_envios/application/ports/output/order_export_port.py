from abc import ABC, abstractmethod
from typing import List, Optional, Union

from gestion_envios.domain.models.order import Order
from gestion_envios.domain.value_objects.export_format import ExportFormat


class OrderExportPort(ABC):
    """Puerto de salida para la exportación de pedidos.
    
    Define la interfaz que los adaptadores de salida utilizarán para exportar
    lotes de pedidos a diferentes formatos.
    """
    
    @abstractmethod
    def export_orders(self, orders: List[Order], export_format: Union[ExportFormat, str],
                      output_path: Optional[str] = None) -> str:
        """Exporta una lista de pedidos a un formato específico.
        
        Args:
            orders: Pedidos a exportar
            export_format: Formato de exportación como enum ExportFormat o string
                           (text, csv, json, excel)
            output_path: Ruta del archivo de salida (obligatoria para excel)
            
        Returns:
            El contenido exportado, o la ruta del archivo si se indicó output_path
            
        Raises:
            ValueError: Si el formato no está soportado
        """
        pass
    
    @abstractmethod
    def get_supported_formats(self) -> List[str]:
        """Obtiene la lista de formatos de exportación soportados."""
        pass
