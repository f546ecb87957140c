import json
import logging
from decimal import localcontext
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from gestion_envios.application.ports.output.order_export_port import OrderExportPort
from gestion_envios.domain.models.order import Order
from gestion_envios.domain.services.shipping_calculator import exact_context
from gestion_envios.domain.value_objects.export_format import ExportFormat
from gestion_envios.domain.value_objects.weight import format_decimal_ptbr


logger = logging.getLogger(__name__)


class OrderExportAdapter(OrderExportPort):
    """Adaptador de salida para exportar lotes de pedidos.
    
    Implementa el puerto de salida OrderExportPort usando pandas para los
    formatos tabulares.
    """
    
    def get_supported_formats(self) -> List[str]:
        """Obtiene la lista de formatos de exportación soportados."""
        return [export_format.to_string() for export_format in ExportFormat.get_all_formats()]
    
    def export_orders(self, orders: List[Order], export_format: Union[ExportFormat, str],
                      output_path: Optional[str] = None) -> str:
        """Exporta una lista de pedidos al formato indicado."""
        try:
            format_enum = ExportFormat.from_string(export_format)
        except ValueError:
            raise ValueError(f"Formato no soportado: {export_format}. "
                             f"Opciones: {', '.join(self.get_supported_formats())}")
        
        records = [self._to_record(order) for order in orders]
        
        if format_enum == ExportFormat.JSON:
            return self._export_to_json(records, output_path)
        elif format_enum == ExportFormat.CSV:
            return self._export_to_csv(records, output_path)
        elif format_enum == ExportFormat.EXCEL:
            return self._export_to_excel(records, output_path)
        return self._export_to_text(orders, output_path)
    
    def _to_record(self, order: Order) -> Dict[str, Any]:
        """Convierte un pedido a un registro serializable (costos como float de dos decimales)."""
        record = order.to_dict()
        record["shipping_cost"] = round(float(record["shipping_cost"]), 2)
        return record
    
    def _write(self, content: str, output_path: str, label: str) -> str:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(content)
        logger.info(f"Pedidos exportados a {label}: {output_path}")
        return output_path
    
    def _export_to_json(self, records: List[Dict[str, Any]], output_path: Optional[str]) -> str:
        json_str = json.dumps({"orders": records, "total_cost": self._total(records)},
                              indent=2, ensure_ascii=False)
        if output_path:
            return self._write(json_str, output_path, "JSON")
        return json_str
    
    def _export_to_csv(self, records: List[Dict[str, Any]], output_path: Optional[str]) -> str:
        if not records:
            return "No hay pedidos para exportar"
        
        df = pd.DataFrame(records)
        
        if output_path:
            df.to_csv(output_path, index=False)
            logger.info(f"Pedidos exportados a CSV: {output_path}")
            return output_path
        
        return df.to_csv(index=False)
    
    def _export_to_excel(self, records: List[Dict[str, Any]], output_path: Optional[str]) -> str:
        if not output_path:
            raise ValueError("Se requiere una ruta de salida para exportar a Excel")
        
        if not records:
            return "No hay pedidos para exportar"
        
        df = pd.DataFrame(records)
        df.to_excel(output_path, index=False, sheet_name="Pedidos")
        logger.info(f"Pedidos exportados a Excel: {output_path}")
        
        return output_path
    
    def _export_to_text(self, orders: List[Order], output_path: Optional[str]) -> str:
        """Exporta los pedidos a texto legible (para consola)."""
        if not orders:
            return "No hay pedidos para exportar"
        
        lines = ["Pedidos de entrega:", "-" * 40]
        for order in orders:
            line = f"  {order}"
            if order.is_free_shipping:
                line += " (FRETE GRÁTIS)"
            lines.append(line)
        
        lines.append("-" * 40)
        costs = [order.shipping_cost for order in orders]
        with localcontext(exact_context(*costs)):
            total = sum(costs)
        lines.append(f"Total de fretes: R$ {format_decimal_ptbr(total)}")
        
        content = "\n".join(lines)
        if output_path:
            return self._write(content, output_path, "texto")
        return content
    
    @staticmethod
    def _total(records: List[Dict[str, Any]]) -> float:
        return round(sum(r["shipping_cost"] for r in records), 2)
