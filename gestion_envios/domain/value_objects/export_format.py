from enum import Enum
from typing import List, Union


class ExportFormat(Enum):
    """Formatos en los que se puede exportar un lote de pedidos."""
    
    TEXT = "text"
    CSV = "csv"
    JSON = "json"
    EXCEL = "excel"
    
    @classmethod
    def from_string(cls, format_str: Union['ExportFormat', str]) -> 'ExportFormat':
        """Convierte una cadena de texto a un enum ExportFormat.
        
        Raises:
            ValueError: Si la cadena no corresponde a un formato válido
        """
        if isinstance(format_str, ExportFormat):
            return format_str
        
        normalized = str(format_str).strip().lower()
        for export_format in cls:
            if export_format.value == normalized:
                return export_format
        raise ValueError(f"'{format_str}' no es un formato de exportación válido")
    
    def to_string(self) -> str:
        return self.value
    
    @property
    def file_extension(self) -> str:
        """Extensión de archivo sugerida para el formato."""
        return {
            ExportFormat.TEXT: ".txt",
            ExportFormat.CSV: ".csv",
            ExportFormat.JSON: ".json",
            ExportFormat.EXCEL: ".xlsx",
        }[self]
        
    @classmethod
    def get_all_formats(cls) -> List['ExportFormat']:
        return list(cls)
