"""Puerto de entrada para la tabla comparativa de tarifas."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

import pandas as pd


class TariffTablePort(ABC):
    """Puerto para calcular y graficar el costo de cada tipo de envío por rango de peso."""
    
    @abstractmethod
    def build_table(self, min_weight: float, max_weight: float, step: float) -> pd.DataFrame:
        """
        Calcula el costo de envío de cada modalidad para una grilla de pesos.
        
        Args:
            min_weight: Peso inicial (kg), debe ser válido
            max_weight: Peso final (kg), incluido en la grilla
            step: Incremento entre pesos consecutivos
            
        Returns:
            DataFrame con la columna weight y una columna por tipo de envío
        """
        pass
    
    @abstractmethod
    def plot_table(self, table: pd.DataFrame, output_dir: Optional[str] = None) -> Dict[str, str]:
        """
        Genera el gráfico de la tabla de tarifas.
        
        Returns:
            Diccionario con las rutas de los archivos generados
        """
        pass
