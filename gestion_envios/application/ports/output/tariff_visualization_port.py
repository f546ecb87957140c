"""Puerto de salida para la visualización de la tabla de tarifas."""

from abc import ABC, abstractmethod
from typing import Dict

import pandas as pd


class TariffVisualizationPort(ABC):
    """Puerto para graficar las curvas de costo por tipo de envío."""
    
    @abstractmethod
    def plot_tariffs(self, table: pd.DataFrame, output_dir: str = "./assets/plots",
                     show_plots: bool = False) -> Dict[str, str]:
        """
        Crea el gráfico de costo en función del peso y lo guarda en el directorio indicado.
        
        Args:
            table: DataFrame con la columna weight y una columna de costo por tipo de envío
            output_dir: Directorio donde guardar los gráficos generados
            show_plots: Si es True, muestra los gráficos interactivamente
            
        Returns:
            Diccionario con rutas de los archivos generados
        """
        pass
