"""Caso de uso para comparar las tarifas de los tipos de envío."""

import logging
from typing import Dict, Optional

import numpy as np
import pandas as pd

from gestion_envios.application.ports.input.tariff_table_port import TariffTablePort
from gestion_envios.application.ports.output.tariff_visualization_port import TariffVisualizationPort
from gestion_envios.domain.services.shipping_calculator_factory import ShippingCalculatorFactory
from gestion_envios.domain.services.validation_service import ValidationService
from gestion_envios.domain.value_objects.weight import Weight

logger = logging.getLogger(__name__)


class TariffTableUseCase(TariffTablePort):
    """Calcula el costo de cada modalidad de envío sobre una grilla de pesos."""
    
    def __init__(
        self,
        calculator_factory: ShippingCalculatorFactory,
        validation_service: ValidationService,
        visualization_service: TariffVisualizationPort,
        plots_dir: str = "./assets/plots"
    ):
        self.calculator_factory = calculator_factory
        self.validation_service = validation_service
        self.visualization_service = visualization_service
        self.plots_dir = plots_dir
    
    def _weight_grid(self, min_weight: float, max_weight: float, step: float) -> np.ndarray:
        """Genera la grilla de pesos incluyendo el extremo superior."""
        self.validation_service.validate_weight(min_weight)
        self.validation_service.validate_weight(max_weight)
        
        if step <= 0:
            raise ValueError(f"El incremento debe ser mayor que cero: {step}")
        if min_weight > max_weight:
            raise ValueError(f"El peso mínimo ({min_weight}) supera al máximo ({max_weight})")
        
        count = int(np.floor((max_weight - min_weight) / step + 1e-9)) + 1
        # Se redondea para que los pesos no arrastren errores de coma flotante
        return np.round(min_weight + step * np.arange(count), 6)
    
    def build_table(self, min_weight: float, max_weight: float, step: float) -> pd.DataFrame:
        """
        Calcula la tabla de tarifas.
        
        Args:
            min_weight: Peso inicial (kg)
            max_weight: Peso final (kg)
            step: Incremento entre pesos
            
        Returns:
            DataFrame con la columna weight, una columna de costo por tipo de envío
            (nombre visible) y una columna cheapest con la modalidad más barata
        """
        weights = self._weight_grid(min_weight, max_weight, step)
        table = pd.DataFrame({"weight": weights})
        
        for shipping_type in self.calculator_factory.get_supported_shipping_types():
            calculator = self.calculator_factory.create_calculator(shipping_type)
            table[shipping_type.to_display_name()] = [
                calculator.calculate_shipping_cost(Weight(float(w))) for w in weights
            ]
        
        cost_columns = [st.to_display_name() for st in self.calculator_factory.get_supported_shipping_types()]
        table["cheapest"] = table[cost_columns].astype(float).idxmin(axis=1)
        
        logger.info(f"Tabla de tarifas calculada para {len(table)} pesos entre {min_weight} y {max_weight} kg")
        return table
    
    def plot_table(self, table: pd.DataFrame, output_dir: Optional[str] = None) -> Dict[str, str]:
        """Delegar el gráfico de la tabla en el adaptador de visualización."""
        return self.visualization_service.plot_tariffs(table, output_dir=output_dir or self.plots_dir)
