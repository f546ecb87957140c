"""Adaptador para la visualización de la tabla de tarifas."""

import logging
from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from gestion_envios.application.ports.output.tariff_visualization_port import TariffVisualizationPort

logger = logging.getLogger(__name__)

COLORS = ['red', 'blue', 'green', 'purple', 'orange']


class TariffVisualizationAdapter(TariffVisualizationPort):
    """Adaptador que grafica con matplotlib el costo de envío en función del peso."""
    
    def plot_tariffs(self, table: pd.DataFrame, output_dir: str = "./assets/plots",
                     show_plots: bool = False) -> Dict[str, str]:
        """
        Crea el gráfico de tarifas y el gráfico de la modalidad más barata.
        
        Args:
            table: Tabla de tarifas (columna weight, columnas de costo y cheapest)
            output_dir: Directorio donde guardar los gráficos generados
            show_plots: Si es True, muestra los gráficos interactivamente
            
        Returns:
            Diccionario con rutas de los archivos generados
        """
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        generated_files = {}
        
        cost_columns = [c for c in table.columns if c not in ("weight", "cheapest")]
        weights = table["weight"].to_numpy(dtype=float)
        
        # 1. Curvas de costo por tipo de envío
        fig_costs, ax = plt.subplots(figsize=(10, 6))
        for i, column in enumerate(cost_columns):
            costs = table[column].astype(float).to_numpy()
            ax.plot(weights, costs, label=column, color=COLORS[i % len(COLORS)], linewidth=2)
        
        ax.set_title('Costo de Envío por Peso')
        ax.set_xlabel('Peso (kg)')
        ax.set_ylabel('Costo (R$)')
        ax.grid(True, linestyle='--', alpha=0.5)
        ax.legend()
        fig_costs.tight_layout()
        
        costs_plot_path = f'{output_dir}/tarifas_por_peso.png'
        fig_costs.savefig(costs_plot_path)
        generated_files['tariff_plot'] = costs_plot_path
        logger.info(f"Gráfico de tarifas guardado como '{costs_plot_path}'")
        
        if show_plots:
            plt.figure(fig_costs.number)
            plt.show()
        else:
            plt.close(fig_costs)
        
        # 2. Cuántos pesos de la grilla gana cada modalidad
        if "cheapest" in table.columns:
            counts = table["cheapest"].value_counts().reindex(cost_columns, fill_value=0)
            fig_cheapest, ax_cheapest = plt.subplots(figsize=(8, 5))
            positions = np.arange(len(cost_columns))
            ax_cheapest.bar(positions, counts.to_numpy(), color=COLORS[:len(cost_columns)], alpha=0.7)
            ax_cheapest.set_xticks(positions)
            ax_cheapest.set_xticklabels(cost_columns)
            ax_cheapest.set_title('Modalidad más barata por peso')
            ax_cheapest.set_ylabel('Cantidad de pesos')
            fig_cheapest.tight_layout()
            
            cheapest_plot_path = f'{output_dir}/modalidad_mas_barata.png'
            fig_cheapest.savefig(cheapest_plot_path)
            generated_files['cheapest_plot'] = cheapest_plot_path
            logger.info(f"Gráfico de modalidad más barata guardado como '{cheapest_plot_path}'")
            plt.close(fig_cheapest)
        
        return generated_files
