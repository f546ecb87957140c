#!/usr/bin/env python
"""
Ejemplo de uso del Sistema de Gestión de Envíos.

Sin argumentos ejecuta la interfaz de línea de comandos. Con el argumento
"serve" levanta la API HTTP con uvicorn:

    python example.py serve
"""

import logging
import sys

import uvicorn

# Importar componentes del dominio
from gestion_envios.domain.services.shipping_calculator_factory import ShippingCalculatorFactory
from gestion_envios.domain.services.validation_service import ValidationService

# Importar casos de uso, adaptadores y configuración
from gestion_envios.application.usecases.create_delivery_usecase import CreateDeliveryUseCase
from gestion_envios.application.usecases.tariff_table_usecase import TariffTableUseCase
from gestion_envios.infrastructure.adapters.input.cli_interface_adapter import CLIInterfaceAdapter
from gestion_envios.infrastructure.adapters.input.http_api_adapter import create_app
from gestion_envios.infrastructure.adapters.output.label_adapter import LabelAdapter
from gestion_envios.infrastructure.adapters.output.order_export_adapter import OrderExportAdapter
from gestion_envios.infrastructure.adapters.output.visualization_adapter import TariffVisualizationAdapter
from gestion_envios.infrastructure.config.logging_config import configure_logging
from gestion_envios.infrastructure.config.settings import get_settings


def main():
    """Función principal del ejemplo."""
    # 1. Configurar logging antes de iniciar cualquier componente
    settings = get_settings()
    configure_logging(settings.LOG_FILE, settings.LOG_LEVEL)
    logger = logging.getLogger(__name__)
    logger.info("Iniciando sistema de gestión de envíos")

    # 2. Crear instancias de servicios del dominio
    validation_service = ValidationService()
    calculator_factory = ShippingCalculatorFactory()

    # 3. Crear casos de uso
    delivery_usecase = CreateDeliveryUseCase(
        validation_service=validation_service,
        calculator_factory=calculator_factory
    )

    # 4. Crear adaptadores de salida
    label_adapter = LabelAdapter()

    if len(sys.argv) > 1 and sys.argv[1] == "serve":
        app = create_app(settings, delivery_service=delivery_usecase, label_service=label_adapter)
        uvicorn.run(app, host=settings.HOST, port=settings.PORT)
        return

    tariff_table_usecase = TariffTableUseCase(
        calculator_factory=calculator_factory,
        validation_service=validation_service,
        visualization_service=TariffVisualizationAdapter(),
        plots_dir=settings.PLOTS_DIR
    )

    # 5. Ejecutar la interfaz CLI
    cli_interface = CLIInterfaceAdapter(
        delivery_service=delivery_usecase,
        label_service=label_adapter,
        export_service=OrderExportAdapter(),
        tariff_table_service=tariff_table_usecase
    )
    cli_interface.run_cli_interface()


if __name__ == "__main__":
    main()
