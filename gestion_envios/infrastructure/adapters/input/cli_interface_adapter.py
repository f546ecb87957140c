"""Adaptador para la interfaz de línea de comandos."""

import logging
from typing import Callable, List, Optional

from gestion_envios.application.ports.input.delivery_service_port import DeliveryServicePort
from gestion_envios.application.ports.input.tariff_table_port import TariffTablePort
from gestion_envios.application.ports.output.label_rendering_port import LabelRenderingPort
from gestion_envios.application.ports.output.order_export_port import OrderExportPort
from gestion_envios.domain.exceptions import DomainError
from gestion_envios.domain.models.order import Order

logger = logging.getLogger(__name__)

YES_ANSWERS = ['s', 'si', 'sí', 'sim', 'y', 'yes']


class CLIInterfaceAdapter:
    """Adaptador para la interfaz de línea de comandos del sistema."""
    
    def __init__(
        self,
        delivery_service: DeliveryServicePort,
        label_service: LabelRenderingPort,
        export_service: OrderExportPort,
        tariff_table_service: TariffTablePort,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        self.delivery_service = delivery_service
        self.label_service = label_service
        self.export_service = export_service
        self.tariff_table_service = tariff_table_service
        self.input = input_func
        self.output = output_func
        self.orders: List[Order] = []
    
    def ask_yes_no(self, question: str) -> bool:
        """
        Pregunta al usuario hasta obtener una respuesta de sí o no.
        
        Returns:
            True si el usuario respondió afirmativamente
        """
        while True:
            response = self.input(f"{question} (s/n): ").strip().lower()
            
            if response in YES_ANSWERS:
                return True
            elif response in ['n', 'no', 'não', 'nao']:
                return False
            else:
                self.output("Respuesta no válida. Por favor, ingrese 's' para sí o 'n' para no.")
    
    def _read_weight(self) -> Optional[float]:
        raw = self.input("Peso del paquete en kg: ").strip().replace(",", ".")
        try:
            return float(raw)
        except ValueError:
            self.output(f"'{raw}' no es un número válido.")
            return None
    
    def create_delivery_interactive(self) -> Optional[Order]:
        """Pide los datos de una entrega, la crea y muestra su etiqueta."""
        self.output("Tipos de envío disponibles:")
        for shipping_type in self.delivery_service.list_shipping_types():
            self.output(f"  {shipping_type['code']} - {shipping_type['displayName']}")
        
        recipient = self.input("Destinatario: ")
        address = self.input("Dirección: ")
        weight = self._read_weight()
        if weight is None:
            return None
        shipping_type_code = self.input("Código del tipo de envío: ")
        
        try:
            order = self.delivery_service.create_delivery(recipient, address, weight, shipping_type_code)
        except DomainError as e:
            logger.warning(f"Entrega rechazada: {e}")
            self.output(f"Error: {e}")
            return None
        
        if self.ask_yes_no("¿Desea aplicar la promoción de peso?"):
            discounted = self.delivery_service.apply_promotional_discount(order)
            if discounted is order:
                self.output("El pedido no califica para la promoción (peso de hasta 10 kg).")
            else:
                self.output(f"Promoción aplicada: R$ {order.shipping_cost} -> R$ {discounted.shipping_cost}")
            order = discounted
        
        self.output(self.label_service.generate_shipping_label(order))
        self.output(self.label_service.generate_order_summary(order))
        self.orders.append(order)
        return order
    
    def show_tariff_table(self) -> None:
        """Pide un rango de pesos, muestra la tabla de tarifas y opcionalmente la grafica."""
        try:
            min_weight = float(self.input("Peso mínimo (default: 0.5): ") or "0.5")
            max_weight = float(self.input("Peso máximo (default: 20): ") or "20")
            step = float(self.input("Incremento (default: 0.5): ") or "0.5")
        except ValueError:
            logger.warning("Valores inválidos para la tabla de tarifas. Usando valores por defecto.")
            min_weight, max_weight, step = 0.5, 20.0, 0.5
        
        try:
            table = self.tariff_table_service.build_table(min_weight, max_weight, step)
        except ValueError as e:
            self.output(f"Error: {e}")
            return
        
        self.output(table.to_string(index=False))
        
        if self.ask_yes_no("¿Desea generar el gráfico de tarifas?"):
            files = self.tariff_table_service.plot_table(table)
            for path in files.values():
                self.output(f"Gráfico guardado en {path}")
    
    def export_orders(self) -> None:
        """Exporta los pedidos creados en la sesión."""
        formats = self.export_service.get_supported_formats()
        export_format = self.input(f"Formato ({', '.join(formats)}): ").strip() or "text"
        output_path = self.input("Ruta de salida (Enter para mostrar en consola): ").strip() or None
        
        try:
            result = self.export_service.export_orders(self.orders, export_format, output_path)
        except ValueError as e:
            self.output(f"Error: {e}")
            return
        
        self.output(result)
    
    def run_cli_interface(self) -> None:
        """Ejecuta el menú principal hasta que el usuario elija salir."""
        logger.info("Iniciando Sistema de Gestión de Envíos")
        
        actions = {
            "1": self.create_delivery_interactive,
            "2": self.show_tariff_table,
            "3": self.export_orders,
        }
        
        while True:
            self.output("\n1. Crear entrega\n2. Tabla de tarifas\n3. Exportar pedidos\n0. Salir")
            choice = self.input("Seleccione una opción: ").strip()
            
            if choice == "0":
                break
            action = actions.get(choice)
            if action is None:
                self.output("Opción no válida.")
                continue
            action()
        
        self.output("¡Gracias por usar el Sistema de Gestión de Envíos!")
        logger.info(f"Sesión finalizada con {len(self.orders)} pedidos creados")
