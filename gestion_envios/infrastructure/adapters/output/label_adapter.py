"""Adaptador de salida para etiquetas y resúmenes de pedidos."""

from gestion_envios.application.ports.output.label_rendering_port import LabelRenderingPort
from gestion_envios.domain.exceptions import MissingArgumentError
from gestion_envios.domain.models.order import Order
from gestion_envios.domain.value_objects.weight import format_decimal_ptbr

FREE_SHIPPING_BANNER = "║ 🎉 FRETE GRÁTIS! 🎉                 ║"


class LabelAdapter(LabelRenderingPort):
    """Genera la etiqueta de entrega en formato de caja y el resumen de una línea."""
    
    def generate_shipping_label(self, order: Order) -> str:
        if order is None:
            raise MissingArgumentError("order")
        
        lines = [
            "╔══════════════════════════════════════╗",
            "║              ETIQUETA DE ENTREGA     ║",
            "╠══════════════════════════════════════╣",
            f"║ Destinatário: {order.recipient.name:<20} ║",
            f"║ Endereço: {order.address.value:<24} ║",
            f"║ Peso: {order.weight.to_string():<28} ║",
            f"║ Tipo de Frete: {order.shipping_type.to_display_name():<19} ║",
            f"║ Valor do Frete: R$ {format_decimal_ptbr(order.shipping_cost):<17} ║",
            # Sin envío gratuito la línea del aviso queda vacía
            FREE_SHIPPING_BANNER if order.is_free_shipping else "",
            "╚══════════════════════════════════════╝",
        ]
        return "\n".join(lines)
    
    def generate_order_summary(self, order: Order) -> str:
        if order is None:
            raise MissingArgumentError("order")
        
        summary = (f"Pedido para {order.recipient.name} "
                   f"com frete tipo {order.shipping_type.to_display_name()} "
                   f"no valor de R$ {format_decimal_ptbr(order.shipping_cost)}")
        
        if order.is_free_shipping:
            summary += " (FRETE GRÁTIS)"
        
        return summary
