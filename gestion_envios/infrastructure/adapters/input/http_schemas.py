"""
Esquemas de la API HTTP de entregas.

Modelos pydantic para peticiones y respuestas. Los nombres de campo se exponen
en camelCase; también se aceptan en snake_case al recibir peticiones.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from gestion_envios.domain.services.shipping_calculator import exact_context

CENTS = Decimal("0.01")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _money(value: Decimal) -> float:
    return float(value.quantize(CENTS, context=exact_context(value, CENTS)))


class CreateDeliveryRequest(CamelModel):
    """Datos para crear una entrega.

    Los valores por defecto son vacíos para que un campo ausente llegue a la
    validación del dominio y se responda con su mensaje específico.
    """
    recipient: Optional[str] = ""
    address: Optional[str] = ""
    weight: Optional[float] = 0.0
    shipping_type: Optional[str] = Field("", description="Código del tipo de envío: EXP, PAD o ECO")


class DeliveryResponse(CamelModel):
    recipient: str
    address: str
    weight: float
    shipping_type: str = Field(..., description="Nombre visible del tipo de envío")
    shipping_cost: Decimal
    is_free_shipping: bool
    label: str
    summary: str

    @field_serializer("shipping_cost")
    def serialize_shipping_cost(self, value: Decimal) -> float:
        return _money(value)


class PromotionalDiscountResponse(CamelModel):
    original_cost: Decimal
    discounted_cost: Decimal
    savings: Decimal
    discount_applied: bool
    final_delivery: DeliveryResponse

    @field_serializer("original_cost", "discounted_cost", "savings")
    def serialize_money(self, value: Decimal) -> float:
        return _money(value)


class ShippingTypeResponse(CamelModel):
    code: str
    display_name: str
    raw_name: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
