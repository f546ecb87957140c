"""
API HTTP de entregas.

Endpoints:
- POST /api/order/create: crea una entrega y devuelve su etiqueta
- POST /api/order/apply-promotional-discount: simula la promoción de peso
- GET  /api/order/shipping-types: lista los tipos de envío

Los errores del dominio se responden con 400 y su mensaje; cualquier otro
error se registra completo y se responde con un 500 genérico.
"""
import logging
from typing import Callable, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse

from gestion_envios.application.ports.input.delivery_service_port import DeliveryServicePort
from gestion_envios.application.ports.output.label_rendering_port import LabelRenderingPort
from gestion_envios.application.usecases.create_delivery_usecase import CreateDeliveryUseCase
from gestion_envios.domain.exceptions import DomainError
from gestion_envios.domain.models.order import Order
from gestion_envios.domain.services.shipping_calculator_factory import ShippingCalculatorFactory
from gestion_envios.domain.services.validation_service import ValidationService
from gestion_envios.infrastructure.adapters.input.http_schemas import (
    CreateDeliveryRequest,
    DeliveryResponse,
    ErrorResponse,
    PromotionalDiscountResponse,
    ShippingTypeResponse,
)
from gestion_envios.infrastructure.adapters.output.label_adapter import LabelAdapter
from gestion_envios.infrastructure.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/order", tags=["order"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Datos de entrada inválidos"},
    500: {"model": ErrorResponse, "description": "Error interno"},
}


# ==================== Dependencias ====================


def get_delivery_service(request: Request) -> DeliveryServicePort:
    return request.app.state.delivery_service


def get_label_service(request: Request) -> LabelRenderingPort:
    return request.app.state.label_service


# ==================== Helpers ====================


def order_to_response(order: Order, label_service: LabelRenderingPort) -> DeliveryResponse:
    """Convierte un pedido a la respuesta HTTP con etiqueta y resumen."""
    return DeliveryResponse(
        recipient=order.recipient.name,
        address=order.address.value,
        weight=order.weight.value,
        shipping_type=order.shipping_type.to_display_name(),
        shipping_cost=order.shipping_cost,
        is_free_shipping=order.is_free_shipping,
        label=label_service.generate_shipping_label(order),
        summary=label_service.generate_order_summary(order),
    )


def handle_errors(operation: str, action: Callable[[], object]):
    """Ejecuta la acción traduciendo las excepciones a respuestas JSON."""
    try:
        return action()
    except DomainError as e:
        logger.warning(f"{operation} rechazado: {e}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(e)},
        )
    except Exception as e:
        logger.exception(f"Error inesperado en {operation}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Erro interno do servidor", "details": type(e).__name__},
        )


# ==================== Endpoints ====================


@router.post("/create", response_model=DeliveryResponse, responses=ERROR_RESPONSES)
def create_delivery(
    request: CreateDeliveryRequest,
    delivery_service: DeliveryServicePort = Depends(get_delivery_service),
    label_service: LabelRenderingPort = Depends(get_label_service),
):
    """Crea una entrega y devuelve su costo, etiqueta y resumen."""
    def action():
        order = delivery_service.create_delivery(
            request.recipient,
            request.address,
            request.weight,
            request.shipping_type,
        )
        return order_to_response(order, label_service)

    return handle_errors("create", action)


@router.post("/apply-promotional-discount", response_model=PromotionalDiscountResponse,
             responses=ERROR_RESPONSES)
def apply_promotional_discount(
    request: CreateDeliveryRequest,
    delivery_service: DeliveryServicePort = Depends(get_delivery_service),
    label_service: LabelRenderingPort = Depends(get_label_service),
):
    """Crea la entrega, aplica la promoción de peso y compara los costos."""
    def action():
        quote = delivery_service.quote_promotional_discount(
            request.recipient,
            request.address,
            request.weight,
            request.shipping_type,
        )
        return PromotionalDiscountResponse(
            original_cost=quote.original_cost,
            discounted_cost=quote.discounted_cost,
            savings=quote.savings,
            discount_applied=quote.discount_applied,
            final_delivery=order_to_response(quote.discounted_order, label_service),
        )

    return handle_errors("apply-promotional-discount", action)


@router.get("/shipping-types", response_model=List[ShippingTypeResponse])
def get_shipping_types(delivery_service: DeliveryServicePort = Depends(get_delivery_service)):
    """Lista los tipos de envío disponibles (el orden no está garantizado)."""
    return [ShippingTypeResponse(**shipping_type) for shipping_type in delivery_service.list_shipping_types()]


# ==================== Aplicación ====================


def create_app(
    settings: Optional[Settings] = None,
    delivery_service: Optional[DeliveryServicePort] = None,
    label_service: Optional[LabelRenderingPort] = None,
) -> FastAPI:
    """Construye la aplicación FastAPI con sus servicios.

    Si no se indican servicios se crean los del dominio con sus valores por defecto.
    """
    settings = settings or get_settings()

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)
    app.state.settings = settings
    app.state.delivery_service = delivery_service or CreateDeliveryUseCase(
        validation_service=ValidationService(),
        calculator_factory=ShippingCalculatorFactory(),
    )
    app.state.label_service = label_service or LabelAdapter()

    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    logger.info(f"Aplicación '{settings.APP_NAME}' creada")
    return app
