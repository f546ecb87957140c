"""Tests for label and summary rendering."""
import pytest

from gestion_envios.domain.exceptions import MissingArgumentError
from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.infrastructure.adapters.output.label_adapter import FREE_SHIPPING_BANNER, LabelAdapter


@pytest.fixture
def label_adapter():
    return LabelAdapter()


class TestShippingLabel:

    def test_label_contents(self, label_adapter, make_order):
        order = make_order(weight=2.5, shipping_type=ShippingType.STANDARD)
        label = label_adapter.generate_shipping_label(order)

        assert "ETIQUETA DE ENTREGA" in label
        assert "João Silva" in label
        assert "Rua das Flores, 123" in label
        assert "2,50 kg" in label
        assert "Padrão" in label
        assert "R$ 3,00" in label
        assert label.startswith("╔")
        assert label.endswith("╝")
        assert FREE_SHIPPING_BANNER not in label

    def test_label_layout(self, label_adapter, make_order):
        order = make_order(weight=2.5, shipping_type=ShippingType.STANDARD)
        lines = label_adapter.generate_shipping_label(order).split("\n")

        assert len(lines) == 10
        assert lines[3] == "║ Destinatário: João Silva           ║"
        assert lines[5] == "║ Peso: 2,50 kg                      ║"
        assert lines[7] == "║ Valor do Frete: R$ 3,00              ║"
        assert lines[8] == ""

    def test_free_shipping_banner(self, label_adapter, make_order):
        order = make_order(weight=1.0, shipping_type=ShippingType.ECONOMY,
                           recipient="Maria Santos", address="Av. Paulista, 1000")
        label = label_adapter.generate_shipping_label(order)

        assert "🎉 FRETE GRÁTIS! 🎉" in label
        assert "Maria Santos" in label
        assert "Econômico" in label
        assert label.split("\n")[8] == FREE_SHIPPING_BANNER

    @pytest.mark.parametrize("shipping_type,name", [
        (ShippingType.STANDARD, "Padrão"),
        (ShippingType.EXPRESS, "Expresso"),
        (ShippingType.ECONOMY, "Econômico"),
    ])
    def test_displays_shipping_type_name(self, label_adapter, make_order, shipping_type, name):
        assert name in label_adapter.generate_shipping_label(make_order(shipping_type=shipping_type))

    def test_none_order(self, label_adapter):
        with pytest.raises(MissingArgumentError):
            label_adapter.generate_shipping_label(None)


class TestOrderSummary:

    def test_summary(self, label_adapter, make_order):
        order = make_order(weight=3.0, shipping_type=ShippingType.EXPRESS, recipient="Carlos Pereira")
        summary = label_adapter.generate_order_summary(order)
        assert summary == "Pedido para Carlos Pereira com frete tipo Expresso no valor de R$ 14,50"

    def test_free_shipping_suffix(self, label_adapter, make_order):
        order = make_order(weight=1.5, shipping_type=ShippingType.ECONOMY, recipient="Ana Costa")
        summary = label_adapter.generate_order_summary(order)
        assert summary.startswith("Pedido para Ana Costa")
        assert summary.endswith("(FRETE GRÁTIS)")

    def test_none_order(self, label_adapter):
        with pytest.raises(MissingArgumentError):
            label_adapter.generate_order_summary(None)
