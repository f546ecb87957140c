"""Tests for OrderExportAdapter."""
import json

import pandas as pd
import pytest

from gestion_envios.domain.value_objects.export_format import ExportFormat
from gestion_envios.domain.value_objects.shipping_type import ShippingType
from gestion_envios.infrastructure.adapters.output.order_export_adapter import OrderExportAdapter


@pytest.fixture
def export_adapter():
    return OrderExportAdapter()


@pytest.fixture
def orders(make_order):
    return [
        make_order(weight=2.5, shipping_type=ShippingType.STANDARD),
        make_order(weight=1.0, shipping_type=ShippingType.ECONOMY, recipient="Maria Santos"),
        make_order(weight=3.0, shipping_type=ShippingType.EXPRESS, recipient="Carlos Pereira"),
    ]


class TestOrderExportAdapter:

    def test_supported_formats(self, export_adapter):
        assert set(export_adapter.get_supported_formats()) == {"text", "csv", "json", "excel"}

    def test_unsupported_format(self, export_adapter, orders):
        with pytest.raises(ValueError, match="Formato no soportado"):
            export_adapter.export_orders(orders, "xml")

    def test_json(self, export_adapter, orders):
        data = json.loads(export_adapter.export_orders(orders, ExportFormat.JSON))
        assert len(data["orders"]) == 3
        assert data["orders"][0]["shipping_cost"] == 3.0
        assert data["orders"][1]["is_free_shipping"] is True
        assert data["total_cost"] == 17.5

    def test_csv_to_file(self, export_adapter, orders, tmp_path):
        path = tmp_path / "pedidos.csv"
        assert export_adapter.export_orders(orders, "csv", str(path)) == str(path)

        df = pd.read_csv(path)
        assert list(df["recipient"]) == ["João Silva", "Maria Santos", "Carlos Pereira"]
        assert list(df["shipping_type_code"]) == ["PAD", "ECO", "EXP"]

    def test_csv_string(self, export_adapter, orders):
        content = export_adapter.export_orders(orders, "csv")
        assert content.splitlines()[0] == (
            "recipient,address,weight,shipping_type_code,shipping_type,shipping_cost,is_free_shipping"
        )

    def test_excel_requires_path(self, export_adapter, orders):
        with pytest.raises(ValueError):
            export_adapter.export_orders(orders, "excel")

    def test_excel(self, export_adapter, orders, tmp_path):
        path = tmp_path / "pedidos.xlsx"
        export_adapter.export_orders(orders, "excel", str(path))
        df = pd.read_excel(path, sheet_name="Pedidos")
        assert len(df) == 3

    def test_text(self, export_adapter, orders):
        content = export_adapter.export_orders(orders, "text")
        assert "Entrega para Maria Santos - Econômico - R$ 0,00 (FRETE GRÁTIS)" in content
        assert content.endswith("Total de fretes: R$ 17,50")

    def test_empty_list(self, export_adapter):
        assert export_adapter.export_orders([], "text") == "No hay pedidos para exportar"
