"""
Unit tests for domain models

Author: TM3
Date: 2025-10-17
"""
import pytest
from pydantic import ValidationError

from onium_admin.domain.order import STATUS_DISPLAY, BulkStatusUpdate, Order, OrderPage, OrderStatus
from onium_admin.domain.product import (
    ProductCreate,
    SpecRow,
    build_specifications,
    generate_slug,
    unique_slug,
)


class TestOrderStatus:

    def test_every_status_has_display(self):
        assert set(STATUS_DISPLAY) == set(OrderStatus)

    def test_label_and_badge(self):
        assert OrderStatus.SHIPPED.label == "Shipped"
        assert "purple" in OrderStatus.SHIPPED.badge

    def test_unknown_status_rejected(self, make_order):
        with pytest.raises(ValidationError):
            Order(**make_order(status="returned"))


class TestOrder:

    def test_short_id(self, make_order):
        order = Order(**make_order(id="3f2a9c1e-0000-0000-0000-000000000000"))

        assert order.short_id == "3F2A9C1E"

    def test_zero_subtotal_is_kept(self, make_order):
        """Test a stored subtotal of 0 is used as-is, not replaced by total minus shipping"""
        order = Order(**make_order(subtotal_price=0, shipping_charge=200, total_price=200))

        assert order.subtotal == 0

    def test_missing_subtotal_falls_back(self, make_order):
        order = Order(**make_order(subtotal_price=None, shipping_charge=200, total_price=1200))

        assert order.subtotal == 1000

    def test_to_dict_adds_display_fields(self, make_order):
        data = Order(**make_order(payment_method="card")).to_dict()

        assert data["payment_label"] == "Card"
        assert data["status_label"] == "Pending"
        assert data["item_count"] == 0


class TestOrderPage:

    @pytest.mark.parametrize("total, size, pages", [(0, 10, 0), (10, 10, 1), (25, 10, 3), (1, 10, 1)])
    def test_total_pages(self, total, size, pages):
        assert OrderPage(total=total, page_size=size).total_pages == pages

    def test_bulk_update_dedupes_ids(self):
        payload = BulkStatusUpdate(ids=["a", "b", "a"], status="shipped")

        assert payload.ids == ["a", "b"]

    def test_bulk_update_requires_ids(self):
        with pytest.raises(ValidationError):
            BulkStatusUpdate(ids=[], status="shipped")


class TestSpecifications:
    """Test the specification editor rows"""

    def test_rows_become_mapping(self):
        specs = build_specifications([
            SpecRow(key="Volume", value="100ml"),
            SpecRow(key=" Origin ", value=" Morocco "),
            SpecRow(key="", value=""),
        ])

        assert specs == {"Volume": "100ml", "Origin": "Morocco"}

    @pytest.mark.parametrize("rows", [
        [SpecRow(key="Volume", value="")],
        [SpecRow(key="", value="100ml")],
        [SpecRow(key="Volume", value="1"), SpecRow(key="Volume", value="2")],
    ])
    def test_malformed_rows_rejected(self, rows):
        with pytest.raises(ValueError):
            build_specifications(rows)

    def test_product_create_rejects_half_filled_row(self):
        with pytest.raises(ValidationError):
            ProductCreate(title="Oil", price=10, stock=1, specifications=[{"key": "Size", "value": ""}])

    def test_product_create_accepts_mapping(self):
        product = ProductCreate(title="Oil", price=10, stock=1, specifications={"Size": "Large"})

        assert product.specifications == {"Size": "Large"}


class TestSlugs:

    @pytest.mark.parametrize("title, slug", [
        ("Argan Oil", "argan-oil"),
        ("  Rose -- Water!! ", "rose-water"),
        ("Shea_Butter 200g", "shea-butter-200g"),
    ])
    def test_generate_slug(self, title, slug):
        assert generate_slug(title) == slug

    def test_unique_slug_has_four_digit_suffix(self):
        slug = unique_slug("Argan Oil")

        base, suffix = slug.rsplit("-", 1)
        assert base == "argan-oil"
        assert len(suffix) == 4 and suffix.isdigit()
