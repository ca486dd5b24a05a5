"""
Invoice Service
Renders a printable, self-contained HTML invoice / packing slip for one order

Author: TM3
Date: 2025-10-17
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from onium_admin.core.config import settings
from onium_admin.domain.order import Order

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@dataclass
class StoreInfo:
    """Store details printed in the invoice header and footer"""
    name: str
    contact: str
    location: str
    currency: str = "Rs"

    @property
    def display_name(self) -> str:
        return self.name.rstrip(".").title()

    @classmethod
    def from_settings(cls) -> "StoreInfo":
        return cls(
            name=settings.STORE_NAME,
            contact=settings.STORE_CONTACT,
            location=settings.STORE_LOCATION,
            currency=settings.CURRENCY_SYMBOL,
        )


def _environment(currency: str) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
    )
    env.filters["money"] = lambda value: f"{currency}{value:,.2f}"
    return env


def render_invoice(order: Order, store: Optional[StoreInfo] = None) -> str:
    """
    Render the invoice document for an order and its items

    Customer-entered text is HTML-escaped. The document carries its own CSS
    and opens the print dialog when loaded.

    Args:
        order: Order with order_items filled in
        store: Store details (defaults to the configured store)

    Returns:
        Complete HTML document
    """
    store = store or StoreInfo.from_settings()
    template = _environment(store.currency).get_template("invoice.html")
    return template.render(order=order, store=store)
