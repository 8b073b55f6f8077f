"""Business settings singleton.

Boolean switches are kept as "true"/"false" strings, the format the POS
front end reads and writes.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bondpos.core import clock
from bondpos.db.base import Base, BusinessDateTime, RecordMixin


def _flag(default: str):
    return mapped_column(String(5), default=default, nullable=False)


def _choice(default: str):
    return mapped_column(String(50), default=default, nullable=False)


def _money(default: Optional[str] = None):
    if default is None:
        return mapped_column(Numeric(10, 2), nullable=True)
    return mapped_column(Numeric(10, 2), default=Decimal(default), nullable=False)


class BusinessSettings(Base, RecordMixin):
    __tablename__ = "business_settings"

    # Business profile
    business_name: Mapped[str] = _choice("BondPos POS")
    business_logo: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    date_format: Mapped[str] = _choice("dd-mm-yyyy")
    time_format: Mapped[str] = _choice("12h")
    terminal_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # Payment methods
    payment_cash: Mapped[str] = _flag("true")
    payment_card: Mapped[str] = _flag("true")
    payment_aba: Mapped[str] = _flag("true")
    payment_acleda: Mapped[str] = _flag("true")
    payment_credit: Mapped[str] = _flag("true")
    default_payment_method: Mapped[str] = _choice("cash")
    min_transaction_amount: Mapped[Decimal] = _money("0")
    max_transaction_amount: Mapped[Optional[Decimal]] = _money()

    # Tax and discount
    vat_rate: Mapped[Decimal] = _money("0")
    service_tax_rate: Mapped[Decimal] = _money("0")
    default_discount: Mapped[Decimal] = _money("0")
    enable_percentage_discount: Mapped[str] = _flag("true")
    enable_fixed_discount: Mapped[str] = _flag("true")
    max_discount: Mapped[Decimal] = _money("50")

    # Receipt
    invoice_prefix: Mapped[str] = _choice("INV-")
    receipt_header: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    receipt_footer: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    receipt_logo: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    auto_print_receipt: Mapped[str] = _flag("false")
    show_logo_on_receipt: Mapped[str] = _flag("true")
    include_tax_breakdown: Mapped[str] = _flag("true")

    # Hardware
    receipt_printer: Mapped[str] = _choice("default")
    kitchen_printer: Mapped[str] = _choice("none")
    paper_size: Mapped[str] = _choice("80mm")
    enable_barcode_scanner: Mapped[str] = _flag("false")
    enable_cash_drawer: Mapped[str] = _flag("true")

    # Currency and locale
    currency: Mapped[str] = _choice("usd")
    language: Mapped[str] = _choice("en")
    decimal_places: Mapped[str] = _choice("2")
    rounding_rule: Mapped[str] = _choice("nearest")
    currency_symbol_position: Mapped[str] = _choice("before")

    # Backup
    auto_backup: Mapped[str] = _flag("true")
    backup_frequency: Mapped[str] = _choice("daily")
    backup_storage: Mapped[str] = _choice("cloud")

    # Notifications
    low_stock_alerts: Mapped[str] = _flag("true")
    stock_threshold: Mapped[int] = mapped_column(Integer, default=10, nullable=False)
    sale_notifications: Mapped[str] = _flag("false")
    discount_alerts: Mapped[str] = _flag("false")
    system_update_notifications: Mapped[str] = _flag("true")
    notification_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Appearance
    color_theme: Mapped[str] = _choice("orange")
    layout_preference: Mapped[str] = _choice("grid")
    font_size: Mapped[str] = _choice("medium")
    compact_mode: Mapped[str] = _flag("false")
    show_animations: Mapped[str] = _flag("true")

    # Staff permissions
    perm_access_reports: Mapped[str] = _flag("true")
    perm_access_settings: Mapped[str] = _flag("false")
    perm_process_refunds: Mapped[str] = _flag("false")
    perm_manage_inventory: Mapped[str] = _flag("true")

    updated_at: Mapped[datetime] = mapped_column(BusinessDateTime, default=clock.now, nullable=False)
