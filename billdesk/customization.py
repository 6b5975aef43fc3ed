"""Typed shop customization settings.

Each of the twelve sections is a frozen dataclass with its defaults. Updates
go through ``dataclasses.replace``, so an unknown field name fails with
``TypeError`` and every other field is left as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Literal, Mapping

logger = logging.getLogger(__name__)

FieldType = Literal["text", "number", "date", "select"]


@dataclass(frozen=True)
class CustomField:
    name: str
    name_tamil: str
    type: FieldType = "text"
    options: tuple[str, ...] = ()


@dataclass(frozen=True)
class InvoiceSettings:
    show_logo: bool = True
    show_gstin: bool = True
    show_address: bool = True
    show_mobile: bool = True
    show_email: bool = False
    show_hsn_code: bool = True
    show_barcode: bool = False
    show_discount: bool = True
    show_round_off: bool = True
    show_payment_mode: bool = True
    show_footer: bool = True
    show_signature: bool = False
    show_qr_code: bool = False
    show_terms: bool = True
    invoice_title: str = "Tax Invoice"
    invoice_title_tamil: str = "வரி விலைப்பட்டியல்"
    terms_text: str = "Goods once sold will not be taken back. Subject to Tamil Nadu jurisdiction."
    format: Literal["thermal", "a4", "a5"] = "thermal"
    font_size: Literal["small", "medium", "large"] = "medium"


@dataclass(frozen=True)
class BillingSettings:
    enable_gst: bool = True
    default_gst_percent: float = 5
    enable_discount: bool = True
    enable_round_off: bool = True
    round_off_to: Literal["none", "nearest", "up", "down"] = "nearest"
    enable_partial_payment: bool = True
    enable_credit_sales: bool = True
    show_mrp: bool = True
    show_stock: bool = True
    show_product_image: bool = False
    quick_quantities: tuple[int, ...] = (1, 2, 5, 10)
    default_payment_mode: str = "cash"
    print_after_sale: bool = False
    confirm_before_sale: bool = False
    enable_negative_stock: bool = False
    enable_barcode_scanner: bool = True


@dataclass(frozen=True)
class ProductFieldSettings:
    show_tamil_name: bool = True
    show_hsn_code: bool = True
    show_barcode: bool = True
    show_mrp: bool = True
    show_gst: bool = True
    show_stock: bool = True
    show_unit: bool = True
    show_low_stock_threshold: bool = True
    show_batch_number: bool = False
    show_expiry_date: bool = False
    show_manufacturer: bool = False
    show_supplier: bool = False
    custom_fields: tuple[CustomField, ...] = ()


@dataclass(frozen=True)
class CustomerFieldSettings:
    show_email: bool = True
    show_address: bool = True
    show_gstin: bool = True
    show_credit_limit: bool = True
    show_loyalty_points: bool = False
    show_birthday: bool = False
    show_notes: bool = False
    custom_fields: tuple[CustomField, ...] = ()


@dataclass(frozen=True)
class DashboardSettings:
    show_today_sales: bool = True
    show_month_sales: bool = True
    show_year_sales: bool = False
    show_pending_dues: bool = True
    show_total_bills: bool = True
    show_sales_chart: bool = True
    show_hourly_chart: bool = True
    show_top_selling: bool = True
    show_low_stock: bool = True
    show_gst_summary: bool = True
    show_recent_bills: bool = True
    show_quick_actions: bool = True
    chart_type: Literal["area", "bar", "line"] = "area"
    card_layout: Literal["grid", "list"] = "grid"


@dataclass(frozen=True)
class TableColumnSettings:
    products: tuple[str, ...] = ("name", "category", "price", "gst", "stock", "status", "actions")
    customers: tuple[str, ...] = ("name", "mobile", "type", "outstanding", "totalPurchases", "actions")
    bills: tuple[str, ...] = ("billNumber", "customer", "date", "amount", "status")
    expenses: tuple[str, ...] = ("date", "category", "description", "amount", "paymentMode")
    purchases: tuple[str, ...] = ("date", "supplier", "amount", "status")
    stock: tuple[str, ...] = ("product", "category", "stock", "value", "status")


@dataclass(frozen=True)
class AppearanceSettings:
    primary_color: str = "#4f46e5"
    accent_color: str = "#f97316"
    font_family: Literal["inter", "noto-sans-tamil", "roboto", "poppins"] = "inter"
    font_size: Literal["small", "medium", "large", "xlarge"] = "medium"
    border_radius: Literal["none", "small", "medium", "large"] = "medium"
    sidebar_position: Literal["left", "right"] = "left"
    sidebar_collapsed: bool = False
    compact_mode: bool = False
    show_animations: bool = True
    show_tooltips: bool = True
    number_format: Literal["indian", "international"] = "indian"
    date_format: Literal["DD/MM/YYYY", "MM/DD/YYYY", "YYYY-MM-DD"] = "DD/MM/YYYY"
    currency_symbol: Literal["₹", "Rs.", "INR"] = "₹"
    currency_position: Literal["before", "after"] = "before"


@dataclass(frozen=True)
class TaxSettings:
    enable_gst: bool = True
    gst_rates: tuple[float, ...] = (0, 5, 12, 18, 28)
    default_gst_rate: float = 5
    show_gst_breakup: bool = True
    inclusive_gst: bool = False
    enable_cess: bool = False
    cess_percent: float = 0


@dataclass(frozen=True)
class NotificationSettings:
    enable_low_stock_alert: bool = True
    low_stock_threshold: int = 10
    enable_due_reminder: bool = True
    due_reminder_days: int = 7
    enable_daily_summary: bool = False
    enable_sound_effects: bool = True
    enable_email_notifications: bool = False


@dataclass(frozen=True)
class PaymentMode:
    id: str
    name: str
    name_tamil: str
    icon: str
    enabled: bool = True
    is_default: bool = False


@dataclass(frozen=True)
class Unit:
    id: str
    name: str
    name_tamil: str
    symbol: str
    enabled: bool = True


@dataclass(frozen=True)
class ProductCategory:
    id: str
    name: str
    name_tamil: str
    icon: str
    enabled: bool = True
    color: str = "#64748b"


@dataclass(frozen=True)
class ExpenseCategory:
    id: str
    name: str
    name_tamil: str
    icon: str
    enabled: bool = True


DEFAULT_PAYMENT_MODES: tuple[PaymentMode, ...] = (
    PaymentMode("cash", "Cash", "பணம்", "💵", enabled=True, is_default=True),
    PaymentMode("upi", "UPI", "UPI", "📱"),
    PaymentMode("card", "Card", "கார்டு", "💳"),
    PaymentMode("bank", "Bank Transfer", "வங்கி பரிமாற்றம்", "🏦"),
    PaymentMode("credit", "Credit", "கடன்", "📝"),
    PaymentMode("cheque", "Cheque", "காசோலை", "📄", enabled=False),
)

DEFAULT_UNITS: tuple[Unit, ...] = (
    Unit("pcs", "Pieces", "துண்டுகள்", "pcs"),
    Unit("kg", "Kilogram", "கிலோ", "kg"),
    Unit("g", "Gram", "கிராம்", "g"),
    Unit("l", "Litre", "லிட்டர்", "L"),
    Unit("ml", "Millilitre", "மில்லி", "ml"),
    Unit("m", "Metre", "மீட்டர்", "m", enabled=False),
    Unit("cm", "Centimetre", "சென்டி மீட்டர்", "cm", enabled=False),
    Unit("box", "Box", "பெட்டி", "box"),
    Unit("pack", "Pack", "பேக்", "pack"),
    Unit("dozen", "Dozen", "டஜன்", "dz"),
)

DEFAULT_PRODUCT_CATEGORIES: tuple[ProductCategory, ...] = (
    ProductCategory("groceries", "Groceries", "மளிகை பொருட்கள்", "🛒", color="#22c55e"),
    ProductCategory("dairy", "Dairy", "பால் பொருட்கள்", "🥛", color="#3b82f6"),
    ProductCategory("personal-care", "Personal Care", "தனிப்பட்ட பராமரிப்பு", "🧴", color="#ec4899"),
    ProductCategory("household", "Household", "வீட்டு பொருட்கள்", "🏠", color="#f97316"),
    ProductCategory("snacks", "Snacks", "தின்பண்டங்கள்", "🍪", color="#eab308"),
    ProductCategory("beverages", "Beverages", "பானங்கள்", "☕", color="#8b5cf6"),
    ProductCategory("ready-to-cook", "Ready to Cook", "சமைக்க தயார்", "🍳", color="#ef4444"),
    ProductCategory("medicines", "Medicines", "மருந்துகள்", "💊", enabled=False, color="#06b6d4"),
    ProductCategory("electronics", "Electronics", "மின்னணு சாதனங்கள்", "📱", enabled=False, color="#6366f1"),
    ProductCategory("stationery", "Stationery", "எழுது பொருட்கள்", "📝", enabled=False, color="#14b8a6"),
)

DEFAULT_EXPENSE_CATEGORIES: tuple[ExpenseCategory, ...] = (
    ExpenseCategory("rent", "Rent", "வாடகை", "🏪"),
    ExpenseCategory("electricity", "Electricity", "மின்சாரம்", "⚡"),
    ExpenseCategory("salary", "Staff Salary", "ஊழியர் சம்பளம்", "👥"),
    ExpenseCategory("transport", "Transport", "போக்குவரத்து", "🚛"),
    ExpenseCategory("maintenance", "Maintenance", "பராமரிப்பு", "🔧"),
    ExpenseCategory("misc", "Miscellaneous", "இதர செலவுகள்", "📦"),
    ExpenseCategory("internet", "Internet", "இணையம்", "🌐", enabled=False),
    ExpenseCategory("insurance", "Insurance", "காப்பீடு", "🛡️", enabled=False),
    ExpenseCategory("taxes", "Taxes", "வரிகள்", "📋", enabled=False),
)


@dataclass(frozen=True)
class PaymentModeSettings:
    modes: tuple[PaymentMode, ...] = DEFAULT_PAYMENT_MODES


@dataclass(frozen=True)
class UnitSettings:
    units: tuple[Unit, ...] = DEFAULT_UNITS


@dataclass(frozen=True)
class CategorySettings:
    product_categories: tuple[ProductCategory, ...] = DEFAULT_PRODUCT_CATEGORIES
    expense_categories: tuple[ExpenseCategory, ...] = DEFAULT_EXPENSE_CATEGORIES


@dataclass(frozen=True)
class CustomizationSettings:
    """The whole settings tree."""

    invoice: InvoiceSettings = field(default_factory=InvoiceSettings)
    billing: BillingSettings = field(default_factory=BillingSettings)
    product_fields: ProductFieldSettings = field(default_factory=ProductFieldSettings)
    customer_fields: CustomerFieldSettings = field(default_factory=CustomerFieldSettings)
    dashboard: DashboardSettings = field(default_factory=DashboardSettings)
    table_columns: TableColumnSettings = field(default_factory=TableColumnSettings)
    appearance: AppearanceSettings = field(default_factory=AppearanceSettings)
    tax: TaxSettings = field(default_factory=TaxSettings)
    notifications: NotificationSettings = field(default_factory=NotificationSettings)
    payment_modes: PaymentModeSettings = field(default_factory=PaymentModeSettings)
    units: UnitSettings = field(default_factory=UnitSettings)
    categories: CategorySettings = field(default_factory=CategorySettings)


SECTION_NAMES: tuple[str, ...] = tuple(f.name for f in fields(CustomizationSettings))

COLOR_PALETTES: tuple[dict[str, str], ...] = (
    {"name": "Indigo", "primary": "#4f46e5", "accent": "#f97316"},
    {"name": "Blue", "primary": "#2563eb", "accent": "#f59e0b"},
    {"name": "Green", "primary": "#16a34a", "accent": "#ef4444"},
    {"name": "Purple", "primary": "#9333ea", "accent": "#14b8a6"},
    {"name": "Rose", "primary": "#e11d48", "accent": "#0ea5e9"},
    {"name": "Amber", "primary": "#d97706", "accent": "#6366f1"},
    {"name": "Teal", "primary": "#0d9488", "accent": "#f43f5e"},
    {"name": "Slate", "primary": "#475569", "accent": "#22c55e"},
)

FONT_OPTIONS: tuple[dict[str, str], ...] = (
    {"id": "inter", "name": "Inter", "sample": "Modern & Clean"},
    {"id": "noto-sans-tamil", "name": "Noto Sans Tamil", "sample": "தமிழ் எழுத்துரு"},
    {"id": "roboto", "name": "Roboto", "sample": "Classic & Readable"},
    {"id": "poppins", "name": "Poppins", "sample": "Friendly & Geometric"},
)


def _check_section(name: str) -> None:
    if name not in SECTION_NAMES:
        raise KeyError(f"Unknown customization section: {name!r}")


class CustomizationStore:
    """Holds the current settings tree and applies section-scoped edits."""

    def __init__(self, settings: CustomizationSettings | None = None) -> None:
        self.settings = settings or CustomizationSettings()

    def get_section(self, name: str) -> Any:
        _check_section(name)
        return getattr(self.settings, name)

    def update_section(self, name: str, updates: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        """Shallow-merge ``updates`` into one section and return the new section value."""
        _check_section(name)
        changes = {**(updates or {}), **kwargs}
        section = replace(getattr(self.settings, name), **changes)
        self.settings = replace(self.settings, **{name: section})
        logger.debug("customization %s updated: %s", name, sorted(changes))
        return section

    def reset_section(self, name: str | None = None) -> None:
        """Restore one section, or the whole tree when ``name`` is None."""
        if name is None:
            self.settings = CustomizationSettings()
            logger.debug("customization reset")
            return
        _check_section(name)
        default = getattr(CustomizationSettings(), name)
        self.settings = replace(self.settings, **{name: default})
        logger.debug("customization %s reset", name)

    @property
    def enabled_payment_modes(self) -> list[PaymentMode]:
        return [mode for mode in self.settings.payment_modes.modes if mode.enabled]

    @property
    def default_payment_mode(self) -> PaymentMode | None:
        enabled = self.enabled_payment_modes
        for mode in enabled:
            if mode.is_default:
                return mode
        return enabled[0] if enabled else None

    @property
    def enabled_units(self) -> list[Unit]:
        return [unit for unit in self.settings.units.units if unit.enabled]

    @property
    def enabled_product_categories(self) -> list[ProductCategory]:
        return [category for category in self.settings.categories.product_categories if category.enabled]

    @property
    def enabled_expense_categories(self) -> list[ExpenseCategory]:
        return [category for category in self.settings.categories.expense_categories if category.enabled]

    @property
    def gst_rates(self) -> tuple[float, ...]:
        return self.settings.tax.gst_rates
