# ---------- constants.py ----------
"""Project-wide constants: enumerations, tab labels and menu labels."""
from typing import Dict, List

STOCK_IN = "In Stock"
STOCK_LOW = "Low Stock"
STOCK_OUT = "Out of Stock"

ALL = "all"

INVENTORY_CATEGORIES: List[str] = [
    "Electronics",
    "Accessories",
    "Audio",
    "Computers",
    "Uncategorized",
    "Other",
]

INVENTORY_SUBCATEGORIES: Dict[str, List[str]] = {
    "Electronics": ["Audio", "Wearables", "Smartphones", "TVs", "Computers"],
    "Accessories": ["Computer Accessories", "Phone Accessories", "Cables"],
    "Audio": ["Headphones", "Speakers"],
    "Computers": ["Laptops", "Desktops"],
    "Uncategorized": ["General"],
    "Other": ["General"],
}

DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_SUBCATEGORY = "General"

POS_CATEGORIES: List[str] = [
    "Electronics",
    "Clothing",
    "Food & Beverages",
    "Home & Kitchen",
    "Beauty & Health",
]

PAYMENT_METHODS: Dict[str, str] = {
    "card": "Credit/Debit Card",
    "cash": "Cash",
    "wallet": "Digital Wallet",
}

ORDER_STATUSES: List[str] = [
    "pending",
    "processing",
    "shipped",
    "delivered",
    "cancelled",
    "returned",
]
# Returned orders are listed under the cancelled tab
ORDER_TABS: List[str] = [ALL] + [s for s in ORDER_STATUSES if s != "returned"]

CUSTOMER_TYPES: List[str] = ["vip", "regular", "new"]
CUSTOMER_TABS: List[str] = [ALL] + CUSTOMER_TYPES + ["inactive"]

SUPPLIER_TABS: List[str] = [ALL, "active", "inactive", "electronics", "audio", "other"]

# Badge variants shared by every list view (default/secondary/outline/destructive)
ORDER_STATUS_BADGES: Dict[str, str] = {
    "pending": "secondary",
    "processing": "default",
    "shipped": "default",
    "delivered": "default",
    "cancelled": "destructive",
    "returned": "outline",
}
PAYMENT_STATUS_BADGES: Dict[str, str] = {
    "paid": "default",
    "unpaid": "secondary",
    "refunded": "outline",
}
CUSTOMER_TYPE_BADGES: Dict[str, str] = {
    "vip": "default",
    "regular": "secondary",
    "new": "outline",
}
TRANSACTION_STATUS_BADGES: Dict[str, str] = {
    "completed": "default",
    "pending": "secondary",
    "failed": "destructive",
    "refunded": "outline",
}
STOCK_STATUS_BADGES: Dict[str, str] = {
    STOCK_IN: "default",
    STOCK_LOW: "secondary",
    STOCK_OUT: "destructive",
}

# Badge variant -> colour used when rendering badges as markdown
BADGE_COLORS: Dict[str, str] = {
    "default": "blue",
    "secondary": "gray",
    "outline": "violet",
    "destructive": "red",
}

ANALYTICS_DATE_RANGES: Dict[str, str] = {
    "today": "Today",
    "week": "This Week",
    "month": "This Month",
    "quarter": "This Quarter",
    "year": "This Year",
    "custom": "Custom Range",
}

# Sidebar menu labels (keep in sync with core.router.ROUTES)
MENU_DASHBOARD = "\U0001F4C8 Dashboard"
MENU_INVENTORY = "\U0001F4E6 Inventory"
MENU_POS = "\U0001F6D2 Point of Sale"
MENU_ANALYTICS = "\U0001F4CA Analytics"
MENU_CUSTOMERS = "\U0001F465 Customers"
MENU_ORDERS = "\U0001F9FE Orders"
MENU_SUPPLIERS = "\U0001F69A Suppliers"
MENU_SETTINGS = "⚙️ Settings"
