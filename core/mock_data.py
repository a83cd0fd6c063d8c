"""Static seed data for every module. Nothing here is persisted."""
from typing import Dict, List

from core.models import (
    KPI,
    Category,
    Customer,
    InventoryItem,
    LowStockEntry,
    Order,
    Product,
    SubCategory,
    Supplier,
    Transaction,
)

INVENTORY_ITEMS: List[InventoryItem] = [
    InventoryItem(
        id="1",
        sku="PRD-001",
        name="Wireless Headphones",
        category="Electronics",
        sub_category="Audio",
        quantity=45,
        cost=35.99,
        price=79.99,
        status="In Stock",
        reorder_point=10,
        supplier="Premium Audio Systems",
        last_restocked="2023-06-01",
        image="https://images.unsplash.com/photo-1505740420928-5e560c06d30e",
    ),
    InventoryItem(
        id="2",
        sku="PRD-002",
        name="Smart Watch",
        category="Electronics",
        sub_category="Wearables",
        quantity=12,
        cost=89.99,
        price=199.99,
        status="Low Stock",
        reorder_point=15,
        supplier="Global Gadgets Ltd.",
        last_restocked="2023-05-20",
        image="https://images.unsplash.com/photo-1523275335684-37898b6baf30",
    ),
    InventoryItem(
        id="3",
        sku="PRD-003",
        name="Bluetooth Speaker",
        category="Electronics",
        sub_category="Audio",
        quantity=28,
        cost=25.5,
        price=59.99,
        status="In Stock",
        reorder_point=10,
        supplier="Premium Audio Systems",
        last_restocked="2023-06-05",
        image="https://images.unsplash.com/photo-1608043152269-423dbba4e7e1",
    ),
    InventoryItem(
        id="4",
        sku="PRD-004",
        name="Laptop Stand",
        category="Accessories",
        sub_category="Computer Accessories",
        quantity=0,
        cost=12.99,
        price=29.99,
        status="Out of Stock",
        reorder_point=5,
        supplier="Office Solutions Co.",
        last_restocked="2023-04-11",
        image="https://images.unsplash.com/photo-1527864550417-7fd91fc51a46",
    ),
    InventoryItem(
        id="5",
        sku="PRD-005",
        name="Wireless Mouse",
        category="Accessories",
        sub_category="Computer Accessories",
        quantity=32,
        cost=15.75,
        price=34.99,
        status="In Stock",
        reorder_point=8,
        supplier="Tech Components Inc.",
        last_restocked="2023-06-10",
        image="https://images.unsplash.com/photo-1605773527852-c546a8584ea3",
    ),
]

POS_PRODUCTS: List[Product] = [
    Product("1", "Wireless Headphones", 79.99, "Electronics", 45, "8901234567890",
            "https://images.unsplash.com/photo-1505740420928-5e560c06d30e"),
    Product("2", "Smart Watch", 199.99, "Electronics", 12, "8901234567891",
            "https://images.unsplash.com/photo-1523275335684-37898b6baf30"),
    Product("3", "Bluetooth Speaker", 59.99, "Electronics", 28, "8901234567892",
            "https://images.unsplash.com/photo-1608043152269-423dbba4e7e1"),
    Product("4", "Cotton T-Shirt", 24.99, "Clothing", 120, "8901234567893",
            "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab"),
    Product("5", "Denim Jeans", 49.99, "Clothing", 85, "8901234567894",
            "https://images.unsplash.com/photo-1542272604-787c3835535d"),
    Product("6", "Organic Coffee", 12.99, "Food & Beverages", 200, "8901234567895",
            "https://images.unsplash.com/photo-1559056199-641a0ac8b55e"),
    Product("7", "Ceramic Mug Set", 29.99, "Home & Kitchen", 35, "8901234567896",
            "https://images.unsplash.com/photo-1514228742587-6b1558fcca3d"),
    Product("8", "Face Moisturizer", 18.99, "Beauty & Health", 60, "8901234567897",
            "https://images.unsplash.com/photo-1556229010-6c3f2c9ca5f8"),
    Product("9", "Stainless Steel Water Bottle", 22.99, "Home & Kitchen", 75, "8901234567898",
            "https://images.unsplash.com/photo-1602143407151-7111542de6e8"),
    Product("10", "Wireless Charger", 34.99, "Electronics", 40, "8901234567899",
            "https://images.unsplash.com/photo-1585338069466-600b42b90afb"),
    Product("11", "Protein Bars (12 Pack)", 15.99, "Food & Beverages", 150, "8901234567900",
            "https://images.unsplash.com/photo-1622484212850-eb596d769edc"),
    Product("12", "Yoga Mat", 29.99, "Beauty & Health", 25, "8901234567901",
            "https://images.unsplash.com/photo-1592432678016-e910b452f9a2"),
]

ORDERS: List[Order] = [
    Order("ORD-001", "John Doe", "2023-06-15T14:30:00", 125.99, "delivered", "paid", 3, "Standard Shipping"),
    Order("ORD-002", "Jane Smith", "2023-06-14T10:15:00", 89.5, "processing", "paid", 2, "Express Shipping"),
    Order("ORD-003", "Robert Johnson", "2023-06-13T16:45:00", 245.75, "shipped", "paid", 5, "Standard Shipping"),
    Order("ORD-004", "Emily Davis", "2023-06-12T09:20:00", 32.99, "cancelled", "refunded", 1, "Standard Shipping"),
    Order("ORD-005", "Michael Wilson", "2023-06-11T13:10:00", 175.25, "returned", "refunded", 4, "Express Shipping"),
    Order("ORD-006", "Sarah Brown", "2023-06-10T11:30:00", 67.5, "delivered", "paid", 2, "Standard Shipping"),
    Order("ORD-007", "David Miller", "2023-06-09T15:45:00", 129.99, "pending", "unpaid", 3, "Express Shipping"),
    Order("ORD-008", "Lisa Taylor", "2023-06-08T10:05:00", 45.25, "delivered", "paid", 1, "Standard Shipping"),
]

CUSTOMERS: List[Customer] = [
    Customer("C001", "John Doe", "john.doe@example.com", "(555) 123-4567",
             "123 Main St, Anytown, CA 12345", "2022-01-15", 1245.67, 12, "active", "vip",
             "https://api.dicebear.com/7.x/avataaars/svg?seed=John"),
    Customer("C002", "Jane Smith", "jane.smith@example.com", "(555) 987-6543",
             "456 Oak Ave, Somewhere, NY 67890", "2022-03-22", 876.5, 8, "active", "regular",
             "https://api.dicebear.com/7.x/avataaars/svg?seed=Jane"),
    Customer("C003", "Robert Johnson", "robert.j@example.com", "(555) 456-7890",
             "789 Pine Rd, Elsewhere, TX 54321", "2022-05-10", 2345.2, 18, "active", "vip",
             "https://api.dicebear.com/7.x/avataaars/svg?seed=Robert"),
    Customer("C004", "Emily Davis", "emily.d@example.com", "(555) 789-0123",
             "321 Cedar Ln, Nowhere, FL 13579", "2022-07-05", 432.1, 4, "inactive", "regular",
             "https://api.dicebear.com/7.x/avataaars/svg?seed=Emily"),
    Customer("C005", "Michael Wilson", "michael.w@example.com", "(555) 321-6547",
             "654 Maple Dr, Anywhere, WA 97531", "2022-09-18", 156.75, 2, "active", "new",
             "https://api.dicebear.com/7.x/avataaars/svg?seed=Michael"),
    Customer("C006", "Sarah Brown", "sarah.b@example.com", "(555) 654-9870",
             "987 Elm St, Someplace, IL 24680", "2022-11-30", 1789.3, 15, "active", "vip",
             "https://api.dicebear.com/7.x/avataaars/svg?seed=Sarah"),
]

SUPPLIERS: List[Supplier] = [
    Supplier("SUP-001", "Tech Components Inc.", "John Smith", "john@techcomponents.com",
             "(555) 123-4567", "123 Tech Blvd, Silicon Valley, CA 94043", "2022-01-15",
             "active", 5, ("Electronics", "Computers"), 45, 125000),
    Supplier("SUP-002", "Global Gadgets Ltd.", "Sarah Johnson", "sarah@globalgadgets.com",
             "(555) 987-6543", "456 Innovation Way, Boston, MA 02108", "2022-03-22",
             "active", 4, ("Electronics", "Accessories"), 32, 87500),
    Supplier("SUP-003", "Premium Audio Systems", "Michael Brown", "michael@premiumaudio.com",
             "(555) 456-7890", "789 Sound Ave, Nashville, TN 37203", "2022-05-10",
             "active", 5, ("Audio", "Electronics"), 28, 65000),
    Supplier("SUP-004", "Office Solutions Co.", "Emily Davis", "emily@officesolutions.com",
             "(555) 789-0123", "321 Business Park, Chicago, IL 60601", "2022-07-05",
             "inactive", 3, ("Office Supplies", "Furniture"), 15, 32000),
    Supplier("SUP-005", "Digital Displays Ltd.", "Robert Wilson", "robert@digitaldisplays.com",
             "(555) 321-6547", "654 Tech Park, San Francisco, CA 94105", "2022-09-18",
             "active", 4, ("Electronics", "Displays"), 22, 54000),
    Supplier("SUP-006", "Smart Home Innovations", "Jessica Taylor", "jessica@smarthome.com",
             "(555) 654-9870", "987 Innovation Dr, Austin, TX 78701", "2022-11-30",
             "active", 5, ("Smart Home", "Electronics"), 18, 42000),
]

TRANSACTIONS: List[Transaction] = [
    Transaction("TRX-001", "John Doe", "2023-06-15T14:30:00", 125.99, "completed", "Credit Card", 3),
    Transaction("TRX-002", "Jane Smith", "2023-06-14T10:15:00", 89.5, "pending", "PayPal", 2),
    Transaction("TRX-003", "Robert Johnson", "2023-06-13T16:45:00", 245.75, "completed", "Credit Card", 5),
    Transaction("TRX-004", "Emily Davis", "2023-06-12T09:20:00", 32.99, "failed", "Debit Card", 1),
    Transaction("TRX-005", "Michael Wilson", "2023-06-11T13:10:00", 175.25, "refunded", "Cash", 4),
    Transaction("TRX-006", "Sarah Brown", "2023-06-10T11:30:00", 67.5, "completed", "Credit Card", 2),
    Transaction("TRX-007", "David Miller", "2023-06-09T15:45:00", 129.99, "pending", "PayPal", 3),
    Transaction("TRX-008", "Lisa Taylor", "2023-06-08T10:05:00", 45.25, "completed", "Debit Card", 1),
]

CATEGORIES: List[Category] = [
    Category(
        "Electronics",
        45,
        25000,
        expanded=True,
        subcategories=(
            SubCategory("Smartphones", "Electronics", 15, 12500),
            SubCategory("TVs", "Electronics", 8, 5600),
            SubCategory("Audio", "Electronics", 12, 3200),
        ),
    ),
    Category("Accessories", 32, 8500),
    Category("Audio", 28, 7200),
    Category("Computers", 18, 3600),
    Category("Other", 33, 1378.99),
]

SUBCATEGORIES: List[SubCategory] = [
    SubCategory("Smartphones", "Electronics", 15),
    SubCategory("TVs", "Electronics", 8),
    SubCategory("Audio", "Electronics", 12),
    SubCategory("Wearables", "Electronics", 6),
    SubCategory("Computers", "Electronics", 4),
    SubCategory("Computer Accessories", "Accessories", 20),
    SubCategory("Headphones", "Audio", 14),
]

KPIS: List[KPI] = [
    KPI("Total Revenue", "$24,780", 12.5, "up"),
    KPI("Total Orders", "1,482", 8.2, "up"),
    KPI("Inventory Value", "$89,120", 3.1, "down"),
    KPI("Profit Margin", "24.8%", 4.3, "up"),
]

ANALYTICS_KPIS: List[KPI] = [
    KPI("Total Revenue", "$24,780", 12.5, "up", "from last period"),
    KPI("Total Orders", "1,482", 8.2, "up", "from last period"),
    KPI("Conversion Rate", "3.6%", 1.2, "down", "from last period"),
    KPI("Avg. Order Value", "$86.42", 4.3, "up", "from last period"),
]

# Monthly sales against the previous period (dashboard chart)
SALES_SERIES: List[Dict] = [
    {"date": "Jan", "sales": 4000, "previous_sales": 2400},
    {"date": "Feb", "sales": 3000, "previous_sales": 1398},
    {"date": "Mar", "sales": 2000, "previous_sales": 9800},
    {"date": "Apr", "sales": 2780, "previous_sales": 3908},
    {"date": "May", "sales": 1890, "previous_sales": 4800},
    {"date": "Jun", "sales": 2390, "previous_sales": 3800},
    {"date": "Jul", "sales": 3490, "previous_sales": 4300},
    {"date": "Aug", "sales": 4000, "previous_sales": 2400},
    {"date": "Sep", "sales": 3000, "previous_sales": 1398},
    {"date": "Oct", "sales": 2000, "previous_sales": 9800},
    {"date": "Nov", "sales": 2780, "previous_sales": 3908},
    {"date": "Dec", "sales": 3890, "previous_sales": 4800},
]

# Monthly sales and profit (analytics module)
MONTHLY_SALES: List[Dict] = [
    {"name": "Jan", "sales": 4000, "profit": 2400},
    {"name": "Feb", "sales": 3000, "profit": 1398},
    {"name": "Mar", "sales": 2000, "profit": 9800},
    {"name": "Apr", "sales": 2780, "profit": 3908},
    {"name": "May", "sales": 1890, "profit": 4800},
    {"name": "Jun", "sales": 2390, "profit": 3800},
    {"name": "Jul", "sales": 3490, "profit": 4300},
    {"name": "Aug", "sales": 4000, "profit": 2400},
    {"name": "Sep", "sales": 3000, "profit": 1398},
    {"name": "Oct", "sales": 2000, "profit": 9800},
    {"name": "Nov", "sales": 2780, "profit": 3908},
    {"name": "Dec", "sales": 3890, "profit": 4800},
]

CATEGORY_VALUES: List[Dict] = [
    {"name": "Electronics", "value": 45000},
    {"name": "Accessories", "value": 30000},
    {"name": "Computers", "value": 25000},
    {"name": "Audio", "value": 15000},
    {"name": "Other", "value": 10000},
]

CUSTOMER_SEGMENTS: List[Dict] = [
    {"name": "New", "value": 400},
    {"name": "Returning", "value": 300},
    {"name": "Inactive", "value": 150},
]

LOW_STOCK_ITEMS: List[LowStockEntry] = [
    LowStockEntry("1", "Wireless Headphones", 5, 50),
    LowStockEntry("2", "USB-C Cables", 8, 100),
    LowStockEntry("3", "Power Banks", 3, 30),
]

TOP_SELLING_PRODUCTS: List[Dict] = [
    {"name": "Smartphone X", "sold": 124, "revenue": 12400},
    {"name": "Laptop Pro", "sold": 89, "revenue": 89000},
    {"name": "Wireless Earbuds", "sold": 76, "revenue": 3800},
]

INVENTORY_BY_CATEGORY: List[Dict] = [
    {"name": "Electronics", "value": 45000, "percentage": 40},
    {"name": "Accessories", "value": 30000, "percentage": 25},
    {"name": "Computers", "value": 25000, "percentage": 20},
    {"name": "Other", "value": 15000, "percentage": 15},
]

# (title, description, target path) for the dashboard quick actions
QUICK_ACTIONS: List[tuple] = [
    ("New Sale", "Create a new point of sale transaction", "/pos"),
    ("Add Inventory", "Add new products to your inventory", "/inventory"),
    ("Create Order", "Create a new purchase order", "/orders"),
    ("Add Customer", "Register a new customer", "/customers"),
    ("Manage Suppliers", "View and manage your suppliers", "/suppliers"),
    ("View Reports", "Access sales and inventory reports", "/analytics"),
    ("System Settings", "Configure system preferences", "/settings"),
    ("Process Returns", "Handle customer returns and refunds", "/orders"),
]

SETTINGS_DEFAULTS: Dict[str, object] = {
    "business_name": "Inventory Management System",
    "business_email": "contact@example.com",
    "business_phone": "(555) 123-4567",
    "business_address": "123 Business St, City, State 12345",
    "timezone": "America/New_York",
    "currency": "USD",
    "date_format": "MM/DD/YYYY",
    "language": "English",
    "dark_mode": True,
    "notifications": True,
    "auto_logout": False,
}
