"""Editable demo catalog, customer, bill and staff data."""

from __future__ import annotations

PRODUCTS: list[dict[str, object]] = [
    {
        "id": "P001", "name": "Basmati Rice (1kg)", "name_tamil": "பாஸ்மதி அரிசி (1கிலோ)",
        "category": "Groceries", "price": 120, "mrp": 140, "gst_percent": 5, "hsn_code": "1006",
        "stock": 150, "unit": "kg", "barcode": "8901234567890", "low_stock_threshold": 20,
    },
    {
        "id": "P002", "name": "Toor Dal (1kg)", "name_tamil": "துவரம் பருப்பு (1கிலோ)",
        "category": "Groceries", "price": 145, "mrp": 160, "gst_percent": 5, "hsn_code": "0713",
        "stock": 80, "unit": "kg", "barcode": "8901234567891", "low_stock_threshold": 15,
    },
    {
        "id": "P003", "name": "Sunflower Oil (1L)", "name_tamil": "சூரியகாந்தி எண்ணெய் (1L)",
        "category": "Groceries", "price": 135, "mrp": 150, "gst_percent": 5, "hsn_code": "1512",
        "stock": 60, "unit": "L", "barcode": "8901234567892", "low_stock_threshold": 10,
    },
    {
        "id": "P004", "name": "Mysore Sandal Soap", "name_tamil": "மைசூர் சந்தன சோப்பு",
        "category": "Personal Care", "price": 52, "mrp": 55, "gst_percent": 18, "hsn_code": "3401",
        "stock": 200, "unit": "pcs", "barcode": "8901234567893", "low_stock_threshold": 25,
    },
    {
        "id": "P005", "name": "Aashirvaad Atta (5kg)", "name_tamil": "ஆசீர்வாத் ஆட்டா (5கிலோ)",
        "category": "Groceries", "price": 280, "mrp": 300, "gst_percent": 5, "hsn_code": "1101",
        "stock": 45, "unit": "kg", "barcode": "8901234567894", "low_stock_threshold": 10,
    },
    {
        "id": "P006", "name": "Amul Butter (500g)", "name_tamil": "அமுல் வெண்ணெய் (500g)",
        "category": "Dairy", "price": 280, "mrp": 295, "gst_percent": 12, "hsn_code": "0405",
        "stock": 30, "unit": "pcs", "barcode": "8901234567895", "low_stock_threshold": 8,
    },
    {
        "id": "P007", "name": "Parle-G Biscuits", "name_tamil": "பார்லே-ஜி பிஸ்கட்",
        "category": "Snacks", "price": 10, "mrp": 10, "gst_percent": 18, "hsn_code": "1905",
        "stock": 500, "unit": "pcs", "barcode": "8901234567896", "low_stock_threshold": 50,
    },
    {
        "id": "P008", "name": "Colgate Toothpaste (200g)", "name_tamil": "கோல்கேட் டூத்பேஸ்ட் (200g)",
        "category": "Personal Care", "price": 115, "mrp": 120, "gst_percent": 18, "hsn_code": "3306",
        "stock": 75, "unit": "pcs", "barcode": "8901234567897", "low_stock_threshold": 15,
    },
    {
        "id": "P009", "name": "Surf Excel (1kg)", "name_tamil": "சர்ஃப் எக்செல் (1கிலோ)",
        "category": "Household", "price": 180, "mrp": 195, "gst_percent": 18, "hsn_code": "3402",
        "stock": 40, "unit": "kg", "barcode": "8901234567898", "low_stock_threshold": 10,
    },
    {
        "id": "P010", "name": "Filter Coffee Powder (500g)", "name_tamil": "பில்டர் காபி (500g)",
        "category": "Beverages", "price": 320, "mrp": 350, "gst_percent": 5, "hsn_code": "0901",
        "stock": 25, "unit": "pcs", "barcode": "8901234567899", "low_stock_threshold": 5,
    },
    {
        "id": "P011", "name": "Dosa Batter (1kg)", "name_tamil": "தோசை மாவு (1கிலோ)",
        "category": "Ready to Cook", "price": 80, "mrp": 90, "gst_percent": 5, "hsn_code": "1901",
        "stock": 20, "unit": "kg", "barcode": "8901234567900", "low_stock_threshold": 8,
    },
    {
        "id": "P012", "name": "Curd (500ml)", "name_tamil": "தயிர் (500ml)",
        "category": "Dairy", "price": 35, "mrp": 38, "gst_percent": 5, "hsn_code": "0403",
        "stock": 50, "unit": "pcs", "barcode": "8901234567901", "low_stock_threshold": 15,
    },
]

CUSTOMERS: list[dict[str, object]] = [
    {
        "id": "C001", "name": "Murugan Stores", "mobile": "9876543210", "type": "wholesale",
        "email": "murugan.stores@email.com", "address": "123, Anna Nagar, Chennai - 600040",
        "gstin": "33AABCU9603R1ZM", "credit_limit": 50000, "outstanding_balance": 12500,
        "total_purchases": 245000, "last_purchase_date": "2026-01-08",
    },
    {
        "id": "C002", "name": "Lakshmi Traders", "mobile": "9876543211", "type": "wholesale",
        "email": "lakshmi.traders@email.com", "address": "45, T Nagar, Chennai - 600017",
        "gstin": "33AABCU9603R1ZN", "credit_limit": 75000, "outstanding_balance": 8000,
        "total_purchases": 380000, "last_purchase_date": "2026-01-09",
    },
    {
        "id": "C003", "name": "Selvam (Walk-in)", "mobile": "9876543212", "type": "retail",
        "credit_limit": 0, "outstanding_balance": 0, "total_purchases": 5600,
        "last_purchase_date": "2026-01-10",
    },
    {
        "id": "C004", "name": "Anbu Supermarket", "mobile": "9876543213", "type": "credit",
        "email": "anbu.super@email.com", "address": "78, Velachery Main Road, Chennai - 600042",
        "gstin": "33AABCU9603R1ZP", "credit_limit": 100000, "outstanding_balance": 45000,
        "total_purchases": 890000, "last_purchase_date": "2026-01-10",
    },
    {
        "id": "C005", "name": "Karthik Provisions", "mobile": "9876543214", "type": "credit",
        "address": "12, Adyar, Chennai - 600020", "credit_limit": 25000,
        "outstanding_balance": 3500, "total_purchases": 125000, "last_purchase_date": "2026-01-07",
    },
]

# Stored amounts are as entered at the counter, rounded to paise.
BILLS: list[dict[str, object]] = [
    {
        "id": "B001", "bill_number": "INV-2026-0001", "date": "2026-01-10",
        "customer_id": "C003", "customer_name": "Selvam (Walk-in)",
        "items": [
            ("P001", "Basmati Rice (1kg)", 2, 120, 5, 0, 252),
            ("P003", "Sunflower Oil (1L)", 1, 135, 5, 0, 141.75),
        ],
        "subtotal": 375, "cgst": 9.38, "sgst": 9.38, "discount": 0, "round_off": 0.24,
        "total": 394, "payment_mode": "Cash", "status": "paid", "paid_amount": 394,
    },
    {
        "id": "B002", "bill_number": "INV-2026-0002", "date": "2026-01-10",
        "customer_id": "C001", "customer_name": "Murugan Stores",
        "items": [
            ("P005", "Aashirvaad Atta (5kg)", 10, 280, 5, 100, 2840),
            ("P002", "Toor Dal (1kg)", 20, 145, 5, 50, 2997.5),
        ],
        "subtotal": 5650, "cgst": 141.25, "sgst": 141.25, "discount": 150, "round_off": 0.50,
        "total": 5783, "payment_mode": "UPI", "status": "paid", "paid_amount": 5783,
    },
    {
        "id": "B003", "bill_number": "INV-2026-0003", "date": "2026-01-09",
        "customer_id": "C004", "customer_name": "Anbu Supermarket",
        "items": [
            ("P007", "Parle-G Biscuits", 100, 10, 18, 0, 1180),
            ("P008", "Colgate Toothpaste (200g)", 24, 115, 18, 60, 3199.2),
        ],
        "subtotal": 3700, "cgst": 333, "sgst": 333, "discount": 60, "round_off": -0.20,
        "total": 4306, "payment_mode": "Credit", "status": "pending", "paid_amount": 0,
    },
]

EXPENSES: list[tuple[str, str, str, str, float, str]] = [
    ("E001", "2026-01-10", "Electricity", "EB Bill - January", 4500, "Bank Transfer"),
    ("E002", "2026-01-09", "Transport", "Stock delivery charges", 800, "Cash"),
    ("E003", "2026-01-08", "Staff Salary", "Advance to Ravi", 5000, "Cash"),
    ("E004", "2026-01-07", "Maintenance", "AC repair", 2500, "UPI"),
    ("E005", "2026-01-05", "Rent", "Shop rent - January", 25000, "Bank Transfer"),
]

SUPPLIERS: list[dict[str, object]] = [
    {
        "id": "SUP001", "name": "Lakshmi Wholesalers", "contact": "Senthil Kumar", "mobile": "9876543100",
        "email": "lakshmi.wholesale@email.com", "address": "234, Sowcarpet, Chennai - 600003",
        "gstin": "33AABCL1234R1ZX", "total_purchases": 450000, "balance": 25000,
    },
    {
        "id": "SUP002", "name": "Murugan Agencies", "contact": "Murugan P", "mobile": "9876543101",
        "email": "murugan.agencies@email.com", "address": "89, Koyambedu, Chennai - 600107",
        "gstin": "33AABCM5678R1ZY", "total_purchases": 320000, "balance": 15000,
    },
    {
        "id": "SUP003", "name": "Chennai Dairy Products", "contact": "Ramesh S", "mobile": "9876543102",
        "email": "chennaidairy@email.com", "address": "45, Ambattur, Chennai - 600053",
        "gstin": "33AABCC9012R1ZZ", "total_purchases": 180000, "balance": 0,
    },
]

# Purchase items are (name, quantity, rate, gst_percent, total).
PURCHASES: list[dict[str, object]] = [
    {
        "id": "PUR001", "date": "2026-01-10", "invoice_no": "LW-2026-0145",
        "supplier_id": "SUP001", "supplier_name": "Lakshmi Wholesalers",
        "items": [
            ("Basmati Rice (25kg)", 10, 2500, 5, 26250),
            ("Toor Dal (25kg)", 5, 3200, 5, 16800),
        ],
        "subtotal": 54000, "gst": 2700, "total": 56700, "paid": 30000, "balance": 26700, "status": "partial",
    },
    {
        "id": "PUR002", "date": "2026-01-08", "invoice_no": "MA-2026-0089",
        "supplier_id": "SUP002", "supplier_name": "Murugan Agencies",
        "items": [
            ("Sunflower Oil (15L)", 20, 1800, 5, 37800),
        ],
        "subtotal": 36000, "gst": 1800, "total": 37800, "paid": 37800, "balance": 0, "status": "paid",
    },
    {
        "id": "PUR003", "date": "2026-01-05", "invoice_no": "CDP-2026-0234",
        "supplier_id": "SUP003", "supplier_name": "Chennai Dairy Products",
        "items": [
            ("Amul Butter (500g) x 24", 5, 6600, 12, 36960),
            ("Curd (500ml) x 48", 3, 1440, 5, 4536),
        ],
        "subtotal": 37500, "gst": 3996, "total": 41496, "paid": 41496, "balance": 0, "status": "paid",
    },
]

STAFF: list[dict[str, object]] = [
    {"id": "S001", "name": "Rajesh Kumar", "mobile": "9876543220", "role": "owner",
     "email": "rajesh@business.com", "is_active": True, "sales_count": 0, "total_sales": 0},
    {"id": "S002", "name": "Priya Devi", "mobile": "9876543221", "role": "manager",
     "email": "priya@business.com", "is_active": True, "sales_count": 145, "total_sales": 125000},
    {"id": "S003", "name": "Ravi Shankar", "mobile": "9876543222", "role": "cashier",
     "email": "ravi@business.com", "is_active": True, "sales_count": 320, "total_sales": 85000},
    {"id": "S004", "name": "Meena Kumari", "mobile": "9876543223", "role": "cashier",
     "email": "meena@business.com", "is_active": True, "sales_count": 280, "total_sales": 72000},
    {"id": "S005", "name": "Arun Prasad", "mobile": "9876543224", "role": "accountant",
     "email": "arun@business.com", "is_active": False, "sales_count": 0, "total_sales": 0},
]

BUSINESS_PROFILE: dict[str, str] = {
    "business_name": "Sri Lakshmi Stores",
    "owner_name": "Rajesh Kumar",
    "mobile": "9876543210",
    "email": "srilakshmistores@gmail.com",
    "category": "retail",
    "gstin": "33AABCU9603R1ZM",
    "address": "45, Gandhi Road, T Nagar",
    "state": "Tamil Nadu",
    "district": "Chennai",
    "pincode": "600017",
    "invoice_footer": "Thank you for shopping with us! | நன்றி!",
    "financial_year": "2025-26",
}
