"""
RentEase constants - v1.0
✅ Storage keys (one JSON document per key)
✅ Room numbering / capacity rules
✅ Default rate table and electricity rate
✅ Built-in demo accounts
"""


class STORAGE:
    """Local storage keys"""

    PREFIX = "rentease"
    ROOMS = "rentease_rooms"
    TENANTS = "rentease_tenants"
    PAYMENTS = "rentease_payments"
    HISTORY = "rentease_history"
    SETTINGS = "rentease_settings"
    USER = "rentease_user"

    ALL_KEYS = [ROOMS, TENANTS, PAYMENTS, HISTORY, SETTINGS, USER]


class ROOMS:
    """Room rules"""

    NUMBER_OFFSET = 100  # room_number = NUMBER_OFFSET + n
    MIN_COUNT = 1
    MAX_COUNT = 500
    TYPES = ["single", "double", "triple"]
    CAPACITY = {"single": 1, "double": 2, "triple": 3}
    BED_LABELS = {"single": "Single Bed", "double": "Double Bed", "triple": "Triple Bed"}


class BILLING:
    """Billing defaults"""

    TOTAL_ROOMS = 20
    ELECTRICITY_RATE = 8
    RENT_RATES = {
        "single_non_ac": 3000,
        "single_ac": 4000,
        "double_non_ac": 6000,
        "double_ac": 10000,
        "triple_non_ac": 9000,
        "triple_ac": 14000,
    }
    TOKEN_MONEY = 3000
    CURRENCY_SYMBOL = "₹"
    MONTHS = [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ]
    STATUSES = ["paid", "pending"]


class DOCUMENTS:
    """Document placeholders (files are never stored)"""

    TYPES = ["address_proof", "id_proof"]
    DEFAULT_NAMES = {"address_proof": "Address Proof", "id_proof": "ID Proof"}
    PLACEHOLDER_URL = "#"


class MESSAGING:
    """Outbound reminder hand-off"""

    WHATSAPP_BASE_URL = "https://wa.me/"
    COUNTRY_CODE = "91"
    LOCAL_NUMBER_LENGTH = 10


class AUTH:
    """Built-in accounts (checked before stored tenant records)"""

    BUILTIN_USERS = [
        {
            "id": "1",
            "email": "admin@rentease.com",
            "password": "admin123",
            "name": "Admin User",
            "role": "admin",
        },
        {
            "id": "2",
            "email": "tenant@rentease.com",
            "password": "tenant123",
            "name": "Rahul Sharma",
            "role": "tenant",
            "room_number": 101,
        },
        {
            "id": "3",
            "email": "priya@gmail.com",
            "password": "tenant123",
            "name": "Priya Patel",
            "role": "tenant",
            "room_number": 102,
        },
    ]
    ROLES = ["admin", "tenant"]
    HOME_PATHS = {"admin": "/admin", "tenant": "/tenant"}
    LOGIN_PATH = "/login"
