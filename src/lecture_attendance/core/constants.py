"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOKEN_TTL_HOURS = 8
TOKEN_ALGORITHM = "HS256"

REQUIRED_PHOTO_COUNT = 2

DEMO_USERNAME = "Akash"
DEMO_PASSWORD = "12345"

# (name, room_no, section) in insertion order.
SEED_LECTURES = (
    ("Discrete Mathematics", "CS2005", "2FA"),
    ("Computer Organisation", "BSCS100", "2AA"),
    ("DBMS", "BCO1005", "2CA"),
    ("English", "BELH 0081", "2XX"),
    ("HTML", "PCPH0001", "2XN"),
)
