from sqlalchemy import BigInteger, Integer, Numeric
from sqlalchemy.orm import declarative_base

Base = declarative_base()


# ============================================================================
# SHARED COLUMN TYPES
# ============================================================================

# SQLite only auto-increments an INTEGER PRIMARY KEY
Identifier = BigInteger().with_variant(Integer(), "sqlite")

Money = Numeric(10, 2)


# ============================================================================
# COLUMN DEFAULTS
# ============================================================================

# Status columns are free-form strings; these are only the storage defaults.
ACTIVE_CUSTOMER_STATUS = "ACTIVE"
DEFAULT_CUSTOMER_STATUS = ACTIVE_CUSTOMER_STATUS
DEFAULT_ORDER_STATUS = "PENDING"
COMPLETED_ORDER_STATUS = "COMPLETED"
