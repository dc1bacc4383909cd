import os

# Prefix used when rendering monetary figures, e.g. "£584.59".
CURRENCY_SYMBOL = os.environ.get("MORTGAGE_CURRENCY_SYMBOL", "£")

LOG_LEVEL = os.environ.get("MORTGAGE_LOG_LEVEL", "INFO").upper()

# Largest accepted inputs. Keeps every figure within Decimal precision at
# cent resolution.
MAX_AMOUNT = 1_000_000_000_000
MAX_TERM_YEARS = 100
MAX_RATE_PERCENT = 100
