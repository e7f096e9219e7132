"""Request checks shared by the IPO endpoints."""
import re
from fastapi import HTTPException

from app.config import get_settings

# NSE/BSE listing codes such as SWIGGY, M&M, BAJAJ-AUTO
SYMBOL_PATTERN = re.compile(r'^[A-Z0-9&.\-]{1,20}$')


def validate_symbol(symbol: str) -> str:
    """Return the exchange symbol from the URL upper-cased and stripped.

    Indian exchange codes run up to 20 characters and may carry '&', '.' or
    '-'. Anything else, including a blank symbol, is a 400.
    """
    symbol = (symbol or "").strip().upper()
    if not symbol:
        raise HTTPException(status_code=400, detail="Symbol is required")

    if not SYMBOL_PATTERN.match(symbol):
        raise HTTPException(
            status_code=400,
            detail=f"'{symbol}' is not an NSE/BSE symbol (1-20 of A-Z, 0-9, '&', '.', '-')",
        )

    return symbol


def validate_batch_size(size: int) -> None:
    limit = get_settings().max_batch_size
    if size > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Batch of {size} records exceeds the limit of {limit}",
        )
