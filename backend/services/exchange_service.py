"""Latest USD exchange rates from open.er-api.com."""

from models.context import ExchangeRates
from utils.http_client import get_json

_RATES_URL = "https://open.er-api.com/v6/latest/USD"


async def fetch_exchange_rates() -> ExchangeRates:
    data = await get_json("Exchange Rates", _RATES_URL)
    return ExchangeRates(
        base=data.get("base_code", "USD"),
        rates=data.get("rates") or {},
        last_update=data.get("time_last_update_utc", ""),
    )
