from pydantic import BaseModel


class CurrencyInfo(BaseModel):
    code: str
    name: str = ""
    symbol: str = ""


class CountryProfile(BaseModel):
    name: str
    official_name: str = ""
    capital: str = "Unknown"
    population: int = 0
    area: float = 0
    region: str = "Unknown"
    subregion: str = "Unknown"
    currencies: list[CurrencyInfo] = []
    languages: list[str] = []
    latlng: tuple[float, float] = (0.0, 0.0)
    flag: str = ""
    flag_emoji: str = ""
    gini: float | None = None
    timezones: list[str] = []
    cca2: str = ""
    cca3: str = ""

    model_config = {"frozen": True}


class CompactCountry(BaseModel):
    name: str
    cca2: str = ""
    cca3: str = ""
    flag: str = ""
