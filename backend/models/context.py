from pydantic import BaseModel


class WikiContext(BaseModel):
    extract: str | None = None
    url: str | None = None


class NewsItem(BaseModel):
    title: str = "Untitled"
    link: str = "#"
    pub_date: str = ""
    source: str = "Google News"


class ExchangeRates(BaseModel):
    base: str
    rates: dict[str, float] = {}
    last_update: str = ""
