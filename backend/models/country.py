from pydantic import BaseModel, ConfigDict


class CountrySummary(BaseModel):
    """One record of the bulk country listing."""

    model_config = ConfigDict(frozen=True)

    common_name: str = ""
    official_name: str = ""
    capitals: tuple[str, ...] = ()
    region: str = ""
    alpha2_code: str = ""
    alpha3_code: str = ""
    population: int | None = None
    flag_png: str = ""
    flag_svg: str = ""

    @property
    def capital_city(self) -> str | None:
        return self.capitals[0] if self.capitals else None

    @property
    def flag_image_url(self) -> str:
        return self.flag_png or self.flag_svg or ""

    @classmethod
    def summary_fields(cls, raw: dict) -> dict:
        """Map the upstream JSON shape onto summary field names."""
        name = raw.get("name") or {}
        flags = raw.get("flags") or {}
        return {
            "common_name": name.get("common") or "",
            "official_name": name.get("official") or "",
            "capitals": tuple(raw.get("capital") or ()),
            "region": raw.get("region") or "",
            "alpha2_code": raw.get("cca2") or "",
            "alpha3_code": raw.get("cca3") or "",
            "population": raw.get("population"),
            "flag_png": flags.get("png") or "",
            "flag_svg": flags.get("svg") or "",
        }

    @classmethod
    def from_api(cls, raw: dict) -> "CountrySummary":
        return cls(**cls.summary_fields(raw))


class Currency(BaseModel):
    name: str
    symbol: str = ""


class Demonym(BaseModel):
    masculine: str = ""
    feminine: str = ""


class CallingCode(BaseModel):
    root: str
    suffixes: list[str] = []


class CountryDetail(CountrySummary):
    """Summary fields plus everything the per-country endpoint returns."""

    independent: bool | None = None
    languages: list[str] = []
    subregion: str = ""
    currencies: list[Currency] = []
    timezones: list[str] = []
    area: float | None = None
    demonym: Demonym | None = None
    calling_code: CallingCode | None = None
    translations: dict[str, str] = {}
    alt_spellings: list[str] = []
    borders: list[str] = []
    map_url: str = ""

    @classmethod
    def from_api(cls, raw: dict) -> "CountryDetail":
        currencies = [
            Currency(name=c.get("name") or "", symbol=c.get("symbol") or "")
            for c in (raw.get("currencies") or {}).values()
        ]

        demonym = None
        eng = (raw.get("demonyms") or {}).get("eng")
        if eng:
            demonym = Demonym(masculine=eng.get("m") or "", feminine=eng.get("f") or "")

        calling_code = None
        idd = raw.get("idd") or {}
        if idd.get("root"):
            calling_code = CallingCode(root=idd["root"], suffixes=idd.get("suffixes") or [])

        translations = {
            locale: t.get("common") or ""
            for locale, t in (raw.get("translations") or {}).items()
        }

        return cls(
            **cls.summary_fields(raw),
            independent=raw.get("independent"),
            languages=list((raw.get("languages") or {}).values()),
            subregion=raw.get("subregion") or "",
            currencies=currencies,
            timezones=raw.get("timezones") or [],
            area=raw.get("area"),
            demonym=demonym,
            calling_code=calling_code,
            translations=translations,
            alt_spellings=raw.get("altSpellings") or [],
            borders=raw.get("borders") or [],
            map_url=(raw.get("maps") or {}).get("googleMaps") or "",
        )
