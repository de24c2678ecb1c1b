"""Core data models for the Inghams E2E suite."""

from dataclasses import dataclass, field
from enum import Enum


class Product(Enum):
    """Holiday product lines sold on the site."""

    SKI = "ski"
    WALKING = "walking"
    LAPLAND = "lapland"
    SANTA = "santa"

    @classmethod
    def parse(cls, value: "str | Product") -> "Product":
        """Accept enum members, values and display names ("Ski", "SANTA", "Santa Breaks")."""
        if isinstance(value, Product):
            return value
        key = value.strip().lower()
        if key in ("santa breaks", "santasbreaks", "santas breaks"):
            return cls.SANTA
        for product in cls:
            if key in (product.value, product.name.lower()):
                return product
        raise ValueError(f"Unknown product: {value!r}")

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def search_tab(self) -> str:
        """Name of the product tab in the public search widget."""
        # Santa breaks are sold through the Lapland tab
        return "Lapland" if self is Product.SANTA else self.display_name


class PaginationMethod(Enum):
    """How a results page exposes further results."""

    SINGLE_PAGE = "single-page"
    NONE = "none"
    TRADITIONAL = "traditional-pagination"
    LOAD_MORE = "load-more"
    INFINITE_SCROLL = "infinite-scroll"
    UNKNOWN = "unknown"


class FilterKind(Enum):
    """Input type used by a search filter."""

    RADIO = "radio-buttons"
    CHECKBOX = "checkboxes"
    RANGE = "range"


@dataclass
class SourcePathRow:
    """One row of a migration CSV."""

    source_path: str
    alias: str = ""
    country: str = ""
    region: str = ""
    resort: str = ""
    region_code: str = ""
    resort_code: str = ""

    @property
    def level(self) -> str | None:
        """Hierarchy level named by the alias: country, region or resort."""
        alias = self.alias.lower()
        for level in ("resort", "region", "country"):
            if level in alias:
                return level
        return None


@dataclass
class CountryCode:
    """Entry of a country dropdown list exported from the CMS."""

    name: str
    code: str

    @property
    def slug(self) -> str:
        return self.name.lower().replace("/", "-")


@dataclass
class ExploreSearch:
    """Row of the Explore site search data."""

    query_type: str
    destination: str | None = None
    trip_type: str | None = None
    monthyear: str | None = None


@dataclass
class BoundingBox:
    x: float
    y: float
    width: float
    height: float


@dataclass
class SearchValues:
    """Default values shown in the search widget before searching."""

    departure: str | None = None
    arrival: str | None = None
    whos_coming: str | None = None
    nights: str | None = None

    def resort_summary(self) -> list[str]:
        """Lower-cased texts the resort criteria bar is expected to show."""
        return [
            f"From {self.departure}".strip().lower(),
            f"{self.whos_coming}".strip().lower(),
            f"Any date ({self.nights})".strip().lower(),
        ]


@dataclass
class GuestCounts:
    adults: int = 0
    children: int = 0


@dataclass
class ContentComparison:
    """Result of comparing the result cards of two pages."""

    is_different: bool
    details: str
    common: list[str] = field(default_factory=list)
    unique_to_first: list[str] = field(default_factory=list)
    unique_to_second: list[str] = field(default_factory=list)


@dataclass
class PaginationReport:
    success: bool
    method: PaginationMethod
    details: str


@dataclass
class FilterOptionState:
    """Enabled state of one option inside a filter dropdown."""

    text: str
    enabled: bool


@dataclass
class FilterValidation:
    """Outcome of checking a filter's options against expectations."""

    filter_name: str
    enabled_found: list[str] = field(default_factory=list)
    disabled_found: list[str] = field(default_factory=list)
    unexpected_state: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.unexpected_state


@dataclass
class FilterApplication:
    """Page state before and after one filter option was applied."""

    filter_name: str
    option: str
    initial_url: str
    initial_count: int
    final_url: str = ""
    final_count: int = -1
    tag_visible: bool = False
    applied: bool = False

    @property
    def url_updated(self) -> bool:
        return self.applied and self.final_url != self.initial_url

    @property
    def results_changed(self) -> bool:
        return self.applied and self.final_count != self.initial_count

    @property
    def narrowed(self) -> bool:
        """A filter can only keep or shrink the result set."""
        return self.applied and 0 <= self.final_count <= self.initial_count


@dataclass
class SourcePathResult:
    """Outcome of visiting one migrated source path."""

    url: str
    status: int | None
    final_url: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
