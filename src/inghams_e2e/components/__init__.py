"""ECMS block editors and the front-end checks for what they publish."""

from .accordion import AccordionComponent
from .cta_button import CTAButtonComponent
from .ctb import CTBComponent
from .good_to_know import GoodToKnowComponent
from .grey_box import GreyBoxComponent
from .headline import HeadlineComponent
from .image_carousel import ImageCarouselComponent
from .pagination import PaginationHelper, compare_page_content
from .pills import PillsComponent
from .rich_text_editor import RTEComponent
from .search import SearchComponent

__all__ = [
    "AccordionComponent",
    "CTAButtonComponent",
    "CTBComponent",
    "GoodToKnowComponent",
    "GreyBoxComponent",
    "HeadlineComponent",
    "ImageCarouselComponent",
    "PaginationHelper",
    "PillsComponent",
    "RTEComponent",
    "SearchComponent",
    "compare_page_content",
]
