"""Page objects for the back-offices, the Inghams site and the Explore site."""

from .base import BasePage
from .cms import ContentTreePage, EcmsMainPage, PcmsMainPage
from .explore import ExploreHomePage, FooterPage, LinkPage, TripSearchModal
from .geography import CountryPage, GeographyPage, RegionPage
from .home import HomePage
from .resort import ResortPage
from .search_results import SearchResultPage
from .shared_steps import SharedSteps
from .sign_in import EcmsSignInPage, PcmsSignInPage, UmbracoSignInPage

__all__ = [
    "BasePage",
    "ContentTreePage",
    "CountryPage",
    "EcmsMainPage",
    "EcmsSignInPage",
    "ExploreHomePage",
    "FooterPage",
    "GeographyPage",
    "HomePage",
    "LinkPage",
    "PcmsMainPage",
    "PcmsSignInPage",
    "RegionPage",
    "ResortPage",
    "SearchResultPage",
    "SharedSteps",
    "TripSearchModal",
    "UmbracoSignInPage",
]
