"""Page objects for the Prism dashboard."""

from prism_bdd.pages.base_page import BasePage, get_selectors, load_selectors
from prism_bdd.pages.common_page import CommonPage
from prism_bdd.pages.dashboard_page import DashboardPage, is_authenticated_url
from prism_bdd.pages.login_page import LoginPage
from prism_bdd.pages.model_page import ModelPage
from prism_bdd.pages.reports_page import ReportsPage
from prism_bdd.pages.uploads_page import UploadsPage

__all__ = [
    "BasePage",
    "CommonPage",
    "DashboardPage",
    "LoginPage",
    "ModelPage",
    "ReportsPage",
    "UploadsPage",
    "get_selectors",
    "is_authenticated_url",
    "load_selectors",
]
