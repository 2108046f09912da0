"""Logging, test data, auth state and date helpers."""

from prism_bdd.utils.auth_helper import AuthHelper, auth_helper
from prism_bdd.utils.data_helper import DataHelper, data_helper
from prism_bdd.utils.logger import ScenarioLogger, setup_logging
from prism_bdd.utils.quarters import (
    calculate_expected_months,
    get_current_quarter_text,
    quarter_month_labels,
)

__all__ = [
    "AuthHelper",
    "DataHelper",
    "ScenarioLogger",
    "auth_helper",
    "calculate_expected_months",
    "data_helper",
    "get_current_quarter_text",
    "quarter_month_labels",
    "setup_logging",
]
