"""Per-feature session state: current feature file and the login cache flag."""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class FeatureSession:
    """Track feature boundaries and whether the user is already logged in.

    The login steps consult ``is_logged_in`` so the login flow runs at most
    once per feature. Crossing into a new feature, logging out, or opening
    the login page resets the flag.
    """

    def __init__(self):
        self.feature_name: Optional[str] = None
        self.scenario_count = 0
        self._logged_in = False

    @property
    def is_logged_in(self) -> bool:
        return self._logged_in

    def start_feature(self, feature_name: str) -> bool:
        """Register the feature of the scenario about to run.

        Returns:
            True if this scenario starts a different feature than the previous one
        """
        if feature_name == self.feature_name:
            self.scenario_count += 1
            return False

        previous = self.feature_name
        self.feature_name = feature_name
        self.scenario_count = 1
        self._logged_in = False
        if previous is not None:
            logger.info("Feature boundary: %s -> %s", previous, feature_name)
        return True

    def mark_logged_in(self) -> None:
        self._logged_in = True

    def invalidate_login(self) -> None:
        self._logged_in = False

    def reset(self) -> None:
        self.feature_name = None
        self.scenario_count = 0
        self._logged_in = False


feature_session = FeatureSession()
