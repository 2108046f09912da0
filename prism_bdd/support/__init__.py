"""Scenario support: the world object and per-feature session state."""

from prism_bdd.support.session import FeatureSession, feature_session
from prism_bdd.support.world import WORLD_KEY, Attachment, World

__all__ = [
    "WORLD_KEY",
    "Attachment",
    "FeatureSession",
    "World",
    "feature_session",
]
