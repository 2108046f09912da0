"""Components shared across Prism pages."""

from prism_bdd.components.header import HeaderComponent
from prism_bdd.components.sidebar import SidebarComponent

__all__ = ["HeaderComponent", "SidebarComponent"]
