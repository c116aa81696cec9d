"""Client-level configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from . import __version__
from .encoding import DEFAULT_ID_LAYOUT, IdLayout

__all__ = ["DEFAULT_BASE_URL", "ClientConfig"]

DEFAULT_BASE_URL = "http://phrasefinder.io/search"


@dataclass(frozen=True)
class ClientConfig:
    """Transport and wire settings shared by every search made with it."""

    base_url: str = DEFAULT_BASE_URL

    # None leaves the transport's own behaviour in place (no intrinsic timeout)
    timeout: Optional[Union[float, Tuple[float, float]]] = None

    user_agent: str = f"phrasefinder-python/{__version__}"

    # Layout used to read the corpus back out of phrase ids
    id_layout: IdLayout = DEFAULT_ID_LAYOUT
