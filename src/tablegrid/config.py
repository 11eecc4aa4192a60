"""Environment-driven defaults for console rendering.

Values come from the process environment, optionally seeded from a ``.env``
file at the project root by load_env_file():

  TABLEGRID_EMPTY_INDICATOR    -- text shown for empty cells (default "-")
  TABLEGRID_CAPTION_PLACEMENT  -- "top" or "bottom" (default "top")
  TABLEGRID_CAPTION_FORMAT     -- caption template containing "{caption}"

Options passed explicitly to as_console_str() always win over these.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from tablegrid.patterns import CAPTION_PLACEHOLDER, CAPTION_PLACEMENTS, DEFAULT_EMPTY_INDICATOR
from tablegrid.schema import RenderOptions

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()

ENV_EMPTY_INDICATOR = "TABLEGRID_EMPTY_INDICATOR"
ENV_CAPTION_PLACEMENT = "TABLEGRID_CAPTION_PLACEMENT"
ENV_CAPTION_FORMAT = "TABLEGRID_CAPTION_FORMAT"


def load_env_file(path: Path | None = None) -> bool:
    """Seed the environment from a ``.env`` file (``ROOT / ".env"`` by default).

    Importing the package never reads files; scripts call this explicitly.
    Variables already set in the environment are left alone.
    """
    path = path or ROOT / ".env"
    loaded = load_dotenv(path)
    logger.debug("Loaded %s: %s", path, loaded)
    return loaded


def default_render_options() -> RenderOptions:
    """Build RenderOptions from the environment (read on every call)."""
    placement = os.getenv(ENV_CAPTION_PLACEMENT, CAPTION_PLACEMENTS[0]).strip().lower()
    if placement not in CAPTION_PLACEMENTS:
        logger.warning(
            "Ignoring %s=%r (expected one of %s); using %r",
            ENV_CAPTION_PLACEMENT,
            placement,
            ", ".join(CAPTION_PLACEMENTS),
            CAPTION_PLACEMENTS[0],
        )
        placement = CAPTION_PLACEMENTS[0]

    return RenderOptions(
        empty_indicator=os.getenv(ENV_EMPTY_INDICATOR, DEFAULT_EMPTY_INDICATOR),
        caption_placement=placement,
        caption_format=os.getenv(ENV_CAPTION_FORMAT, CAPTION_PLACEHOLDER),
    )
