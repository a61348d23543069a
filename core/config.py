"""
Board configuration: parse policy, extension policy and display options.
"""
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple

from render.palette import DEFAULT_PALETTE, PaletteEntry


class ParseMode(Enum):
    """What to do when the level stream fails mid-read."""
    LENIENT = "lenient"   # log the failure and keep the flows read so far
    STRICT = "strict"     # raise BoardReadError


class ExtendPolicy(Enum):
    """Which part of the spliced path an extension must keep adjacent."""
    CLOSED = "closed"       # start ... new point ... end, end to end
    FRONTIER = "frontier"   # start ... new point; closing join is left to solved()


@dataclass(frozen=True)
class BoardConfig:
    parse_mode: ParseMode = ParseMode.LENIENT
    extend_policy: ExtendPolicy = ExtendPolicy.CLOSED
    use_color: bool = True
    palette: Tuple[PaletteEntry, ...] = field(default=DEFAULT_PALETTE)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BoardConfig":
        """
        Build a config from environment variables.

        FLOWBOARD_PARSE_MODE: "strict" or "lenient"
        FLOWBOARD_EXTEND_POLICY: "closed" or "frontier"
        NO_COLOR: any non-empty value disables ANSI colors
        """
        env = os.environ if environ is None else environ
        parse_mode = ParseMode(env.get("FLOWBOARD_PARSE_MODE", ParseMode.LENIENT.value).strip().lower())
        extend_policy = ExtendPolicy(env.get("FLOWBOARD_EXTEND_POLICY", ExtendPolicy.CLOSED.value).strip().lower())
        return cls(
            parse_mode=parse_mode,
            extend_policy=extend_policy,
            use_color=not env.get("NO_COLOR"),
        )


DEFAULT_CONFIG = BoardConfig()
