"""
WallowContext

This module defines the WallowContext dataclass, the object click passes to every subcommand via
ctx.obj. It carries the loaded configuration explicitly, so nothing below the command line layer
reads process-wide state to find its settings. Global output options are applied once by
cli_utils.console.configure and are not repeated here.
"""

from dataclasses import dataclass, field

from wallow.config import WallowConfig


@dataclass
class WallowContext:
    """Application data shared by subcommands for a single invocation."""

    config: WallowConfig = field(default_factory=WallowConfig)
