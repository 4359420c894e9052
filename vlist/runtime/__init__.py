"""Runtime configuration and logging pipeline."""

from vlist.runtime.debug_config import DebugConfig, load_debug_config

__all__ = ["DebugConfig", "load_debug_config"]
