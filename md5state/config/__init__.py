from .arguments import USAGE, UsageError, parse_command_line
from .loader import load_config
from .models import DispositionConfig, Md5StateConfig, PolicyConfig
from .settings import Settings

__all__ = [
    "USAGE",
    "DispositionConfig",
    "Md5StateConfig",
    "PolicyConfig",
    "Settings",
    "UsageError",
    "load_config",
    "parse_command_line",
]
