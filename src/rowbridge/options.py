from dataclasses import dataclass, fields, replace
from typing import Any

from libb import ConfigOptions, load_options

__all__ = [
    'BridgeOptions',
    'DEFAULT_MAX_LOB_LENGTH',
    'get_options',
]

# Cap BLOB/CLOB materialization at 16 MiB until external storage exists.
DEFAULT_MAX_LOB_LENGTH = 16 * 1024 * 1024


@dataclass
class BridgeOptions(ConfigOptions):
    """Options

    Large object ceilings, applied independently per kind:
    - max_blob_length: Maximum BLOB length in bytes (default: 16 MiB)
    - max_clob_length: Maximum CLOB length in characters (default: 16 MiB)
    """
    max_blob_length: int = DEFAULT_MAX_LOB_LENGTH
    max_clob_length: int = DEFAULT_MAX_LOB_LENGTH

    def __post_init__(self):
        for name in ('max_blob_length', 'max_clob_length'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f'{name} must be a positive integer, got {value!r}')


def get_options(options: BridgeOptions | dict[str, Any] | str | None = None,
                config: Any | None = None, **kw: Any) -> BridgeOptions:
    """Resolve bridge options.

    Args:
        options: Can be:
                - None for the defaults
                - BridgeOptions object
                - String path to configuration
                - Dictionary of options
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options

    Returns
        BridgeOptions object
    """
    if options is None and config is None:
        return BridgeOptions(**kw)
    if isinstance(options, BridgeOptions):
        overrides = {f.name: kw[f.name] for f in fields(options) if f.name in kw}
        return replace(options, **overrides) if overrides else options
    options_func = load_options(cls=BridgeOptions)(lambda o, c: o)
    return options_func(options, config, **kw)
