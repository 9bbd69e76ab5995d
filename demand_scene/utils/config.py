from dataclasses import asdict, dataclass, replace
from typing import Any

import yaml
from loguru import logger


def _to_dict(self) -> dict[str, Any]:
    """Convert dataclass instance to dictionary.

    Tuples are emitted as lists so the result dumps as plain YAML.
    """
    return {key: list(value) if isinstance(value, tuple) else value for key, value in asdict(self).items()}


def _replace(self, **changes: Any):
    """Return a copy with the given fields changed."""
    return replace(self, **changes)


def _print(self) -> None:
    """Print configuration as YAML."""
    yaml_str = yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
    logger.info(f"Configuration:\n{yaml_str}")


_CONFIG_METHODS = {
    "to_dict": _to_dict,
    "replace": _replace,
    "print": _print,
}


def configclass(_cls=None, **dataclass_kwargs):
    """Decorator to create a dataclass with configuration helpers.

    This decorator:
    1. Wraps the class with @dataclass
    2. Adds utility methods: to_dict(), replace(), print()

    Usage:
        @configclass(frozen=True)
        class MyConfig:
            value: int = 0

        config = MyConfig().replace(value=1)
        config.print()

    You can override any method by defining it in your class.

    Args:
        _cls: The class to decorate (automatically passed when used without parentheses)
        **dataclass_kwargs: Additional arguments to pass to @dataclass decorator

    Returns:
        The decorated class with dataclass fields and config methods
    """

    def wrap(cls):
        dataclass_cls = dataclass(**dataclass_kwargs)(cls)

        # Add configuration methods only if they don't already exist
        for method_name, method_func in _CONFIG_METHODS.items():
            if not hasattr(dataclass_cls, method_name):
                setattr(dataclass_cls, method_name, method_func)
            else:
                logger.debug(f"Method {method_name} already defined in {dataclass_cls.__name__}, skipping addition.")

        return dataclass_cls

    # Support both @configclass and @configclass()
    if _cls is None:
        return wrap
    else:
        return wrap(_cls)
