"""
Observer registry for Knock Out!.
Observer classes register themselves with @register_observer("name"); the CLI looks them up
in OBSERVER_MAP. Every module in this package except base is imported below so the
decorators run on package import.
"""

import importlib
import pkgutil

OBSERVER_MAP = {}


def register_observer(name):
    """
    Class decorator storing the observer class in OBSERVER_MAP under name.
    """
    def decorator(cls):
        if name in OBSERVER_MAP and OBSERVER_MAP[name] is not cls:
            raise ValueError(f"observer name already registered: {name}")
        OBSERVER_MAP[name] = cls
        return cls
    return decorator


for _info in pkgutil.iter_modules(__path__):
    if not _info.ispkg and _info.name != "base":
        importlib.import_module(f"{__name__}.{_info.name}")
