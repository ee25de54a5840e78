"""
Command Line Interface for grunge

Available Commands:
- sample: Print a grid of noise values (console script `grunge-sample`)
"""

_CLI_SUBMODULES = {
    "sample": (".sample_commands", "sample"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
