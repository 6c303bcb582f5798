from importlib import import_module, util

__all__ = ["available_backends", "load_adapter", "export"]

# name -> (import name, submodule, export function)
_BACKENDS = {
    "networkx": ("networkx", ".networkx", "to_nx"),
    "polars": ("polars", ".dataframe_adapter", "to_dataframes"),
    "scipy": ("scipy", ".sparse", "adjacency_matrix"),
}


def _is_installed(modname: str) -> bool:
    return util.find_spec(modname) is not None


def available_backends() -> dict:
    return {name: _is_installed(mod) for name, (mod, _, _) in _BACKENDS.items()}


def load_adapter(name: str):
    """Return the export function of backend ``name``."""
    if name not in _BACKENDS:
        raise ValueError(f"Unknown adapter '{name}'")
    modname, submod, fn = _BACKENDS[name]
    if not _is_installed(modname):
        raise ModuleNotFoundError(
            f"Optional backend '{name}' is not installed. "
            f"Install with `pip install pathgraph[{name}]`."
        )
    mod = import_module(__name__ + submod)
    return getattr(mod, fn)


def export(graph, name: str, **kwargs):
    """Convert ``graph`` with the export function of backend ``name``."""
    return load_adapter(name)(graph, **kwargs)
