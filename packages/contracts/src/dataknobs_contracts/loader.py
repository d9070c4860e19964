"""Dotted-path class loading shared by collection factories and configuration."""

import importlib


def load_class(class_path: str) -> type:
    """Import a class from a dotted path such as ``"numpy.ndarray"``.

    Args:
        class_path: Full path to class (e.g., "collections.deque")

    Returns:
        Class object

    Raises:
        ImportError: If the path is malformed, the module cannot be imported,
            or the module has no class of that name
    """
    if not isinstance(class_path, str):
        raise ImportError(f"Class path must be a string, got {class_path!r}")
    module_path, _, class_name = class_path.rpartition(".")
    if not module_path or not class_name:
        raise ImportError(f"Invalid class path: {class_path}")

    module = importlib.import_module(module_path)
    cls = getattr(module, class_name, None)
    if not isinstance(cls, type):
        raise ImportError(f"Class {class_name} not found in {module_path}")
    return cls
