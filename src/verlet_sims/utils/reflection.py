def get_class(name: str, module, base: type | None = None):
    """Case-insensitive class lookup by name inside `module`."""
    target = name.lower()
    for key, obj in module.__dict__.items():
        if isinstance(obj, type) and key.lower() == target:
            if base is not None and not issubclass(obj, base):
                continue
            return obj
    raise ValueError(f"Class '{name}' not found in module {module.__name__}")
