class BaseContext(dict):
    """A dict with attribute-style access.

    Used as the generic object type when JSON is decoded with ``as_map=False``,
    so ``data.server.port`` and ``data["server"]["port"]`` are interchangeable.
    """

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        try:
            del self[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __dir__(self):
        return list(super().__dir__()) + [k for k in self if isinstance(k, str)]

    def to_dict(self) -> dict:
        """Plain ``dict`` copy, converting nested contexts as well."""

        def _convert(value):
            if isinstance(value, dict):
                return {k: _convert(v) for k, v in value.items()}
            if isinstance(value, list):
                return [_convert(v) for v in value]
            return value

        return _convert(self)

    def __getstate__(self):
        return dict(self)

    def __setstate__(self, state):
        self.update(state)

    def __reduce__(self):
        return self.__class__, (), self.__getstate__()
