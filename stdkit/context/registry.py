from .base_context import BaseContext


class Registry(BaseContext):
    def register(self, name: str = ""):
        def decorator(fn):
            self[name or fn.__name__] = fn
            return fn

        return decorator
