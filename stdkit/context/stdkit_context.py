from .base_context import BaseContext
from .registry import Registry
from .singleton import singleton
from ..schema import StdkitConfig


@singleton
class StdkitContext(BaseContext):
    """Process-wide holder of the active configuration and the CLI action registry."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.config: StdkitConfig = StdkitConfig()
        self.action_registry: Registry = Registry()

    def register_action(self, name: str = ""):
        return self.action_registry.register(name=name)

    def get_action(self, name: str):
        if name not in self.action_registry:
            raise KeyError(f"unknown action={name}, choose from {sorted(self.action_registry)}")
        return self.action_registry[name]


C = StdkitContext()
