"""Base services container for dependency injection."""

from config import Config
from storage.flat_file import AccountStore


class Services:
    """Container for all application services.

    Args:
        config: Application configuration object.
        store: Optional account store for testing. If provided, the store
            settings in config are ignored.
    """

    def __init__(self, config: Config, store=None):
        self.config = config
        self.store = store or AccountStore.from_config(config)

        # Lazy import to avoid circular dependencies
        from services.accounts import AccountService

        self.accounts = AccountService(self.store)
