"""Core DI providers (non-mockable)."""

from dishka import Scope, provide
from markdown_it import MarkdownIt

from discuss.config import AuthSettings, HookSettings, ModerationSettings, Settings
from discuss.util.di.base import ProviderBase
from discuss.util.markdown import create_markdown_renderer


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_moderation_settings(self, settings: Settings) -> ModerationSettings:
        """Provide moderation settings."""
        return settings.moderation

    @provide(scope=Scope.APP)
    def provide_hook_settings(self, settings: Settings) -> HookSettings:
        """Provide hook dispatch settings."""
        return settings.hooks

    @provide(scope=Scope.APP)
    def provide_markdown(self) -> MarkdownIt:
        """Provide the shared markdown renderer (built once per process)."""
        return create_markdown_renderer()
