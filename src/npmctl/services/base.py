"""BaseService — shared plumbing for npmctl services.

Every service receives the frozen :class:`NpmctlSettings` and either a
plugin manager or a loader for one. A loader is called on the first hook
dispatch, so operations that fire no hook never import plugin code.
Services convert domain errors into failed :class:`ServiceResult` values
and dispatch plugin hooks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from npmctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from npmctl.config.settings import NpmctlSettings
    from npmctl.domain.errors import NpmctlError
    from npmctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ProjectService(BaseService):
            def install(self) -> ServiceResult:
                try:
                    ...
                except NpmctlError as exc:
                    return self._failure("install", exc)
    """

    def __init__(
        self,
        settings: NpmctlSettings,
        plugins: PluginManager | None = None,
        *,
        plugin_loader: Callable[[], PluginManager | None] | None = None,
    ) -> None:
        self._settings = settings
        self._plugins = plugins
        self._plugin_loader = plugin_loader

    def _plugin_manager(self) -> PluginManager | None:
        if self._plugins is None and self._plugin_loader is not None:
            loader, self._plugin_loader = self._plugin_loader, None
            self._plugins = loader()
        return self._plugins

    @staticmethod
    def _failure(op: str, exc: NpmctlError) -> ServiceResult:
        """Wrap a domain error as a failed result."""
        logger.debug("%s failed: %s", op, exc.message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
        )

    def _dispatch_hook(
        self,
        hook_name: str,
        payload: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Call a plugin hook. No-op without a plugin manager.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        plugins = self._plugin_manager()
        if plugins is None:
            return
        try:
            getattr(plugins.hook, hook_name)(**payload)
        except Exception:
            logger.debug("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
