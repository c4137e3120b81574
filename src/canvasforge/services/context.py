"""ServiceContext — one-time bootstrap for an embedding service.

Created once at startup. Configures logging from the settings, enables
telemetry when verbose, and hands out services that share those settings.
Services are created lazily so a caller that only needs one engine never
builds the other.
"""

from __future__ import annotations

from canvasforge.config.logging import configure_logging
from canvasforge.config.settings import CanvasforgeSettings
from canvasforge.services.layout import LayoutService
from canvasforge.services.telemetry import enable_telemetry
from canvasforge.services.variation import VariationService


class ServiceContext:
    """Shared settings plus lazily built services."""

    def __init__(self, settings: CanvasforgeSettings | None = None) -> None:
        self.settings = settings or CanvasforgeSettings.load()
        self._layout: LayoutService | None = None
        self._variation: VariationService | None = None

        configure_logging(self.settings)

        # Telemetry is a ContextVar flag, so it covers the bootstrapping context only.
        if self.settings.verbose:
            enable_telemetry()

    @property
    def layout(self) -> LayoutService:
        if self._layout is None:
            self._layout = LayoutService(self.settings)
        return self._layout

    @property
    def variation(self) -> VariationService:
        if self._variation is None:
            self._variation = VariationService(self.settings)
        return self._variation
