"""Map view controller."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Sequence
from typing import Any

from fleetmap._transport import VesselSource
from fleetmap.config import FleetMapConfig
from fleetmap.exceptions import FleetMapError, FleetMapTransportError
from fleetmap.models.vessel import Vessel
from fleetmap.models.view import ViewModel
from fleetmap.projection import VesselListProjector
from fleetmap.reconcile.markers import MarkerReconciler
from fleetmap.reconcile.selection import SelectionTracker
from fleetmap.selection import SelectionChannel
from fleetmap.surface.base import MapSurface, MapSurfaceFactory

_logger = logging.getLogger(__name__)


class MapViewController:
    """Owns the map surface and polling lifecycle of the live-position view.

    Usage::

        async with MapViewController(config, source, SceneMapSurface) as view:
            await view.wait_for_first_fetch()
            model = view.get_view_model()

    Entering mounts the surface and starts fetching; leaving cancels any
    in-flight fetch, removes the markers and releases the surface.
    """

    def __init__(
        self,
        config: FleetMapConfig,
        source: VesselSource,
        surface_factory: MapSurfaceFactory,
        *,
        channel: SelectionChannel | None = None,
    ) -> None:
        self._config = config
        self._source = source
        self._surface_factory = surface_factory
        self._channel = channel if channel is not None else SelectionChannel(config.map_route)
        self._projector = VesselListProjector(self._channel.route)
        self._vessels: tuple[Vessel, ...] = ()
        self._surface: MapSurface | None = None
        self._reconciler = MarkerReconciler()
        self._tracker = SelectionTracker(self._reconciler)
        self._applied_selection: int | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._poll_task: asyncio.Task[None] | None = None
        self._first_fetch = asyncio.Event()

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> MapViewController:
        await self.mount()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.teardown()

    async def mount(self) -> None:
        """Create the surface at the default region and start fetching."""
        if self._surface is not None:
            raise FleetMapError("Map view is already mounted")
        surface = self._surface_factory(
            self._config.container_id,
            self._config.default_center,
            self._config.default_zoom,
        )
        surface.add_tile_layer(self._config.tile_url)
        surface.create_feature_group()
        self._surface = surface
        self._reconciler = MarkerReconciler()
        self._tracker = SelectionTracker(self._reconciler)
        self._applied_selection = None
        self._first_fetch = asyncio.Event()
        self._unsubscribe = self._channel.subscribe(self._on_selection_changed)
        self._poll_task = asyncio.create_task(self._poll_loop())
        _logger.debug("Mounted map view into %r", self._config.container_id)

    async def teardown(self) -> None:
        """Cancel fetching and release the surface. Safe to call twice."""
        task = self._poll_task
        self._poll_task = None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

        surface = self._surface
        self._surface = None
        if surface is not None:
            self._reconciler.clear(surface)
            surface.close()
            _logger.debug("Released map view %r", self._config.container_id)

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def _poll_loop(self) -> None:
        try:
            await self._poll_once()
        finally:
            self._first_fetch.set()
        interval = self._config.poll_interval
        if interval <= 0:
            return
        while True:
            await asyncio.sleep(interval)
            await self._poll_once()

    async def _poll_once(self) -> None:
        # One failing tick must not end polling.
        try:
            await self.refresh()
        except Exception:
            _logger.warning("Vessel poll failed; keeping %d vessels", len(self._vessels), exc_info=True)

    async def wait_for_first_fetch(self) -> None:
        """Wait until the mount-time fetch has finished (successfully or not)."""
        await self._first_fetch.wait()

    async def refresh(self) -> bool:
        """Fetch one snapshot and reconcile it.

        Returns ``False`` when the fetch failed or the view was torn down in
        the meantime; the previous snapshot then stays in place.
        """
        surface = self._require_surface()
        try:
            vessels = await asyncio.wait_for(
                self._source.fetch_vessels(),
                timeout=self._config.request_timeout,
            )
        except TimeoutError:
            _logger.warning(
                "Vessel fetch timed out after %ss; keeping %d vessels",
                self._config.request_timeout,
                len(self._vessels),
            )
            return False
        except FleetMapTransportError as exc:
            _logger.warning("Vessel fetch failed: %s; keeping %d vessels", exc, len(self._vessels))
            return False

        if self._surface is not surface:
            _logger.debug("Discarding vessel snapshot for a torn-down map view")
            return False

        self._apply_snapshot(vessels, surface)
        return True

    def _apply_snapshot(self, vessels: Sequence[Vessel], surface: MapSurface) -> None:
        self._vessels = tuple(vessels)
        self._reconciler.reconcile(self._vessels, surface)
        # A selection that arrived before its vessel did is applied once.
        selected = self._channel.selected_id
        if selected is not None and selected != self._applied_selection:
            self._apply_selection(selected)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def _on_selection_changed(self, selected_id: int | None) -> None:
        self._applied_selection = None
        if selected_id is not None:
            self._apply_selection(selected_id)

    def _apply_selection(self, selected_id: int) -> None:
        if self._tracker.apply_selection(selected_id, self._vessels, self._surface):
            self._applied_selection = selected_id

    def on_select(self, vessel_id: int) -> None:
        self._channel.select(vessel_id)

    def on_deselect(self) -> None:
        self._channel.clear()

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def vessels(self) -> tuple[Vessel, ...]:
        return self._vessels

    @property
    def surface(self) -> MapSurface | None:
        return self._surface

    @property
    def channel(self) -> SelectionChannel:
        return self._channel

    @property
    def reconciler(self) -> MarkerReconciler:
        return self._reconciler

    def get_view_model(self) -> ViewModel:
        selected = self._channel.selected_id
        return ViewModel(
            vessel_display_records=self._projector.project_all(self._vessels, selected),
            selected_id=selected,
        )

    def _require_surface(self) -> MapSurface:
        if self._surface is None:
            raise FleetMapError("Map view not mounted. Use 'async with MapViewController(...) as view:'")
        return self._surface
