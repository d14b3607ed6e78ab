from __future__ import annotations

import json
from typing import Any

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from fleetmap._transport import HttpVesselSource
from fleetmap.config import FleetMapConfig
from fleetmap.exceptions import FleetMapError, FleetMapTransportError

VESSELS_PATH = "/Appoploo2/vessels"


def _app(status: int, body: str) -> web.Application:
    async def handler(request: web.Request) -> web.Response:
        assert request.query_string == ""
        return web.Response(status=status, text=body, content_type="application/json")

    app = web.Application()
    app.router.add_get(VESSELS_PATH, handler)
    return app


def _config(server: TestServer) -> FleetMapConfig:
    return FleetMapConfig(base_url=f"http://{server.host}:{server.port}")


async def _fetch(status: int, body: Any) -> list[Any]:
    text = body if isinstance(body, str) else json.dumps(body)
    async with TestServer(_app(status, text)) as server:
        async with HttpVesselSource(_config(server)) as source:
            return await source.fetch_vessels()


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_fetch_vessels_parses_list() -> None:
    vessels = await _fetch(
        200,
        [
            {
                "id": 5,
                "name": "Amphitrite",
                "vesselType": {"id": 1, "vesselType": "Cargo"},
                "devices": [{"telematicsData": {"position": {"latitude": 37.9, "longitude": 23.6}}}],
            },
            {"id": 6, "name": "Triton", "devices": []},
        ],
    )

    assert [vessel.id for vessel in vessels] == [5, 6]
    assert vessels[0].vessel_type_label == "Cargo"


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_non_success_status_raises_transport_error() -> None:
    with pytest.raises(FleetMapTransportError) as exc_info:
        await _fetch(502, "bad gateway")

    assert exc_info.value.status_code == 502
    assert exc_info.value.endpoint == VESSELS_PATH


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_invalid_json_raises_transport_error() -> None:
    with pytest.raises(FleetMapTransportError, match="Invalid JSON"):
        await _fetch(200, "<html>oops</html>")


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_non_list_payload_raises_transport_error() -> None:
    with pytest.raises(FleetMapTransportError):
        await _fetch(200, {"error": "nope"})


@pytest.mark.asyncio
async def test_unreachable_host_raises_transport_error() -> None:
    config = FleetMapConfig(base_url="http://127.0.0.1:1", request_timeout=2.0)

    async with HttpVesselSource(config) as source:
        with pytest.raises(FleetMapTransportError):
            await source.fetch_vessels()


@pytest.mark.asyncio
async def test_source_requires_context_manager() -> None:
    source = HttpVesselSource(FleetMapConfig())

    with pytest.raises(FleetMapError):
        await source.fetch_vessels()


@pytest.mark.asyncio
@pytest.mark.e2e
async def test_undecodable_body_raises_transport_error() -> None:
    async def handler(_request: web.Request) -> web.Response:
        return web.Response(body=b'[{"id": 1, "name": "\xff\xfe"}]', content_type="application/json")

    app = web.Application()
    app.router.add_get(VESSELS_PATH, handler)

    async with TestServer(app) as server:
        async with HttpVesselSource(_config(server)) as source:
            with pytest.raises(FleetMapTransportError, match="Invalid JSON"):
                await source.fetch_vessels()
