from __future__ import annotations

import pytest

from fleetmap.exceptions import FleetMapError
from fleetmap.geo import LatLng
from fleetmap.surface.scene import SceneMapSurface


def test_only_one_popup_open_at_a_time() -> None:
    surface = SceneMapSurface("mapid", LatLng(0.0, 0.0), 7)
    first = surface.add_marker(LatLng(1.0, 1.0), "a_0").bind_popup("<b>a</b>")
    second = surface.add_marker(LatLng(2.0, 2.0), "b_1").bind_popup("<b>b</b>")

    first.open_popup()
    second.open_popup()

    assert not first.popup_open
    assert second.popup_open


def test_open_popup_requires_bound_popup() -> None:
    surface = SceneMapSurface("mapid", LatLng(0.0, 0.0), 7)
    marker = surface.add_marker(LatLng(1.0, 1.0), "a_0")

    with pytest.raises(FleetMapError):
        marker.open_popup()


def test_scene_description_lists_layers_in_order() -> None:
    surface = SceneMapSurface("mapid", LatLng(0.0, 0.0), 7)
    surface.add_tile_layer("https://tiles/{z}/{x}/{y}.png")
    surface.create_feature_group()
    surface.add_marker(LatLng(1.0, 2.0), "a_0").bind_popup("<b>a</b>").open_popup()

    scene = surface.to_dict()

    assert [layer["type"] for layer in scene["layers"]] == ["tiles", "group", "marker"]
    assert scene["layers"][2]["position"] == [1.0, 2.0]
    assert scene["layers"][2]["popup_open"] is True


def test_closed_surface_rejects_changes() -> None:
    surface = SceneMapSurface("mapid", LatLng(0.0, 0.0), 7)
    surface.close()

    with pytest.raises(FleetMapError):
        surface.add_marker(LatLng(1.0, 1.0), "a_0")
