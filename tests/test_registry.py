"""Tests for the tool registry and dispatch."""

import json

import pytest

from core.catalog import parse_catalog, set_catalog
from core.errors import DataIntegrityError, ErrorKind, InvalidArgs, UnknownTool
from core.models import FUEL_TYPES, Location, Station
from core.registry import REGISTRY, ToolName, dispatch, get_tool, tool_descriptors


class TestUnknownTool:
    def test_unknown_name_fails_with_unknown_tool(self, three_station_catalog) -> None:
        """Given a name that isn't registered, when dispatching, then UnknownTool carries the name."""
        with pytest.raises(UnknownTool) as exc_info:
            dispatch("not_a_tool", {}, three_station_catalog)

        assert exc_info.value.kind is ErrorKind.UNKNOWN_TOOL
        assert exc_info.value.name == "not_a_tool"
        assert str(exc_info.value) == "Tool not found: not_a_tool"

    def test_lookup_is_case_sensitive(self) -> None:
        with pytest.raises(UnknownTool):
            get_tool("GET_BEST_OFFERS")


class TestInvalidArgs:
    def test_missing_fuel_type_for_cheapest_stations(self, three_station_catalog) -> None:
        """Given no fuelType, when dispatching get_cheapest_stations, then InvalidArgs names fuelType."""
        with pytest.raises(InvalidArgs) as exc_info:
            dispatch("get_cheapest_stations", {}, three_station_catalog)

        error = exc_info.value
        assert error.kind is ErrorKind.INVALID_ARGS
        assert error.tool == "get_cheapest_stations"
        assert error.field == "fuelType"
        assert error.constraint == "missing"

    @pytest.mark.parametrize(
        "tool, args, field, constraint",
        [
            ("get_cheapest_stations", {"fuelType": "petrol"}, "fuelType", "literal_error"),
            ("get_cheapest_stations", {"fuelType": 95}, "fuelType", "literal_error"),
            ("get_cheapest_stations", {"fuelType": "diesel", "limit": "3"}, "limit", "int_type"),
            ("get_cheapest_stations", {"fuelType": "diesel", "limit": 2.5}, "limit", "int_type"),
            ("get_cheapest_stations", {"fuelType": "diesel", "limit": True}, "limit", "int_type"),
            ("get_cheapest_stations", {"fuelType": "diesel", "limit": -1}, "limit", "greater_than_equal"),
            ("find_stations_on_route", {"destination": "Madrid"}, "origin", "missing"),
            ("find_stations_on_route", {"origin": "A Coruña"}, "destination", "missing"),
            ("find_stations_on_route", {"origin": "   ", "destination": "Madrid"}, "origin", "string_too_short"),
            ("find_stations_on_route", {"origin": 1, "destination": "Madrid"}, "origin", "string_type"),
            (
                "find_stations_on_route",
                {"origin": "A", "destination": "B", "fuelType": "gasoline"},
                "fuelType",
                "literal_error",
            ),
            ("get_best_offers", {"route": 42}, "route", "string_type"),
        ],
    )
    def test_schema_violations(self, three_station_catalog, tool: str, args: dict, field: str, constraint: str) -> None:
        with pytest.raises(InvalidArgs) as exc_info:
            dispatch(tool, args, three_station_catalog)

        assert exc_info.value.field == field
        assert exc_info.value.constraint == constraint
        assert field in str(exc_info.value)

    def test_non_mapping_arguments_are_rejected(self, three_station_catalog) -> None:
        with pytest.raises(InvalidArgs) as exc_info:
            dispatch("get_best_offers", ["route"], three_station_catalog)

        assert exc_info.value.field == "arguments"

    def test_validation_happens_before_any_catalog_access(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given invalid args and no catalog available, when dispatching, then InvalidArgs is raised first."""

        def explode():
            raise AssertionError("catalog must not be loaded for invalid arguments")

        monkeypatch.setattr("core.registry.get_catalog", explode)

        with pytest.raises(InvalidArgs):
            dispatch("get_cheapest_stations", {"fuelType": "kerosene"})


class TestDispatch:
    def test_concrete_cheapest_scenario(self, three_station_catalog) -> None:
        result = dispatch("get_cheapest_stations", {"fuelType": "diesel", "limit": 2}, three_station_catalog)

        assert [s["prices"]["diesel"] for s in result["cheapestStations"]] == [1.450, 1.499]
        assert result["lowestPrice"] == 1.450

    def test_route_defaults_to_diesel(self, three_station_catalog) -> None:
        result = dispatch(
            "find_stations_on_route",
            {"origin": "A Coruña", "destination": "Madrid"},
            three_station_catalog,
        )

        assert [s["name"] for s in result["stations"]] == ["Bravo", "Alpha", "Charlie"]
        assert result["route"] == "A Coruña → Madrid"
        assert result["totalStations"] == 3

    def test_origin_and_destination_are_trimmed(self, three_station_catalog) -> None:
        result = dispatch(
            "find_stations_on_route",
            {"origin": "  A Coruña ", "destination": " Madrid  "},
            three_station_catalog,
        )

        assert result["route"] == "A Coruña → Madrid"

    def test_best_offers_needs_no_arguments(self, three_station_catalog) -> None:
        assert dispatch("get_best_offers", {}, three_station_catalog)["total"] == 1
        assert dispatch("get_best_offers", None, three_station_catalog)["total"] == 1

    def test_unknown_argument_keys_are_ignored(self, three_station_catalog) -> None:
        result = dispatch("get_best_offers", {"route": "A-B", "extra": True}, three_station_catalog)

        assert result["total"] == 1

    def test_enum_member_name_is_accepted(self, three_station_catalog) -> None:
        result = dispatch(ToolName.GET_BEST_OFFERS, {}, three_station_catalog)

        assert result["total"] == 1

    def test_uses_process_catalog_when_none_given(self, three_station_catalog) -> None:
        set_catalog(three_station_catalog)

        result = dispatch("get_cheapest_stations", {"fuelType": "diesel", "limit": 1})

        assert result["cheapestStations"][0]["name"] == "Bravo"

    @pytest.mark.parametrize(
        "tool, args",
        [
            ("find_stations_on_route", {"origin": "A Coruña", "destination": "Madrid", "fuelType": "unleaded98"}),
            ("get_best_offers", {}),
            ("get_cheapest_stations", {"fuelType": "unleaded95", "limit": 5}),
        ],
    )
    def test_dispatch_is_idempotent(self, bundled_catalog, tool: str, args: dict) -> None:
        """Given the same call twice, when serialized, then the outputs are byte-identical."""
        first = json.dumps(dispatch(tool, args, bundled_catalog), ensure_ascii=False, indent=2)
        second = json.dumps(dispatch(tool, args, bundled_catalog), ensure_ascii=False, indent=2)

        assert first == second

    def test_data_integrity_error_surfaces_through_dispatch(self) -> None:
        """Given a record that slipped past loading without a price, when dispatching, then DataIntegrityError."""
        broken = Station(
            name="Hand-built",
            location=Location(city="Lugo", address="Somewhere"),
            distance_from_origin=1,
            prices={"unleaded95": 1.5, "unleaded98": 1.6},
        )

        with pytest.raises(DataIntegrityError, match="prices.diesel"):
            dispatch("get_cheapest_stations", {"fuelType": "diesel"}, (broken,))


class TestDescriptors:
    def test_exactly_three_tools_are_registered(self) -> None:
        assert [d["name"] for d in tool_descriptors()] == [
            "find_stations_on_route",
            "get_best_offers",
            "get_cheapest_stations",
        ]
        assert set(REGISTRY) == set(ToolName)

    def test_cheapest_schema(self) -> None:
        schema = get_tool("get_cheapest_stations").input_schema()

        assert schema["type"] == "object"
        assert schema["required"] == ["fuelType"]
        assert schema["properties"]["fuelType"]["enum"] == list(FUEL_TYPES)
        assert schema["properties"]["limit"]["type"] == "integer"
        assert schema["properties"]["limit"]["default"] == 3

    def test_route_schema(self) -> None:
        schema = get_tool("find_stations_on_route").input_schema()

        assert sorted(schema["required"]) == ["destination", "origin"]
        assert schema["properties"]["fuelType"]["default"] == "diesel"

    def test_offers_schema_has_no_required_fields(self) -> None:
        schema = get_tool("get_best_offers").input_schema()

        assert schema.get("required", []) == []
        assert "route" in schema["properties"]

    def test_every_descriptor_has_a_description(self) -> None:
        for descriptor in tool_descriptors():
            assert descriptor["description"]


def test_bundled_catalog_through_registry(bundled_catalog) -> None:
    for fuel_type in FUEL_TYPES:
        result = dispatch("get_cheapest_stations", {"fuelType": fuel_type, "limit": 100}, bundled_catalog)
        prices = [s["prices"][fuel_type] for s in result["cheapestStations"]]
        assert prices == sorted(prices)
        assert result["lowestPrice"] == prices[0]


def test_parse_then_dispatch_on_empty_catalog() -> None:
    result = dispatch("get_cheapest_stations", {"fuelType": "diesel"}, parse_catalog([]))

    assert result["lowestPrice"] is None


def test_invalid_args_serializes_its_details(three_station_catalog) -> None:
    with pytest.raises(InvalidArgs) as exc_info:
        dispatch("get_cheapest_stations", {"fuelType": "diesel", "limit": -1}, three_station_catalog)

    data = exc_info.value.to_dict()
    assert data["error"] == "InvalidArgs"
    assert data["tool"] == "get_cheapest_stations"
    assert data["field"] == "limit"
    assert data["constraint"] == "greater_than_equal"
    assert data["message"] == str(exc_info.value)
