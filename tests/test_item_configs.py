"""Tests for item config parsing and fragment loading."""

from pathlib import Path
from typing import Any, Callable

import pytest

from item_patcher.item_configs import ItemConfigLoader, ItemDescriptor
from item_patcher.settings import ConfigError


class TestItemDescriptor:
    """Test feature blocks are present only when flagged."""

    def test_unflagged_blocks_are_absent(self) -> None:
        descriptor = ItemDescriptor.from_dict(
            "X",
            {
                "itemTplToClone": "shortA",
                "addtoStaticLootContainers": False,
                "StaticLootContainers": "shortContainer",
                "Probability": 10,
                "addtoTraders": False,
                "traderId": "shortTrader",
                "modSlot": ["mod_pistol_grip"],
            },
        )
        assert descriptor.static_loot is None
        assert descriptor.trader is None
        assert descriptor.mod_slots is None
        assert descriptor.inventory_slots is None
        assert descriptor.mastery_sections is None
        assert descriptor.weapon_presets is None
        assert descriptor.add_to_bots is False

    def test_single_container_uses_item_probability(self) -> None:
        descriptor = ItemDescriptor.from_dict(
            "X",
            {
                "addtoStaticLootContainers": True,
                "StaticLootContainers": "shortContainer",
                "Probability": 0.5,
            },
        )
        assert descriptor.static_loot is not None
        assert [(p.container, p.probability) for p in descriptor.static_loot] == [
            ("shortContainer", 0.5)
        ]

    def test_container_list_uses_per_container_probability(self) -> None:
        descriptor = ItemDescriptor.from_dict(
            "X",
            {
                "addtoStaticLootContainers": True,
                "StaticLootContainers": [
                    {"ContainerName": "a", "Probability": 1},
                    {"ContainerName": "b", "Probability": 7},
                ],
                "Probability": 99,
            },
        )
        assert descriptor.static_loot is not None
        assert [(p.container, p.probability) for p in descriptor.static_loot] == [
            ("a", 1),
            ("b", 7),
        ]

    def test_one_or_many_values_become_lists(self) -> None:
        descriptor = ItemDescriptor.from_dict(
            "X",
            {
                "addtoModSlots": True,
                "modSlot": "mod_pistol_grip",
                "ModdableItemWhitelist": "shortWeapon2",
                "addtoInventorySlots": "Holster",
                "masteries": True,
                "masterySections": {"Name": "Glock", "Templates": ["X"]},
            },
        )
        assert descriptor.mod_slots is not None
        assert descriptor.mod_slots.slot_names == ["mod_pistol_grip"]
        assert descriptor.mod_slots.whitelist == ["shortWeapon2"]
        assert descriptor.mod_slots.blacklist == []
        assert descriptor.inventory_slots == ["Holster"]
        assert descriptor.mastery_sections == [{"Name": "Glock", "Templates": ["X"]}]

    def test_trader_listing(self) -> None:
        descriptor = ItemDescriptor.from_dict(
            "X",
            {
                "addtoTraders": True,
                "traderId": "shortTrader",
                "traderItems": [{"unlimitedCount": True, "stackObjectsCount": 999}],
                "barterScheme": [{"count": 1200, "_tpl": "ROUBLES"}],
                "loyallevelitems": 2,
            },
        )
        assert descriptor.trader is not None
        assert descriptor.trader.trader_id == "shortTrader"
        assert descriptor.trader.items[0].unlimited_count is True
        assert descriptor.trader.items[0].stack_objects_count == 999
        assert descriptor.trader.barter_scheme[0].tpl == "ROUBLES"
        assert descriptor.trader.barter_scheme[0].count == 1200
        assert descriptor.trader.loyalty_level == 2


class TestItemConfigLoader:
    """Test fragment discovery, merging and failure modes."""

    def test_merges_fragments_by_item_id(
        self, tmp_path: Path, write_json: Callable[[str, Any], Path]
    ) -> None:
        write_json("items/a_pistols.json", {"X": {"itemTplToClone": "first"}, "Y": {"itemTplToClone": "y"}})
        write_json("items/b_override.json", {"X": {"itemTplToClone": "second"}})

        combined = ItemConfigLoader().load_combined(tmp_path / "items")
        assert set(combined) == {"X", "Y"}
        assert combined["X"] == {"itemTplToClone": "second"}

    def test_later_file_replaces_whole_config(
        self, tmp_path: Path, write_json: Callable[[str, Any], Path]
    ) -> None:
        write_json("items/1.json", {"X": {"itemTplToClone": "a", "addtoBots": True}})
        write_json("items/2.json", {"X": {"itemTplToClone": "b"}})

        descriptors = ItemConfigLoader().load_descriptors(tmp_path / "items")
        assert descriptors["X"].item_tpl_to_clone == "b"
        assert descriptors["X"].add_to_bots is False

    def test_excluded_files_are_skipped(
        self, tmp_path: Path, write_json: Callable[[str, Any], Path]
    ) -> None:
        write_json("items/pistols.json", {"X": {"itemTplToClone": "a"}})
        write_json("items/BaseItemReplacement.json", {"Z": {"itemTplToClone": "z"}})

        combined = ItemConfigLoader().load_combined(tmp_path / "items")
        assert list(combined) == ["X"]

    def test_custom_exclude_pattern(
        self, tmp_path: Path, write_json: Callable[[str, Any], Path]
    ) -> None:
        write_json("items/pistols.json", {"X": {}})
        write_json("items/disabled_rifles.json", {"Z": {}})

        loader = ItemConfigLoader(exclude_pattern="disabled")
        assert [p.name for p in loader.list_config_files(tmp_path / "items")] == ["pistols.json"]

    def test_malformed_json_aborts_load(
        self, tmp_path: Path, write_json: Callable[[str, Any], Path]
    ) -> None:
        write_json("items/good.json", {"X": {}})
        (tmp_path / "items" / "broken.json").write_text('{"Y": ', encoding="utf-8")

        with pytest.raises(ConfigError):
            ItemConfigLoader().load_combined(tmp_path / "items")

    def test_non_object_fragment_is_rejected(
        self, tmp_path: Path, write_json: Callable[[str, Any], Path]
    ) -> None:
        write_json("items/list.json", [{"X": {}}])

        with pytest.raises(ConfigError):
            ItemConfigLoader().load_combined(tmp_path / "items")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            ItemConfigLoader().load_combined(tmp_path / "nope")
