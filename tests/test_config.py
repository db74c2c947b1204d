"""Tests for options and tree-file loading."""

import json

import pytest
import yaml

from rich_tree.config import DEFAULT_PAGE_SIZE, TreeOptions, load_tree_file
from rich_tree.errors import TreeSpecError


class TestTreeOptions:
    def test_defaults(self):
        options = TreeOptions()
        assert options.multiple is False
        assert options.loop is True
        assert options.page_size == DEFAULT_PAGE_SIZE
        assert options.validate is None

    @pytest.mark.parametrize("page_size", [0, -1, "10", True])
    def test_bad_page_size(self, page_size):
        with pytest.raises(TreeSpecError):
            TreeOptions(page_size=page_size)

    def test_from_mapping_accepts_camel_case(self):
        options = TreeOptions.from_mapping(
            {"pageSize": 5, "hideChildrenOfValid": True, "onlyShowValid": True, "loop": False}
        )
        assert options.page_size == 5
        assert options.hide_children_of_valid is True
        assert options.only_show_valid is True
        assert options.loop is False

    def test_from_mapping_rejects_unknown(self):
        with pytest.raises(TreeSpecError, match="colour"):
            TreeOptions.from_mapping({"colour": "red"})

    def test_merged_skips_none(self):
        options = TreeOptions(loop=False).merged(loop=None, multiple=True)
        assert options.loop is False
        assert options.multiple is True


class TestLoadTreeFile:
    def test_yaml_mapping(self, tmp_path):
        path = tmp_path / "tree.yaml"
        path.write_text(yaml.dump({
            "message": "Pick",
            "multiple": True,
            "tree": [{"name": "fruit", "children": ["apple"]}],
        }))
        tree_file = load_tree_file(path)
        assert tree_file.message == "Pick"
        assert tree_file.options.multiple is True
        assert tree_file.tree == [{"name": "fruit", "children": ["apple"]}]

    def test_json_list(self, tmp_path):
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(["a", "b"]))
        tree_file = load_tree_file(path)
        assert tree_file.tree == ["a", "b"]
        assert tree_file.message is None
        assert tree_file.options == TreeOptions()

    def test_missing_file(self, tmp_path):
        with pytest.raises(TreeSpecError, match="Cannot read"):
            load_tree_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "tree.yml"
        path.write_text("tree: [unclosed")
        with pytest.raises(TreeSpecError, match="Cannot parse"):
            load_tree_file(path)

    def test_mapping_without_tree(self, tmp_path):
        path = tmp_path / "tree.yaml"
        path.write_text("multiple: true\n")
        with pytest.raises(TreeSpecError):
            load_tree_file(path)

    def test_example_file_loads(self):
        from pathlib import Path

        path = Path(__file__).parent.parent / "examples" / "trees" / "meal.yaml"
        tree_file = load_tree_file(path)
        assert tree_file.options.loop is False
        assert [node["name"] for node in tree_file.tree] == ["burgers", "fish", "snacks"]
