"""
Static checks on the scene modules. They need a display to run, so these
tests read their source instead of importing them.
"""
import ast
from pathlib import Path

import pytest

SCENES_DIR = Path(__file__).resolve().parents[1] / "timestables" / "scenes"


def _tree(name):
    return ast.parse((SCENES_DIR / name).read_text(encoding="utf-8"))


def _type_checking_imports(tree):
    names = set()
    for node in tree.body:
        if isinstance(node, ast.If) and isinstance(node.test, ast.Name) and node.test.id == "TYPE_CHECKING":
            for statement in node.body:
                if isinstance(statement, ast.ImportFrom):
                    names.update(alias.name for alias in statement.names)
    return names


class TestSceneModules:
    @pytest.mark.parametrize("name", ["base.py", "settings_form.py", "game_view.py", "game_over.py"])
    def test_app_annotation_is_imported(self, name):
        assert "App" in _type_checking_imports(_tree(name))

    def test_start_game_reports_every_game_error(self):
        tree = _tree("settings_form.py")
        start_game = next(
            node for node in ast.walk(tree)
            if isinstance(node, ast.FunctionDef) and node.name == "_start_game"
        )
        caught = {
            handler.type.id
            for node in ast.walk(start_game) if isinstance(node, ast.Try)
            for handler in node.handlers
        }
        assert caught == {"TimesTablesError"}

    def test_grid_width_is_a_display_setting(self):
        source = (SCENES_DIR / "game_view.py").read_text(encoding="utf-8")
        assert "settings.GRID_COLUMNS" in source
        assert "grid_columns" not in source
