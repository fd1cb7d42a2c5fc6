"""
Shared pytest fixtures for the Codelens test suite.

Provides sample syntax trees built with the in-memory FakeNode factory,
and an isolated config environment so no test reads the developer's
~/.codelens/config.yaml or CODELENS_* variables.

Usage in tests:
    def test_something(rust_tree):
        lines = classify(Language.RUST, FakeCursor(rust_tree))
"""

import pytest
from tests.factories import node


@pytest.fixture
def rust_tree():
    """
    Rust file with one import and one impl block.

        0  use std::io;
        1
        2  impl Foo {
        3      fn bar() {}
        4
        5  }
    """
    return node("source_file", 0, 6, [
        node("use_declaration", 0, 0),
        node("impl_item", 2, 5, [
            node("impl", 2, 2),
            node("type_identifier", 2, 2),
            node("declaration_list", 2, 5, [
                node("{", 2, 2),
                node("function_item", 3, 3, [
                    node("block", 3, 3),
                ]),
                node("}", 5, 5),
            ]),
        ]),
    ])


@pytest.fixture
def go_comment_tree():
    """Go file holding nothing but a comment on line 1."""
    return node("source_file", 0, 2, [
        node("comment", 1, 1),
    ])


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user config at a temp dir and clear CODELENS_* variables."""
    from codelens.config import ConfigManager

    user_dir = tmp_path / "home" / ".codelens"
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_DIR", user_dir)
    monkeypatch.setattr(ConfigManager, "USER_CONFIG_FILE", user_dir / "config.yaml")
    monkeypatch.delenv("CODELENS_EXTENSIONS", raising=False)
    monkeypatch.delenv("CODELENS_HIGHLIGHT_NAMES", raising=False)
    return user_dir
