"""Tests for ContextVar-based parse configuration."""

from threading import Thread

import pytest

from cmarkparser import (
    NodeType,
    ParseConfig,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.max_indent == 3
        assert config.text_transformer is None

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.max_indent = 1  # type: ignore[misc]

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValueError, match="max_indent"):
            ParseConfig(max_indent=-1)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"max_indent": 1, "tables_enabled": True})
        assert config == ParseConfig(max_indent=1)


class TestContextAccessors:
    """get/set/reset and the context manager."""

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(max_indent=0))
        try:
            assert get_parse_config().max_indent == 0
        finally:
            reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with parse_config_context(ParseConfig(max_indent=1)):
                raise RuntimeError("boom")
        assert get_parse_config().max_indent == 3

    def test_thread_isolation(self) -> None:
        """Each thread parses with the config it set."""
        results: dict[int, NodeType] = {}

        def worker(thread_id: int, config: ParseConfig) -> None:
            set_parse_config(config)
            results[thread_id] = parse(b" # x").children[0].type

        configs = [ParseConfig(max_indent=0), ParseConfig(max_indent=3)]
        threads = [Thread(target=worker, args=(i, c)) for i, c in enumerate(configs)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {0: NodeType.PARAGRAPH, 1: NodeType.HEADING1}


class TestParseWithConfig:
    """parse() honours the given or active config."""

    def test_config_argument(self) -> None:
        doc = parse(b" # x", config=ParseConfig(max_indent=0))
        assert doc.children[0].type is NodeType.PARAGRAPH
        assert get_parse_config().max_indent == 3

    def test_active_context(self) -> None:
        with parse_config_context(ParseConfig(max_indent=0)):
            doc = parse(b" ---")
        assert doc.children[0].type is NodeType.PARAGRAPH

    def test_text_transformer_applies_to_paragraphs_only(self) -> None:
        config = ParseConfig(text_transformer=bytes.upper)
        doc = parse(b"# keep\nshout\nloud", config=config)
        assert [(n.type, n.content) for n in doc.children] == [
            (NodeType.HEADING1, b"keep"),
            (NodeType.PARAGRAPH, b"SHOUT\nLOUD"),
        ]
