"""Tests for assetpack.config — AssetConfig frozen dataclass."""

from pathlib import Path

import pytest

from assetpack.config import DEFAULT_SERVED, AssetConfig


class TestAssetConfig:
    def test_defaults(self) -> None:
        cfg = AssetConfig()

        assert cfg.root == "."
        assert cfg.output_path == "public"
        assert cfg.served == DEFAULT_SERVED
        assert cfg.js_compression == "none"
        assert cfg.css_compression == "simple"
        assert dict(cfg.js_compression_options) == {}
        assert cfg.cache_renders is False

    def test_default_mappings(self) -> None:
        assert DEFAULT_SERVED == (
            ("/css", "app/css"),
            ("/js", "app/js"),
            ("/images", "app/images"),
        )

    def test_frozen(self) -> None:
        cfg = AssetConfig()

        with pytest.raises(AttributeError):
            cfg.root = "/srv"  # type: ignore[misc]

    def test_relative_output_under_root(self, tmp_path) -> None:
        cfg = AssetConfig(root=tmp_path, output_path="dist")
        assert cfg.output_root == tmp_path.resolve() / "dist"

    def test_absolute_output_kept(self, tmp_path) -> None:
        cfg = AssetConfig(root=Path("/srv/site"), output_path=tmp_path)
        assert cfg.output_root == tmp_path
