from __future__ import annotations

from types import SimpleNamespace

from bundle_stats_metrics.domain.models.asset import (
    Asset,
    BinarySource,
    CodeSource,
    TextSource,
)


def test_asset_from_host_given_string_source_then_builds_text_source():
    asset = Asset.from_host("index.js", {"source": "console.log(1)", "code": "ignored"})

    assert asset.identifier == "index.js"
    assert asset.source == TextSource("console.log(1)")


def test_asset_from_host_given_binary_source_then_copies_bytes():
    buffer = bytearray(b"\x00\x01")
    asset = Asset.from_host("logo.png", SimpleNamespace(source=memoryview(buffer)))

    assert asset.source == BinarySource(b"\x00\x01")
    assert isinstance(asset.source.data, bytes)


def test_asset_from_host_given_only_code_then_builds_code_source():
    asset = Asset.from_host("chunk.js", SimpleNamespace(source=None, code="export {}"))

    assert asset.source == CodeSource("export {}")


def test_asset_from_host_given_unknown_shape_then_source_is_absent():
    assert Asset.from_host("x.js", {"source": 42}).source is None
    assert Asset.from_host("x.js", object()).source is None


def test_asset_from_host_given_raw_values_then_wraps_them():
    assert Asset.from_host("a.txt", "abc").source == TextSource("abc")
    assert Asset.from_host("a.bin", b"abc").source == BinarySource(b"abc")


def test_asset_from_host_given_asset_then_returns_it_unchanged():
    asset = Asset.code("main.js", "1")

    assert Asset.from_host("main.js", asset) is asset
