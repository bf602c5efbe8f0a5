"""Tests for icon_swapper.registry.IconRegistry."""

from __future__ import annotations

from icon_swapper.registry import IconRegistry, IconSink

class TestIconRegistry:
    def test_satisfies_icon_sink_protocol(self, registry: IconRegistry) -> None:
        sink: IconSink = registry
        assert callable(sink.install)
        assert callable(sink.capture_default)

    def test_lookup_builtin(self, registry: IconRegistry, builtin_icons: dict[str, str]) -> None:
        assert registry.lookup("gear") == builtin_icons["gear"]
        assert registry.lookup("missing") is None
        assert set(registry.names()) == set(builtin_icons)

    def test_install_replaces_table_entry(self, registry: IconRegistry) -> None:
        registry.install("gear", "<path d=\"M0 0\" />")
        assert registry.lookup("gear") == "<path d=\"M0 0\" />"

    def test_install_patches_rendered_instances(self, registry: IconRegistry) -> None:
        first = registry.render("gear")
        second = registry.render("gear", size=16)
        other = registry.render("star")

        registry.install("gear", "<g />")

        assert first.content == "<g />"
        assert second.content == "<g />"
        assert other.content != "<g />"

    def test_install_new_name(self, registry: IconRegistry) -> None:
        registry.install("custom", "<g />")
        assert registry.render("custom").content == "<g />"

    def test_capture_default_is_idempotent_and_untracked(
        self, registry: IconRegistry, builtin_icons: dict[str, str]
    ) -> None:
        assert registry.capture_default("gear") == builtin_icons["gear"]
        assert registry.capture_default("gear") == builtin_icons["gear"]
        assert registry.rendered("gear") == []

    def test_rendered_returns_live_instances_as_list(self, registry: IconRegistry) -> None:
        icon = registry.render("gear")
        assert registry.rendered("gear") == [icon]
        assert registry.rendered("never-rendered") == []

    def test_capture_default_unknown_name(self) -> None:
        assert IconRegistry().capture_default("nope") == ""

    def test_rendered_icon_to_svg(self, registry: IconRegistry) -> None:
        svg = registry.render("gear", size=20).to_svg()
        assert svg.startswith('<svg viewBox="0 0 100 100"')
        assert 'width="20"' in svg
        assert 'class="svg-icon gear"' in svg
        assert svg.endswith("</svg>")
