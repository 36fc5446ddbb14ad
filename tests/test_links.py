"""Tests for prerender.export.links — same-site link extraction."""

from prerender.export.links import extract_relative_links


class TestFiltering:
    """Cross-origin and non-path references are dropped."""

    def test_mixed_links_from_directory(self) -> None:
        html = (
            '<a href="//external.com/x">ext</a>'
            '<a href="http://x.com">abs</a>'
            '<a href="/ok">ok</a>'
            '<a href="rel/page">rel</a>'
        )
        assert extract_relative_links(html, "/dir/") == ["/ok", "/dir/rel/page"]

    def test_mailto_dropped(self) -> None:
        html = '<a href="mailto:me@example.com">mail</a>'
        assert extract_relative_links(html, "/") == []

    def test_fragment_only_dropped(self) -> None:
        html = '<a href="#top">top</a><a href="">empty</a>'
        assert extract_relative_links(html, "/") == []

    def test_fragment_stripped_from_path(self) -> None:
        html = '<a href="/docs#intro">docs</a>'
        assert extract_relative_links(html, "/") == ["/docs"]

    def test_malformed_href_dropped(self) -> None:
        html = '<a href="http://[broken">bad</a><a href="/fine">fine</a>'
        assert extract_relative_links(html, "/") == ["/fine"]

    def test_anchor_without_href_ignored(self) -> None:
        html = '<a name="anchor">x</a><a href="/y">y</a>'
        assert extract_relative_links(html, "/") == ["/y"]


class TestResolution:
    """Relative references resolve against the current path."""

    def test_parent_segment(self) -> None:
        html = '<a href="../up">up</a>'
        assert extract_relative_links(html, "/a/b/") == ["/a/up"]

    def test_sibling_of_file_like_path(self) -> None:
        html = '<a href="other">other</a>'
        assert extract_relative_links(html, "/docs/page") == ["/docs/other"]

    def test_query_only_reference(self) -> None:
        html = '<a href="?page=2">next</a>'
        assert extract_relative_links(html, "/list/") == ["/list/?page=2"]

    def test_absolute_path_with_query_kept(self) -> None:
        html = '<a href="/search?q=cats">search</a>'
        assert extract_relative_links(html, "/deep/page/") == ["/search?q=cats"]

    def test_unjoinable_base_drops_relative(self) -> None:
        html = '<a href="rel">r</a><a href="/abs">a</a>'
        assert extract_relative_links(html, "//[x/") == ["/abs"]


class TestOrdering:
    """Anchors before frames, document order within each, duplicates kept."""

    def test_anchors_before_iframes(self) -> None:
        html = (
            '<iframe src="/frame-1"></iframe>'
            '<a href="/a">a</a>'
            '<iframe src="/frame-2"></iframe>'
            '<a href="/b">b</a>'
        )
        assert extract_relative_links(html, "/") == ["/a", "/b", "/frame-1", "/frame-2"]

    def test_duplicates_preserved(self) -> None:
        html = '<a href="/x">1</a><a href="/x">2</a>'
        assert extract_relative_links(html, "/") == ["/x", "/x"]

    def test_plain_text_has_no_links(self) -> None:
        assert extract_relative_links("just some text", "/") == []

    def test_unclosed_markup_still_parsed(self) -> None:
        html = '<div><a href="/still-found">x<p>unclosed'
        assert extract_relative_links(html, "/") == ["/still-found"]
