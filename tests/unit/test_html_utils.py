"""
HTML处理工具与解析器单元测试
"""

import pytest

from image_server.core.html import (
    ElementFinder,
    ImageTypeDetector,
    get_attribute,
    normalize_whitespace,
    parent_tag_name,
    parse_document,
    remove_elements,
    select,
    select_first,
)


@pytest.mark.unit
@pytest.mark.html
class TestHtmlUtils:
    """html_utils 单元测试类"""

    def test_get_attribute_joins_class_list(self):
        soup = parse_document('<img class="hero wide" alt="Top">')
        image = select_first(soup, "img")

        assert get_attribute(image, "class") == "hero wide"
        assert get_attribute(image, "alt") == "Top"
        assert get_attribute(image, "title") == ""

    def test_parent_tag_name(self):
        soup = parse_document("<img id='top'><header><img id='inner'></header>")

        assert parent_tag_name(select_first(soup, "#top")) == ""
        assert parent_tag_name(select_first(soup, "#inner")) == "header"

    def test_remove_elements(self):
        soup = parse_document("<body><script>x()</script><style>p{}</style><p>keep</p></body>")

        assert remove_elements(soup, "script, style") == 2
        assert soup.get_text() == "keep"

    def test_normalize_whitespace(self):
        assert normalize_whitespace("  a \n\t b   c ") == "a b c"
        assert normalize_whitespace("") == ""

    def test_parse_empty_document(self):
        assert select(parse_document(None), "img") == []


@pytest.mark.unit
@pytest.mark.html
class TestElementFinder:
    """ElementFinder 单元测试类"""

    def setup_method(self):
        self.finder = ElementFinder()

    def test_find_image_elements_in_document_order(self):
        soup = parse_document(
            '<div class="image-placeholder" id="a"></div>'
            '<img id="b">'
            '<span data-placeholder id="c"></span>'
            '<div class="placeholder" data-placeholder id="d"></div>'
        )
        ids = [element["id"] for element in self.finder.find_image_elements(soup)]

        assert ids == ["a", "b", "c", "d"]

    def test_find_content_container_priority(self):
        soup = parse_document('<body><div class="content">c</div><article>a</article></body>')
        assert self.finder.find_content_container(soup).name == "article"

    def test_find_title_skips_empty_title(self):
        soup = parse_document("<title>  </title><h1>Heading</h1>")
        assert self.finder.find_title_element(soup).get_text() == "Heading"


@pytest.mark.unit
@pytest.mark.html
class TestImageTypeDetector:
    """ImageTypeDetector 单元测试类"""

    def setup_method(self):
        self.detector = ImageTypeDetector()

    @pytest.mark.parametrize("alt, class_name, parent_tag, expected", [
        ("Hero image", "", "div", "hero"),
        ("", "site-banner", "div", "hero"),
        ("settings icon", "", "div", "icon"),
        ("", "brand-logo", "div", "logo"),
        ("User profile", "", "div", "avatar"),
        ("", "product-card", "div", "product"),
        ("", "page-background", "div", "background"),
        ("", "video-thumbnail", "div", "thumbnail"),
        ("", "", "header", "hero"),
        ("", "", "footer", "icon"),
        ("", "", "article", "illustration"),
        ("", "", "div", "illustration"),
        ("", "", "", "illustration"),
    ])
    def test_detect_type(self, alt, class_name, parent_tag, expected):
        assert self.detector.detect_type(alt, class_name, parent_tag) == expected

    def test_keyword_priority_over_parent(self):
        # 关键词优先于父元素映射
        assert self.detector.detect_type("company logo", "", "footer") == "logo"

    def test_describe_context(self):
        assert self.detector.describe_context("aside", "") == "sidebar"
        assert self.detector.describe_context("div", "hero-block") == "hero area"
        assert self.detector.describe_context("div", "") == "content area"

    def test_describe_from_context(self):
        assert self.detector.describe_from_context("header", "Acme") == "Acme page header image"
        assert self.detector.describe_from_context("div", "Acme") == "Acme related image"
