"""Tests for placeholder detection in HTML, articles and documents."""

import pytest

from workflows.content_analysis import (
    FALLBACK_PHRASE,
    analyze_article,
    analyze_document,
    analyze_webpage,
    is_heading,
    score_text,
)

HERO_HTML = (
    '<div class="hero"><h1>Product</h1>'
    '<img src="https://example.com/placeholder.png"></div>'
)
FEATURES_HTML = (
    '<section id="features"><p>我们的界面设计注重页面布局，每一个细节都经过打磨</p></section>'
)

# 54 characters, four of the five interface keywords (score 0.72)
PADDING = "，这一段文字用来把整行的长度拉到五十个字符以上" * 2
UI_LINE = "界面设计页面布局" + PADDING
# All four data keywords (score 0.8)
DATA_LINE = "数据统计图表分析" + PADDING


class TestScoreText:
    def test_no_keywords_scores_zero_with_fallback(self):
        need = score_text("")
        assert need.score == 0.0
        assert need.phrase == FALLBACK_PHRASE

    def test_best_category_wins(self):
        need = score_text("我们的产品设计界面非常现代化，功能强大且易于使用，深受用户喜爱")
        # two of five interface keywords beat two of five product keywords
        assert need.score == pytest.approx(0.9 * 2 / 5)
        assert need.phrase == "clean user interface design, modern web layout"

    def test_full_category_match(self):
        need = score_text("数据 统计 图表 分析")
        assert need.score == pytest.approx(0.8)
        assert need.phrase == "data visualization, clean charts and graphs"

    def test_tie_goes_to_later_category(self):
        need = score_text("流程 团队")
        assert need.phrase == "professional team collaboration, modern office"

    def test_matching_is_case_sensitive(self):
        assert score_text("ui").phrase == FALLBACK_PHRASE
        assert score_text("UI").score > 0


class TestAnalyzeWebpage:
    def test_placeholder_image_detected(self):
        result = analyze_webpage(HERO_HTML)

        assert result.kind == "webpage"
        assert len(result.placeholders) == 1
        placeholder = result.placeholders[0]
        assert placeholder.id == "img-0"
        assert placeholder.position.selector == "div img:nth-child(1)"
        assert placeholder.context == "Product Product"
        assert placeholder.suggested_prompt == FALLBACK_PHRASE

    def test_alt_text_drives_suggestion(self):
        html = '<p>Intro text<img id="team-photo" src="" alt="team meeting"></p>'
        placeholder = analyze_webpage(html).placeholders[0]

        assert placeholder.position.selector == "#team-photo"
        assert placeholder.suggested_prompt == "team meeting, professional illustration, high quality"
        assert placeholder.context == "Intro text team meeting"
        assert placeholder.alt == "team meeting"

    def test_class_selector(self):
        html = '<div><img class="thumb wide" src="https://via.placeholder.com/300"></div>'
        placeholder = analyze_webpage(html).placeholders[0]
        assert placeholder.position.selector == "img.thumb"

    def test_real_images_skipped_but_indices_kept(self):
        html = (
            '<div><img src="https://cdn.site.org/real.jpg">'
            '<img src="https://placeholder.com/1.png"></div>'
        )
        placeholders = analyze_webpage(html).placeholders

        assert [p.id for p in placeholders] == ["img-1"]
        assert placeholders[0].position.selector == "div img:nth-child(2)"

    def test_missing_src_is_placeholder(self):
        placeholders = analyze_webpage('<div><img alt="logo"></div>').placeholders
        assert len(placeholders) == 1

    def test_lone_image_gets_context(self):
        placeholder = analyze_webpage('<img src="">').placeholders[0]
        assert placeholder.context

    def test_content_sections_scored(self):
        placeholders = analyze_webpage(FEATURES_HTML).placeholders

        assert [p.id for p in placeholders] == ["section-0", "section-1"]
        section, paragraph = placeholders
        assert section.position.selector == "#features"
        assert section.position.section == "section"
        assert paragraph.position.selector == "section p:nth-child(1)"
        assert paragraph.position.section == "p"
        assert paragraph.suggested_prompt == "clean user interface design, modern web layout"

    def test_short_text_ignored(self):
        assert analyze_webpage("<p>界面设计页面布局</p>").placeholders == []

    def test_long_context_truncated(self):
        html = "<p>界面设计页面布局" + "很" * 250 + "</p>"
        placeholder = analyze_webpage(html).placeholders[0]

        assert len(placeholder.context) == 203
        assert placeholder.context.endswith("...")

    def test_images_before_content(self):
        result = analyze_webpage(FEATURES_HTML + HERO_HTML)
        assert [p.id for p in result.placeholders] == ["img-0", "section-0", "section-1"]

    def test_deterministic(self):
        html = FEATURES_HTML + HERO_HTML
        assert analyze_webpage(html) == analyze_webpage(html)

    def test_empty_input(self):
        result = analyze_webpage("")
        assert result.placeholders == []
        assert len(result.suggestions) == 3
        assert "0" in result.suggestions[0]

    def test_wire_format_is_camel_case(self):
        wire = analyze_webpage(HERO_HTML).placeholders[0].to_wire()

        assert wire["suggestedPrompt"] == FALLBACK_PHRASE
        assert wire["position"] == {"selector": "div img:nth-child(1)"}
        assert "alt" not in wire
        assert "size" not in wire


class TestIsHeading:
    @pytest.mark.parametrize(
        "line",
        ["# Title", "### 小节", "第一章 开始", "第二节 方法", "背景：", "Chapter 1", "Section A", "1. Intro"],
    )
    def test_headings(self, line):
        assert is_heading(line)

    @pytest.mark.parametrize("line", ["普通文本", "#hashtag", "", "背景：内容继续"])
    def test_not_headings(self, line):
        assert not is_heading(line)


class TestAnalyzeArticle:
    def test_lines_and_sections(self):
        text = f"# 产品介绍\n{UI_LINE}\nshort\n## 数据分析\n{DATA_LINE}"
        result = analyze_article(text)

        assert result.kind == "article"
        assert [p.id for p in result.placeholders] == ["line-1", "line-4"]

        ui, data = result.placeholders
        assert ui.position.line == 2
        assert ui.position.section == "产品介绍"
        assert ui.context == f"产品介绍: {UI_LINE}"
        assert ui.suggested_prompt == "clean user interface design, modern web layout"

        assert data.position.line == 5
        assert data.position.section == "数据分析"
        assert data.suggested_prompt == "data visualization, clean charts and graphs"

    def test_no_heading_means_no_section(self):
        placeholder = analyze_article(UI_LINE).placeholders[0]

        assert placeholder.position.section is None
        assert placeholder.context == UI_LINE

    def test_lines_are_stripped(self):
        placeholder = analyze_article(f"   {UI_LINE}   ").placeholders[0]
        assert placeholder.context == UI_LINE

    def test_short_lines_skipped(self):
        assert analyze_article("界面设计页面布局").placeholders == []

    def test_low_score_lines_skipped(self):
        line = "这是一段很长但是完全没有任何关键词的普通文字" * 3
        assert analyze_article(line).placeholders == []

    def test_suggestions_mention_count(self):
        result = analyze_article(f"{UI_LINE}\n{DATA_LINE}")
        assert result.suggestions[0] == "Images are suggested at 2 locations in the article"

    def test_empty_article(self):
        result = analyze_article("")
        assert result.placeholders == []
        assert len(result.suggestions) == 3

    def test_document_uses_same_rules(self):
        text = f"第一章 概述\n{UI_LINE}"
        article = analyze_article(text)
        document = analyze_document(text)

        assert document.kind == "document"
        assert document.placeholders == article.placeholders
        assert document.placeholders[0].position.section == "第一章 概述"
