"""Keyword tables for the image-need scoring rule.

Keywords are matched as plain substrings (case-sensitive), so Chinese terms
match inside running text without segmentation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryRule:
    """A topic category: keywords, confidence weight and the phrase it suggests."""

    keywords: tuple[str, ...]
    weight: float
    phrase: str


# Order matters: on equal scores the later category's phrase wins.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    # Products and features
    CategoryRule(
        ("产品", "功能", "特性", "优势", "服务"),
        0.8,
        "modern product showcase, clean design",
    ),
    CategoryRule(
        ("界面", "UI", "设计", "页面", "布局"),
        0.9,
        "clean user interface design, modern web layout",
    ),
    CategoryRule(
        ("流程", "步骤", "方法", "过程"),
        0.7,
        "step-by-step process illustration, infographic style",
    ),
    # Technology and concepts
    CategoryRule(
        ("技术", "算法", "架构", "系统"),
        0.6,
        "technical diagram, system architecture visualization",
    ),
    CategoryRule(
        ("数据", "统计", "图表", "分析"),
        0.8,
        "data visualization, clean charts and graphs",
    ),
    CategoryRule(
        ("概念", "原理", "理论"),
        0.5,
        "conceptual illustration, educational diagram",
    ),
    # Business scenarios
    CategoryRule(
        ("团队", "合作", "协作", "沟通"),
        0.7,
        "professional team collaboration, modern office",
    ),
    CategoryRule(
        ("成功", "增长", "提升", "优化"),
        0.6,
        "success and growth visualization, upward trend",
    ),
    CategoryRule(
        ("解决方案", "解决", "问题"),
        0.7,
        "problem solving illustration, solution concept",
    ),
    # Industries
    CategoryRule(
        ("金融", "投资", "财务"),
        0.6,
        "financial growth, modern banking concept",
    ),
    CategoryRule(
        ("教育", "学习", "培训"),
        0.7,
        "education and learning environment, modern classroom",
    ),
    CategoryRule(
        ("医疗", "健康", "治疗"),
        0.6,
        "healthcare and medical concept, modern hospital",
    ),
    CategoryRule(
        ("科技", "创新", "未来"),
        0.8,
        "technology innovation, futuristic design",
    ),
)

FALLBACK_PHRASE = "professional illustration, clean modern design"

# Thresholds above which a unit is reported as needing an image
MARKUP_SCORE_THRESHOLD = 0.6
ARTICLE_SCORE_THRESHOLD = 0.7

# Minimum stripped text length before a unit is scored at all
MARKUP_MIN_TEXT_LENGTH = 20
ARTICLE_MIN_LINE_LENGTH = 50

CONTEXT_MAX_LENGTH = 200

# Substrings marking an <img> src as a stand-in rather than a real image
PLACEHOLDER_SRC_MARKERS: tuple[str, ...] = ("placeholder", "example.com", "via.placeholder")

# Elements whose text is scored for image need
CONTENT_SELECTORS: tuple[str, ...] = (
    "h1", "h2", "h3", "h4", "h5", "h6",
    "p", "div.content", "article", "section",
    ".hero", ".banner", ".feature", ".card",
)

ALT_PROMPT_SUFFIX = "professional illustration, high quality"
