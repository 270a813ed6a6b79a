"""Lookup tables for prompt synthesis.

All tables are read-only module constants shared by every call.
"""

from dataclasses import dataclass
from types import MappingProxyType

# Chinese term -> English term, scanned in this order
KEYWORD_MAP: tuple[tuple[str, str], ...] = (
    # General
    ("网站", "website"),
    ("网页", "webpage"),
    ("界面", "user interface"),
    ("设计", "design"),
    ("产品", "product"),
    ("服务", "service"),
    ("功能", "feature"),
    ("应用", "application"),
    ("系统", "system"),
    ("平台", "platform"),
    # Business
    ("商务", "business"),
    ("办公", "office"),
    ("会议", "meeting"),
    ("团队", "team"),
    ("合作", "collaboration"),
    ("沟通", "communication"),
    ("管理", "management"),
    ("销售", "sales"),
    ("营销", "marketing"),
    ("客户", "customer"),
    # Technology
    ("开发", "development"),
    ("编程", "programming"),
    ("代码", "code"),
    ("数据", "data"),
    ("分析", "analysis"),
    ("算法", "algorithm"),
    ("人工智能", "artificial intelligence"),
    ("机器学习", "machine learning"),
    ("云计算", "cloud computing"),
    ("区块链", "blockchain"),
    # Industries
    ("教育", "education"),
    ("医疗", "healthcare"),
    ("金融", "finance"),
    ("电商", "e-commerce"),
    ("游戏", "gaming"),
    ("娱乐", "entertainment"),
    ("旅游", "travel"),
    ("餐饮", "restaurant"),
    ("零售", "retail"),
    ("物流", "logistics"),
    # Visual style
    ("现代", "modern"),
    ("简约", "minimalist"),
    ("专业", "professional"),
    ("创新", "innovative"),
    ("时尚", "stylish"),
    ("优雅", "elegant"),
    ("友好", "friendly"),
    ("温暖", "warm"),
    ("清新", "fresh"),
    ("动态", "dynamic"),
)

MAX_TRANSLATED_TERMS = 3


@dataclass(frozen=True)
class TopicRule:
    """Interface topic recognised in untranslatable context."""

    name: str
    patterns: tuple[str, ...]
    phrase: str


# First rule with any matching pattern wins
TOPIC_RULES: tuple[TopicRule, ...] = (
    TopicRule(
        "auth",
        ("登录", "注册", "用户", "账户", "密码"),
        "user authentication interface, login screen, secure access",
    ),
    TopicRule(
        "commerce",
        ("购物", "商品", "价格", "订单", "支付"),
        "e-commerce interface, online shopping, product display",
    ),
    TopicRule(
        "search",
        ("搜索", "查找", "筛选", "结果"),
        "search interface, data filtering, results display",
    ),
    TopicRule(
        "analytics",
        ("图表", "数据", "统计", "报告", "分析"),
        "data visualization, charts and graphs, analytics dashboard",
    ),
    TopicRule(
        "messaging",
        ("消息", "聊天", "通知", "沟通"),
        "messaging interface, communication app, chat design",
    ),
    TopicRule(
        "settings",
        ("设置", "配置", "偏好", "选项"),
        "settings interface, configuration panel, user preferences",
    ),
    TopicRule(
        "documents",
        ("文档", "文章", "内容", "编辑"),
        "document interface, content management, text editor",
    ),
    TopicRule(
        "maps",
        ("地图", "位置", "导航", "路线"),
        "map interface, location services, navigation app",
    ),
    TopicRule(
        "media",
        ("音乐", "视频", "媒体", "播放"),
        "media player interface, entertainment app, multimedia",
    ),
    TopicRule(
        "health",
        ("健康", "医疗", "运动", "健身"),
        "health and fitness app, medical interface, wellness design",
    ),
)

GENERIC_INTERFACE_PHRASE = "modern user interface, clean design, professional layout"

DEFAULT_STYLE = "illustration"
STYLE_PHRASES = MappingProxyType({
    "realistic": "photorealistic, high quality, professional photography",
    "illustration": "digital illustration, vector art, clean design",
    "cartoon": "cartoon style, friendly, colorful illustration",
    "artistic": "artistic design, creative illustration, modern art style",
})

DEFAULT_QUALITY = "high"
QUALITY_PHRASES = MappingProxyType({
    "standard": "good quality",
    "high": "high quality, detailed",
    "ultra": "ultra high quality, 4K, highly detailed, professional",
})

CLOSING_PHRASE = "clean composition, good lighting"

MAX_PROMPT_LENGTH = 300
TRUNCATION_MARKER = "..."

# Share of ASCII letters/whitespace above which text counts as English
ENGLISH_RATIO_THRESHOLD = 0.7

# optimize_prompt guarantees
QUALITY_TERMS = ("quality", "detailed")
QUALITY_FILLER = "high quality"
COMPOSITION_TERMS = ("composition", "layout", "composed")
COMPOSITION_FILLER = "well composed"

IMAGE_TYPE_SUFFIXES = MappingProxyType({
    "hero": "hero image, banner style, wide format",
    "icon": "icon design, simple, clear, recognizable",
    "illustration": "detailed illustration, artistic style",
    "photo": "photorealistic, natural lighting, authentic",
})

SAMPLE_PROMPTS: tuple[str, ...] = (
    "modern web dashboard, clean interface design, professional layout, high quality",
    "user profile interface, minimalist design, user-friendly layout, good composition",
    "e-commerce product display, clean product showcase, modern design, well lit",
    "data visualization dashboard, charts and graphs, professional analytics, clean layout",
    "mobile app interface, modern UI design, user-friendly, high quality rendering",
)
