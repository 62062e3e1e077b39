"""Configuration management with Pydantic models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class NoiseRules(BaseModel):
    """Static rule set used by the noise filter."""

    model_config = ConfigDict(frozen=True)

    structural_selectors: tuple[str, ...] = (
        "script",
        "style",
        "noscript",
        "svg",
        "iframe",
        "nav",
        "header",
        "footer",
        "aside",
        ".sidebar",
        ".navigation",
        ".menu",
        ".advertisement",
        ".ads",
        ".ad",
        ".banner",
        ".popup",
        ".modal",
        ".social-share",
        ".comments",
        # Ads
        '[class*="ad-"]',
        '[id*="ad-"]',
        '[class*="ads-"]',
        '[id*="ads-"]',
        ".sponsored",
        ".promotion",
        ".promo",
        # Navigation and menus
        '[role="navigation"]',
        '[role="menu"]',
        '[role="menubar"]',
        ".breadcrumb",
        ".breadcrumbs",
        ".nav",
        ".navbar",
        # Calls to action
        ".cta",
        ".call-to-action",
        ".subscribe",
        ".newsletter",
        ".signup",
        ".sign-up",
        ".download-app",
        # Comments and social
        ".comment-section",
        ".comment-list",
        ".discussion",
        ".social-buttons",
        ".share-buttons",
        ".social-media",
        # Related content
        ".related",
        ".related-posts",
        ".related-articles",
        ".recommended",
        ".recommendations",
        ".you-may-like",
        ".more-from",
        ".trending",
        # Author and date blocks
        ".author-bio",
        ".author-info",
        ".byline",
        ".published-date",
        ".last-updated",
        ".metadata",
        # Legal notices and form controls
        ".cookie-banner",
        ".cookie-notice",
        ".gdpr",
        ".disclaimer",
        ".legal-notice",
        "form",
        "button:not(article button)",
        "input",
        "select",
        "textarea",
    )
    ad_keywords: tuple[str, ...] = (
        "advertisement",
        "sponsored",
        "promo",
        "banner",
        "popup",
    )
    hidden_style_markers: tuple[str, ...] = (
        "display:none",
        "display: none",
        "visibility:hidden",
        "visibility: hidden",
    )
    link_spam_keywords: tuple[str, ...] = (
        "더 읽기", "read more", "もっと見る", "阅读更多",
        "구독", "subscribe", "購読", "订阅",
        "가입", "sign up", "サインアップ", "注册",
        "다운로드", "download", "ダウンロード", "下载",
        "광고", "advertisement", "広告", "广告",
    )
    # Share prompts, comment/view/like counters, bylines, tip prompts
    text_patterns: tuple[str, ...] = (
        r"공유하기|share this|シェア|分享",
        r"댓글\s*\d+|comments?\s*\d*|コメント\s*\d*|评论\s*\d*",
        r"조회수\s*\d+|views?\s*\d+|閲覧数\s*\d+|浏览量\s*\d+",
        r"좋아요\s*\d+|likes?\s*\d+|いいね\s*\d+|点赞\s*\d+",
        r"기자\s*:|\breporter\s*:|記者\s*:|记者\s*:",
        r"제보하기|send tip|情報提供|爆料",
    )
    image_alt_min_length: int = Field(default=3, ge=0)  # exclusive
    image_alt_max_length: int = Field(default=200, ge=1)  # exclusive
    image_alt_stopwords: tuple[str, ...] = ("logo", "icon", "banner")
    image_label: str = "이미지"


class ExtractionConfig(BaseModel):
    """Configuration for content extraction."""

    model_config = ConfigDict(frozen=True)

    min_content_length: int = Field(default=100, ge=0)
    max_content_length: int = Field(default=50000, ge=1)
    readiness_timeout_ms: int = Field(default=3000, ge=0, le=60000)
    readiness_poll_interval_ms: int = Field(default=500, ge=1, le=10000)
    readiness_selectors: tuple[str, ...] = (
        "article",
        "main",
        '[role="main"]',
        ".content",
        "#content",
    )
    content_selectors: tuple[str, ...] = (
        "article",
        "main",
        '[role="main"]',
        '[role="article"]',
        ".article",
        ".post",
        ".content",
        "#content",
        ".post-content",
        ".entry-content",
        ".article-content",
        ".blog-post",
    )
    shadow_min_length: int = Field(default=50, ge=0)
    section_separator: str = "\n\n---\n\n"
    noise: NoiseRules = Field(default_factory=NoiseRules)

    @classmethod
    def from_toml(cls, path: Path) -> "ExtractionConfig":
        """Load extraction settings from a TOML file.

        Accepts either a bare table of extraction settings or a full app
        config with an ``[extraction]`` section.
        """
        data = _load_toml(path)
        return cls.model_validate(data.get("extraction", data))


class FetcherConfig(BaseModel):
    """Configuration for page fetching."""

    use_js: bool = True
    timeout_ms: int = Field(default=30000, ge=1000, le=120000)
    user_agent: str = "PageExtract/0.1 (Article Extractor)"
    viewport_width: int = Field(default=1280, ge=320)
    viewport_height: int = Field(default=720, ge=240)


class AppConfig(BaseModel):
    """Main application configuration."""

    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    fetcher: FetcherConfig = Field(default_factory=FetcherConfig)
    verbose: bool = False

    @classmethod
    def from_toml(cls, path: Path) -> "AppConfig":
        """Load config from a TOML file."""
        return cls.model_validate(_load_toml(path))


def _load_toml(path: Path) -> dict:
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[import-not-found]
    with open(path, "rb") as f:
        return tomllib.load(f)
