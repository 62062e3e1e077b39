"""Tests for configuration models."""

import pydantic
import pytest

from page_extract.config import AppConfig, ExtractionConfig, NoiseRules


def test_defaults():
    config = ExtractionConfig()

    assert config.min_content_length == 100
    assert config.max_content_length == 50000
    assert config.readiness_timeout_ms == 3000
    assert config.readiness_poll_interval_ms == 500
    assert config.content_selectors[0] == "article"
    assert config.content_selectors[-1] == ".blog-post"
    assert "button:not(article button)" in config.noise.structural_selectors


def test_config_is_frozen():
    config = ExtractionConfig()

    with pytest.raises(pydantic.ValidationError):
        config.min_content_length = 5


def test_rejects_invalid_values():
    with pytest.raises(pydantic.ValidationError):
        ExtractionConfig(max_content_length=0)


def test_app_config_from_toml(tmp_path):
    path = tmp_path / "page-extract.toml"
    path.write_text(
        "verbose = true\n"
        "\n[extraction]\n"
        "min_content_length = 40\n"
        'content_selectors = ["#story", "article"]\n'
        "\n[extraction.noise]\n"
        'ad_keywords = ["promo"]\n'
        "\n[fetcher]\n"
        "use_js = false\n",
        encoding="utf-8",
    )

    config = AppConfig.from_toml(path)

    assert config.verbose is True
    assert config.fetcher.use_js is False
    assert config.extraction.min_content_length == 40
    assert config.extraction.content_selectors == ("#story", "article")
    assert config.extraction.noise.ad_keywords == ("promo",)
    assert config.extraction.noise.link_spam_keywords == NoiseRules().link_spam_keywords


def test_extraction_config_from_toml_section(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[extraction]\nmax_content_length = 2000\n", encoding="utf-8")

    assert ExtractionConfig.from_toml(path).max_content_length == 2000
