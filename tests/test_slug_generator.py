"""slug 与标识生成测试"""

import re

import pytest

from blog_cms.domain.value_objects import CategorySlug, Slug
from blog_cms.infrastructure.adapters import UniqueSlugGenerator, UuidIdGenerator
from blog_cms.shared.constants import SLUG_BASE_MAX_LENGTH, SLUG_MAX_LENGTH
from blog_cms.shared.utils.text import fallback_slug, slugify

SLUG_SHAPE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class TestSlugify:
    """slug 文本转换"""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("My Title", "my-title"),
            ("  Café & Crème!  ", "cafe-creme"),
            ("Python 3.12 released", "python-3-12-released"),
            ("--already--slugged--", "already-slugged"),
            ("中文", "zhong-wen"),
            ("!!!", ""),
        ],
    )
    def test_slugify(self, text: str, expected: str) -> None:
        """测试常见文本的转换结果"""
        assert slugify(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["我的第一篇博客文章", "技术文章", "Python 入门：第一课"])
    def test_chinese_transliterated(self, text: str) -> None:
        """测试中文音译为合法 slug"""
        slug = slugify(text)
        assert slug
        assert SLUG_SHAPE.match(slug)

    @pytest.mark.unit
    def test_max_length(self) -> None:
        """测试结果长度受限且不以连字符结尾"""
        slug = slugify("word " * 100)
        assert len(slug) <= SLUG_BASE_MAX_LENGTH
        assert not slug.endswith("-")


class TestFallbackSlug:
    """摘要 slug"""

    @pytest.mark.unit
    def test_deterministic(self) -> None:
        """测试同一文本得到同一摘要 slug"""
        assert fallback_slug("!!!") == fallback_slug("!!!")
        assert fallback_slug("!!!") != fallback_slug("???")

    @pytest.mark.unit
    def test_valid_for_articles_and_categories(self) -> None:
        """测试摘要 slug 同时满足文章与分类 slug 的格式"""
        slug = fallback_slug("¿¡")
        assert Slug(slug).value == slug
        assert CategorySlug(slug).value == slug


class TestUniqueSlugGenerator:
    """唯一 slug 生成"""

    @pytest.fixture
    def generator(self, articles, categories) -> UniqueSlugGenerator:
        return UniqueSlugGenerator(articles, categories)

    @pytest.mark.unit
    def test_free_slug(self, generator: UniqueSlugGenerator) -> None:
        """测试未占用的 slug 原样返回"""
        assert generator.generate_from_title("Hello World") == "hello-world"

    @pytest.mark.unit
    def test_suffixes(self, generator: UniqueSlugGenerator, articles, draft_article) -> None:
        """测试占用时追加序号"""
        articles.save(draft_article)
        assert generator.generate_from_title("Hello World") == "hello-world-1"

        articles.save(draft_article.evolve(slug=Slug("hello-world-1")))
        # 原文章换成了 -1，hello-world 又空出来了
        assert generator.generate_from_title("Hello World") == "hello-world"

    @pytest.mark.unit
    def test_category_suffixes(self, generator: UniqueSlugGenerator, categories, make_category) -> None:
        """测试分类 slug 追加序号"""
        categories.save(make_category("Tech", "tech"))
        categories.save(make_category("Tech 1", "tech-1"))
        assert generator.generate_from_name("Tech") == "tech-2"

    @pytest.mark.unit
    def test_long_base_truncated(self) -> None:
        """测试追加序号时截短 base"""
        base = "a" * SLUG_MAX_LENGTH
        candidate = UniqueSlugGenerator._unique(base, lambda slug: slug == base)

        assert candidate == "a" * (SLUG_MAX_LENGTH - 2) + "-1"
        assert len(candidate) == SLUG_MAX_LENGTH

    @pytest.mark.unit
    def test_chinese_title(self, generator: UniqueSlugGenerator) -> None:
        """测试中文标题生成非空 slug"""
        slug = generator.generate_from_title("我的第一篇博客文章")
        assert slug == slugify("我的第一篇博客文章")
        assert SLUG_SHAPE.match(slug)

    @pytest.mark.unit
    def test_symbols_use_fallback(self, generator: UniqueSlugGenerator) -> None:
        """测试无法音译的标题使用摘要 slug"""
        assert generator.slugify("!!!") == fallback_slug("!!!")
        assert generator.generate_from_title("!!!") == fallback_slug("!!!")
        assert generator.generate_from_name("!!!") == fallback_slug("!!!")


class TestUuidIdGenerator:
    """标识生成"""

    @pytest.mark.unit
    def test_ids_are_unique(self) -> None:
        """测试生成的标识互不相同"""
        generator = UuidIdGenerator()
        ids = {generator.next_article_id().value for _ in range(10)}
        assert len(ids) == 10
        assert generator.next_category_id() != generator.next_category_id()
