"""值对象测试

测试自校验值对象的构造、规范化与智能构造函数 parse()。
"""

from datetime import datetime, timedelta, timezone

import pytest

from blog_cms.domain.value_objects import (
    ArticleCriteria,
    ArticleId,
    ArticleStatus,
    AuthorBio,
    AuthorEmail,
    AuthorName,
    CategoryId,
    CategoryName,
    CategorySlug,
    Content,
    Description,
    EditorialComment,
    Order,
    Page,
    ReviewDecision,
    ReviewOutcome,
    Slug,
    SortOrder,
    Timestamps,
    Title,
)
from blog_cms.shared.exceptions import InvalidValueError


class TestTitle:
    """标题测试"""

    @pytest.mark.unit
    def test_strips_whitespace(self) -> None:
        """测试去除首尾空白"""
        assert Title("  Hello World  ").value == "Hello World"

    @pytest.mark.unit
    def test_length_bounds(self) -> None:
        """5-200 个字符"""
        assert Title("a" * 5).value == "a" * 5
        assert Title("a" * 200).value == "a" * 200

        with pytest.raises(InvalidValueError, match="至少需要 5"):
            Title("abcd")
        with pytest.raises(InvalidValueError, match="不能超过 200"):
            Title("a" * 201)

    @pytest.mark.unit
    def test_blank_rejected(self) -> None:
        """测试空白标题被拒绝"""
        with pytest.raises(InvalidValueError, match="不能为空"):
            Title("   ")

    @pytest.mark.unit
    def test_parse_returns_failure_instead_of_raising(self) -> None:
        """测试 parse 返回失败而不抛出"""
        result = Title.parse("abc")
        assert not result.ok
        assert "标题" in result.error

        result = Title.parse("Valid title")
        assert result.ok
        assert result.unwrap() == Title("Valid title")

    @pytest.mark.unit
    def test_unwrap_failure_raises(self) -> None:
        """测试解包失败结果时抛出"""
        with pytest.raises(InvalidValueError):
            Title.parse("").unwrap()


class TestContent:
    """正文测试"""

    @pytest.mark.unit
    def test_keeps_raw_value(self) -> None:
        """测试保留原始正文"""
        html = "<p>Hello <b>world</b></p>"
        assert Content(html).value == html

    @pytest.mark.unit
    def test_plain_text_strips_tags_and_scripts(self) -> None:
        """测试纯文本去除标签与脚本"""
        content = Content("<p>Hello <b>world</b></p><script>alert(1)</script><style>p{}</style>")
        assert content.plain_text == "Hello world"

    @pytest.mark.unit
    def test_word_count_mixes_chinese_and_english(self) -> None:
        """测试中英文混合字数"""
        content = Content("<p>人工智能 AI is here</p>")
        # 4 个汉字 + 3 个英文单词
        assert content.word_count == 7

    @pytest.mark.unit
    def test_excerpt_truncates(self) -> None:
        """测试摘要截断"""
        content = Content("word " * 100)
        excerpt = content.excerpt(20)
        assert len(excerpt) == 20
        assert excerpt.endswith("...")

    @pytest.mark.unit
    def test_blank_rejected(self) -> None:
        """测试空白正文被拒绝"""
        with pytest.raises(InvalidValueError):
            Content("  \n ")


class TestSlug:
    """slug 测试"""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["hello", "hello-world", "a1-b2-c3", "2024"])
    def test_valid(self, value: str) -> None:
        """测试有效的 slug"""
        assert Slug(value).value == value

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "Hello", "hello--world", "-hello", "hello-", "hello world", "héllo"])
    def test_invalid(self, value: str) -> None:
        """测试无效的 slug"""
        with pytest.raises(InvalidValueError):
            Slug(value)

    @pytest.mark.unit
    def test_max_length(self) -> None:
        """测试 slug 最大长度"""
        assert Slug("a" * 250)
        with pytest.raises(InvalidValueError, match="250"):
            Slug("a" * 251)


class TestIdentifiers:
    """标识测试"""

    @pytest.mark.unit
    def test_normalizes_uuid(self) -> None:
        """测试规范化 UUID"""
        value = "6F9619FF-8B86-D011-B42D-00C04FC964FF"
        assert ArticleId(value).value == value.lower()

    @pytest.mark.unit
    def test_rejects_non_uuid(self) -> None:
        """测试拒绝非 UUID"""
        with pytest.raises(InvalidValueError, match="UUID"):
            CategoryId("not-a-uuid")

    @pytest.mark.unit
    def test_rejects_empty(self) -> None:
        """测试拒绝空标识"""
        assert not ArticleId.parse("").ok


class TestArticleStatus:
    """文章状态测试"""

    @pytest.mark.unit
    def test_from_string(self) -> None:
        """测试从字符串解析状态"""
        assert ArticleStatus.from_string(" Pending_Review ") is ArticleStatus.PENDING_REVIEW

    @pytest.mark.unit
    def test_from_string_invalid(self) -> None:
        """测试无效的状态字符串"""
        with pytest.raises(InvalidValueError, match="可选"):
            ArticleStatus.from_string("deleted")

    @pytest.mark.unit
    def test_transition_predicates(self) -> None:
        """测试状态流转判断"""
        assert ArticleStatus.DRAFT.can_be_submitted_for_review()
        assert ArticleStatus.REJECTED.can_be_submitted_for_review()
        assert not ArticleStatus.PUBLISHED.can_be_submitted_for_review()
        assert ArticleStatus.PENDING_REVIEW.can_be_reviewed()
        assert not ArticleStatus.APPROVED.can_be_reviewed()
        assert ArticleStatus.APPROVED.can_be_published()
        assert not ArticleStatus.DRAFT.can_be_published()

    @pytest.mark.unit
    def test_label(self) -> None:
        """测试状态显示名称"""
        assert ArticleStatus.PUBLISHED.label == "已发布"


class TestTimestamps:
    """时间戳测试"""

    @pytest.mark.unit
    def test_updated_before_created_rejected(self) -> None:
        """测试更新时间早于创建时间被拒绝"""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        with pytest.raises(InvalidValueError):
            Timestamps(now, now - timedelta(seconds=1))

    @pytest.mark.unit
    def test_touched_never_moves_backwards(self) -> None:
        """测试 touched 不会回退时间"""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        stamps = Timestamps(now, now + timedelta(hours=1))

        assert stamps.touched(now).updated_at == now + timedelta(hours=1)
        assert stamps.touched(now + timedelta(hours=2)).updated_at == now + timedelta(hours=2)
        assert stamps.touched(now).created_at == now


class TestReviewDecision:
    """审核决定测试"""

    @pytest.mark.unit
    def test_reject_requires_reason(self) -> None:
        """测试驳回必须填写原因"""
        with pytest.raises(InvalidValueError, match="理由"):
            ReviewDecision.reject("   ")

    @pytest.mark.unit
    def test_approve_reason_optional(self) -> None:
        """测试通过时原因可选"""
        decision = ReviewDecision.approve()
        assert decision.is_approved
        assert decision.reason is None

    @pytest.mark.unit
    def test_blank_reason_normalized_to_none(self) -> None:
        """测试空白原因规范化为 None"""
        assert ReviewDecision.approve("  ").reason is None
        assert ReviewDecision.reject("  too short ").reason == "too short"

    @pytest.mark.unit
    def test_dict_conversion(self) -> None:
        """测试字典转换"""
        decision = ReviewDecision.from_dict({"decision": "rejected", "reason": "needs sources"})
        assert decision.outcome is ReviewOutcome.REJECT
        assert decision.to_dict() == {"decision": "rejected", "reason": "needs sources"}

    @pytest.mark.unit
    def test_from_dict_unknown_outcome(self) -> None:
        """测试未知的审核结果"""
        with pytest.raises(InvalidValueError):
            ReviewDecision.from_dict({"decision": "maybe"})


class TestEditorialComment:
    """编辑评论测试"""

    @pytest.mark.unit
    def test_plain_comment(self) -> None:
        """测试普通评论"""
        comment = EditorialComment("  Needs a better intro  ")
        assert comment.comment == "Needs a better intro"
        assert not comment.has_selection

    @pytest.mark.unit
    def test_selection(self) -> None:
        """测试带选区的评论"""
        comment = EditorialComment("Typo", "teh", 10, 13)
        assert comment.has_selection

    @pytest.mark.unit
    def test_partial_selection_rejected(self) -> None:
        """测试不完整的选区被拒绝"""
        with pytest.raises(InvalidValueError, match="同时提供"):
            EditorialComment("Typo", "teh", 10, None)

    @pytest.mark.unit
    def test_selection_positions(self) -> None:
        """测试选区位置"""
        with pytest.raises(InvalidValueError, match="负数"):
            EditorialComment("Typo", "teh", -1, 3)
        with pytest.raises(InvalidValueError, match="大于起始位置"):
            EditorialComment("Typo", "teh", 5, 5)


class TestAuthorValues:
    """作者值对象测试"""

    @pytest.mark.unit
    def test_name(self) -> None:
        """测试作者名称"""
        assert AuthorName(" O'Brien-Smith Jr. ").value == "O'Brien-Smith Jr."
        with pytest.raises(InvalidValueError):
            AuthorName("J")
        with pytest.raises(InvalidValueError, match="非法字符"):
            AuthorName("Jane <script>")

    @pytest.mark.unit
    def test_email_lowercased(self) -> None:
        """测试邮箱转小写"""
        email = AuthorEmail(" Jane@Example.COM ")
        assert email.value == "jane@example.com"
        assert email.domain == "example.com"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["jane", "jane@", "jane@example", "ja ne@example.com"])
    def test_email_invalid(self, value: str) -> None:
        """测试无效的邮箱"""
        with pytest.raises(InvalidValueError):
            AuthorEmail(value)

    @pytest.mark.unit
    def test_bio_may_be_empty(self) -> None:
        """测试简介可以为空"""
        assert AuthorBio().is_empty
        assert AuthorBio(None).value == ""  # type: ignore[arg-type]
        with pytest.raises(InvalidValueError):
            AuthorBio("x" * 1001)


class TestCategoryValues:
    """分类值对象测试"""

    @pytest.mark.unit
    def test_slug_min_length(self) -> None:
        """测试分类 slug 最小长度"""
        assert CategorySlug("tech").value == "tech"
        with pytest.raises(InvalidValueError):
            CategorySlug("ab")
        with pytest.raises(InvalidValueError, match="格式无效"):
            CategorySlug("Tech News")

    @pytest.mark.unit
    def test_name(self) -> None:
        """测试分类名称"""
        assert CategoryName("  Tech  ").value == "Tech"
        with pytest.raises(InvalidValueError):
            CategoryName("x")

    @pytest.mark.unit
    def test_blank_description_is_none(self) -> None:
        """测试空白描述规范化为 None"""
        assert Description("   ").value is None
        assert Description("   ").is_empty
        assert Description(" About tech ").value == "About tech"

    @pytest.mark.unit
    def test_order_bounds(self) -> None:
        """测试排序值范围"""
        assert int(Order(999999)) == 999999
        with pytest.raises(InvalidValueError):
            Order(-1)
        with pytest.raises(InvalidValueError):
            Order(1_000_000)
        with pytest.raises(InvalidValueError, match="整数"):
            Order(True)  # type: ignore[arg-type]


class TestArticleCriteria:
    """列表查询条件测试"""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """测试默认条件"""
        criteria = ArticleCriteria()
        assert criteria.page == 1
        assert criteria.limit == 20
        assert criteria.order is SortOrder.DESC
        assert criteria.offset == 0

    @pytest.mark.unit
    def test_order_normalized(self) -> None:
        """测试排序方向规范化"""
        assert ArticleCriteria(order="asc").order is SortOrder.ASC

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "kwargs",
        [{"page": 0}, {"limit": 0}, {"limit": 101}, {"sort_by": "views"}, {"order": "sideways"}],
    )
    def test_invalid(self, kwargs: dict) -> None:
        """测试无效的条件"""
        assert not ArticleCriteria.parse(**kwargs).ok

    @pytest.mark.unit
    def test_blank_search_ignored(self) -> None:
        """测试忽略空白搜索词"""
        assert ArticleCriteria(search="   ").search is None

    @pytest.mark.unit
    def test_page_arithmetic(self) -> None:
        """测试分页计算"""
        page = Page(items=[1, 2], total=5, page=1, limit=2)
        assert page.pages == 3
        assert page.has_next
        assert len(page) == 2
        assert Page().pages == 0
