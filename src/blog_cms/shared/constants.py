"""全局常量"""

# 版本信息
VERSION = "1.0.0"
APP_NAME = "Blog CMS"
ENV_PREFIX = "BLOG_CMS_"

# 日志
LOG_FILE_NAME = "blog_cms.log"
LOG_FIELD_MAX_LENGTH = 80

# 存储
DEFAULT_DATA_DIR = ".blog_cms"
DEFAULT_DATA_FILE = "blog.json"

# 文章
TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 200
SLUG_MAX_LENGTH = 250
SLUG_BASE_MAX_LENGTH = 240
SLUG_FALLBACK_PREFIX = "slug"
EXCERPT_LENGTH = 200
REVIEW_REASON_MAX_LENGTH = 1000

# 编辑评论
COMMENT_MAX_LENGTH = 2000

# 作者
AUTHOR_NAME_MIN_LENGTH = 2
AUTHOR_NAME_MAX_LENGTH = 100
AUTHOR_EMAIL_MAX_LENGTH = 255
AUTHOR_BIO_MAX_LENGTH = 1000

# 分类
CATEGORY_NAME_MIN_LENGTH = 2
CATEGORY_NAME_MAX_LENGTH = 100
CATEGORY_SLUG_MIN_LENGTH = 3
DESCRIPTION_MAX_LENGTH = 1000
ORDER_MAX_VALUE = 999999
DEFAULT_TREE_MAX_DEPTH = 3

# 分页
DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100
ARTICLE_SORT_FIELDS = ("createdAt", "updatedAt", "publishedAt", "title")

# SEO 发布检查
SEO_MIN_TITLE_LENGTH = 10
SEO_MIN_CONTENT_LENGTH = 50

# 支持的界面语言
SUPPORTED_LOCALES = ("zh_CN", "en")
