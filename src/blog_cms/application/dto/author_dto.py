"""作者数据传输对象"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.entities import Author
from ...domain.value_objects import ArticleCriteria, AuthorBio, AuthorEmail, AuthorId, AuthorName, Page
from ...shared.constants import DEFAULT_PAGE_LIMIT
from ...shared.utils import to_iso
from .base import GatewayRequest, GatewayResponse, collect_violations


# ============== 请求 ==============


@dataclass(frozen=True)
class CreateAuthorRequest(GatewayRequest):
    REQUIRED = ("name", "email")

    name: str
    email: str
    bio: str = ""

    def validate(self) -> list[str]:
        return collect_violations(
            AuthorName.parse(self.name),
            AuthorEmail.parse(self.email),
            AuthorBio.parse(self.bio),
        )


@dataclass(frozen=True)
class UpdateAuthorRequest(GatewayRequest):
    """None 表示不修改"""

    REQUIRED = ("author_id",)

    author_id: str
    name: str | None = None
    email: str | None = None
    bio: str | None = None

    def validate(self) -> list[str]:
        return collect_violations(
            AuthorId.parse(self.author_id),
            AuthorName.parse(self.name) if self.name is not None else None,
            AuthorEmail.parse(self.email) if self.email is not None else None,
            AuthorBio.parse(self.bio) if self.bio is not None else None,
        )


@dataclass(frozen=True)
class AuthorIdRequest(GatewayRequest):
    REQUIRED = ("author_id",)

    author_id: str

    def validate(self) -> list[str]:
        return collect_violations(AuthorId.parse(self.author_id))


@dataclass(frozen=True)
class GetAuthorRequest(AuthorIdRequest):
    pass


@dataclass(frozen=True)
class DeleteAuthorRequest(AuthorIdRequest):
    pass


@dataclass(frozen=True)
class ListAuthorsRequest(GatewayRequest):
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT

    def validate(self) -> list[str]:
        return collect_violations(ArticleCriteria.parse(page=self.page, limit=self.limit))


@dataclass(frozen=True)
class GetAuthorArticlesRequest(GatewayRequest):
    REQUIRED = ("author_id",)

    author_id: str
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT

    def validate(self) -> list[str]:
        return collect_violations(
            AuthorId.parse(self.author_id),
            ArticleCriteria.parse(page=self.page, limit=self.limit),
        )


# ============== 响应 ==============


@dataclass(frozen=True)
class AuthorResponse(GatewayResponse):
    id: str
    name: str
    email: str
    bio: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, author: Author) -> AuthorResponse:
        return cls(
            id=author.id.value,
            name=author.name.value,
            email=author.email.value,
            bio=author.bio.value,
            created_at=to_iso(author.created_at),  # type: ignore[arg-type]
            updated_at=to_iso(author.updated_at),  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class AuthorListResponse(GatewayResponse):
    items: list[AuthorResponse] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = DEFAULT_PAGE_LIMIT
    pages: int = 0

    @classmethod
    def from_page(cls, page: Page[Author]) -> AuthorListResponse:
        return cls(
            items=[AuthorResponse.from_entity(author) for author in page.items],
            total=page.total,
            page=page.page,
            limit=page.limit,
            pages=page.pages,
        )
