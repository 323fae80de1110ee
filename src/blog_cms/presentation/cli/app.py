"""CLI主应用 - 基于Click和Rich"""

from __future__ import annotations

import json
import sys
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from ...application.dto import (
    ArticleListResponse,
    ArticleResponse,
    AuthorListResponse,
    AuthorResponse,
    CategoryListResponse,
    CategoryResponse,
    CategoryTreeResponse,
    DeletionResponse,
    EditorialCommentListResponse,
    EditorialCommentResponse,
    GatewayResponse,
)
from ...domain.value_objects import ArticleStatus
from ...infrastructure.config import get_container, get_settings
from ...shared.constants import ARTICLE_SORT_FIELDS, VERSION
from ...shared.exceptions import BlogCmsError
from ...shared.utils import setup_logger

console = Console()

STATUS_STYLES = {
    ArticleStatus.DRAFT.value: "dim",
    ArticleStatus.PENDING_REVIEW.value: "yellow",
    ArticleStatus.APPROVED.value: "cyan",
    ArticleStatus.REJECTED.value: "red",
    ArticleStatus.PUBLISHED.value: "green",
    ArticleStatus.ARCHIVED.value: "magenta",
}


def _fail(error: BlogCmsError) -> NoReturn:
    """输出错误并以状态码 1 退出"""
    console.print(f"[red]✗ {escape(error.user_message)}[/red] [dim]({error.category.label})[/dim]")
    for violation in error.details.get("violations", []):
        console.print(f"  • {escape(str(violation))}")
    sys.exit(1)


def _execute(name: str, data: dict[str, Any]) -> GatewayResponse:
    """调用网关；None 值不传入请求"""
    try:
        return get_container().execute(name, {k: v for k, v in data.items() if v is not None})
    except BlogCmsError as e:
        _fail(e)


def _output(response: GatewayResponse) -> None:
    """按 --json 选项输出 JSON 或表格/面板"""
    ctx = click.get_current_context()
    if ctx.find_root().obj.get("json"):
        click.echo(json.dumps(response.data(), ensure_ascii=False, indent=2))
        return

    if isinstance(response, ArticleResponse):
        _display_article(response)
    elif isinstance(response, ArticleListResponse):
        _display_article_list(response)
    elif isinstance(response, AuthorResponse):
        _display_author(response)
    elif isinstance(response, AuthorListResponse):
        _display_author_list(response)
    elif isinstance(response, CategoryResponse):
        _display_category(response)
    elif isinstance(response, CategoryListResponse):
        _display_category_list(response)
    elif isinstance(response, CategoryTreeResponse):
        _display_category_tree(response)
    elif isinstance(response, EditorialCommentResponse):
        _display_comment(response)
    elif isinstance(response, EditorialCommentListResponse):
        for item in response.items:
            _display_comment(item)
        if not response.items:
            console.print("[dim]暂无编辑评论[/dim]")
    elif isinstance(response, DeletionResponse):
        console.print(f"[green]✓ 已删除[/green] {response.id} ({response.deleted_at})")
    else:
        console.print(response.data())


def _page_limit(limit: int | None) -> int:
    return limit if limit is not None else get_settings().listing.default_page_limit


def _read_content(content: str | None, content_file: Any) -> str | None:
    if content_file is not None:
        return content_file.read()
    return content


@click.group()
@click.version_option(VERSION, prog_name="blog-cms")
@click.option("--debug", is_flag=True, help="启用调试模式")
@click.option("--json", "output_json", is_flag=True, help="以 JSON 格式输出结果")
@click.pass_context
def cli(ctx: click.Context, debug: bool, output_json: bool):
    """博客内容管理 - 命令行工具"""
    ctx.ensure_object(dict)
    ctx.obj["json"] = output_json
    try:
        settings = get_settings()
    except BlogCmsError as e:
        _fail(e)
    setup_logger(
        level="DEBUG" if debug or settings.debug else settings.log_level,
        log_to_file=settings.log_to_file,
        json_format=settings.log_json,
    )


# ============== 文章 ==============


@cli.group()
def article():
    """文章：创建、编辑、审核与发布"""


@article.command("create")
@click.option("--title", "-t", required=True, help="标题")
@click.option("--content", "-c", help="正文（HTML 或纯文本）")
@click.option("--content-file", type=click.File("r", encoding="utf-8"), help="从文件读取正文")
@click.option("--author-id", "-a", required=True, help="作者ID")
@click.option("--slug", help="slug（默认由标题生成）")
def article_create(title: str, content: str | None, content_file, author_id: str, slug: str | None):
    """
    创建草稿

    示例:
        blog-cms article create -t "Hello World" -c "<p>...</p>" -a <作者ID>
    """
    _output(
        _execute(
            "article.create",
            {
                "title": title,
                "content": _read_content(content, content_file),
                "author_id": author_id,
                "slug": slug,
            },
        )
    )


@article.command("update")
@click.argument("article_id")
@click.option("--title", "-t", required=True, help="标题")
@click.option("--content", "-c", help="正文")
@click.option("--content-file", type=click.File("r", encoding="utf-8"), help="从文件读取正文")
def article_update(article_id: str, title: str, content: str | None, content_file):
    """修改标题与正文（已发布的文章不能修改）"""
    _output(
        _execute(
            "article.update",
            {"article_id": article_id, "title": title, "content": _read_content(content, content_file)},
        )
    )


@article.command("autosave")
@click.argument("article_id")
@click.option("--title", "-t", help="标题")
@click.option("--content", "-c", help="正文")
@click.option("--content-file", type=click.File("r", encoding="utf-8"), help="从文件读取正文")
def article_autosave(article_id: str, title: str | None, content: str | None, content_file):
    """自动保存（只修改提供的字段）"""
    _output(
        _execute(
            "article.auto_save",
            {"article_id": article_id, "title": title, "content": _read_content(content, content_file)},
        )
    )


@article.command("submit")
@click.argument("article_id")
def article_submit(article_id: str):
    """提交审核"""
    _output(_execute("article.submit_for_review", {"article_id": article_id}))


@article.command("approve")
@click.argument("article_id")
@click.option("--reviewer-id", "-r", required=True, help="审核人")
@click.option("--reason", help="审核意见（可选）")
def article_approve(article_id: str, reviewer_id: str, reason: str | None):
    """审核通过"""
    _output(
        _execute(
            "article.approve",
            {"article_id": article_id, "reviewer_id": reviewer_id, "reason": reason},
        )
    )


@article.command("reject")
@click.argument("article_id")
@click.option("--reviewer-id", "-r", required=True, help="审核人")
@click.option("--reason", required=True, help="驳回理由")
def article_reject(article_id: str, reviewer_id: str, reason: str):
    """驳回"""
    _output(
        _execute(
            "article.reject",
            {"article_id": article_id, "reviewer_id": reviewer_id, "reason": reason},
        )
    )


@article.command("publish")
@click.argument("article_id")
@click.option("--at", "publish_at", help="发布时间（ISO-8601，默认当前时间）")
def article_publish(article_id: str, publish_at: str | None):
    """发布已审核通过的文章"""
    _output(_execute("article.publish", {"article_id": article_id, "publish_at": publish_at}))


@article.command("delete")
@click.argument("article_id")
@click.option("--by", "deleted_by", help="操作人")
@click.option("--yes", "-y", is_flag=True, help="不确认直接删除")
def article_delete(article_id: str, deleted_by: str | None, yes: bool):
    """删除文章（同时删除其编辑评论）"""
    if not yes and not click.confirm(f"确定删除文章 {article_id}?"):
        return
    _output(_execute("article.delete", {"article_id": article_id, "deleted_by": deleted_by}))


@article.command("show")
@click.argument("article_id")
def article_show(article_id: str):
    """查看文章"""
    _output(_execute("article.get", {"article_id": article_id}))


@article.command("list")
@click.option("--page", "-p", default=1, type=int, help="页码")
@click.option("--limit", "-l", type=int, help="每页数量（默认取自配置）")
@click.option(
    "--status",
    "-s",
    type=click.Choice([status.value for status in ArticleStatus]),
    help="按状态筛选",
)
@click.option("--author-id", "-a", help="按作者筛选")
@click.option("--search", "-q", help="标题或正文关键词")
@click.option("--sort-by", type=click.Choice(list(ARTICLE_SORT_FIELDS)), default="createdAt")
@click.option("--order", type=click.Choice(["ASC", "DESC"], case_sensitive=False), default="DESC")
def article_list(
    page: int,
    limit: int | None,
    status: str | None,
    author_id: str | None,
    search: str | None,
    sort_by: str,
    order: str,
):
    """分页列出文章"""
    _output(
        _execute(
            "article.list",
            {
                "page": page,
                "limit": _page_limit(limit),
                "status": status,
                "author_id": author_id,
                "search": search,
                "sort_by": sort_by,
                "order": order,
            },
        )
    )


@article.command("comment")
@click.argument("article_id")
@click.option("--reviewer-id", "-r", required=True, help="审核人")
@click.option("--comment", "-m", required=True, help="评论内容")
@click.option("--selected-text", help="针对的正文片段")
@click.option("--start", "position_start", type=int, help="片段起始位置")
@click.option("--end", "position_end", type=int, help="片段结束位置")
def article_comment(
    article_id: str,
    reviewer_id: str,
    comment: str,
    selected_text: str | None,
    position_start: int | None,
    position_end: int | None,
):
    """添加编辑评论"""
    _output(
        _execute(
            "article.add_editorial_comment",
            {
                "article_id": article_id,
                "reviewer_id": reviewer_id,
                "comment": comment,
                "selected_text": selected_text,
                "position_start": position_start,
                "position_end": position_end,
            },
        )
    )


@article.command("comments")
@click.argument("article_id")
def article_comments(article_id: str):
    """列出编辑评论"""
    _output(_execute("article.list_editorial_comments", {"article_id": article_id}))


# ============== 作者 ==============


@cli.group()
def author():
    """作者管理"""


@author.command("create")
@click.option("--name", "-n", required=True, help="姓名")
@click.option("--email", "-e", required=True, help="邮箱（唯一）")
@click.option("--bio", default="", help="简介")
def author_create(name: str, email: str, bio: str):
    """创建作者"""
    _output(_execute("author.create", {"name": name, "email": email, "bio": bio}))


@author.command("update")
@click.argument("author_id")
@click.option("--name", "-n", help="姓名")
@click.option("--email", "-e", help="邮箱")
@click.option("--bio", help="简介")
def author_update(author_id: str, name: str | None, email: str | None, bio: str | None):
    """修改作者信息（只修改提供的字段）"""
    _output(
        _execute("author.update", {"author_id": author_id, "name": name, "email": email, "bio": bio})
    )


@author.command("delete")
@click.argument("author_id")
@click.option("--yes", "-y", is_flag=True, help="不确认直接删除")
def author_delete(author_id: str, yes: bool):
    """删除作者（仍有文章时拒绝）"""
    if not yes and not click.confirm(f"确定删除作者 {author_id}?"):
        return
    _output(_execute("author.delete", {"author_id": author_id}))


@author.command("show")
@click.argument("author_id")
def author_show(author_id: str):
    """查看作者"""
    _output(_execute("author.get", {"author_id": author_id}))


@author.command("list")
@click.option("--page", "-p", default=1, type=int, help="页码")
@click.option("--limit", "-l", type=int, help="每页数量（默认取自配置）")
def author_list(page: int, limit: int | None):
    """分页列出作者"""
    _output(_execute("author.list", {"page": page, "limit": _page_limit(limit)}))


@author.command("articles")
@click.argument("author_id")
@click.option("--page", "-p", default=1, type=int, help="页码")
@click.option("--limit", "-l", type=int, help="每页数量（默认取自配置）")
def author_articles(author_id: str, page: int, limit: int | None):
    """列出作者的文章"""
    _output(
        _execute(
            "author.articles",
            {"author_id": author_id, "page": page, "limit": _page_limit(limit)},
        )
    )


# ============== 分类 ==============


@cli.group()
def category():
    """分类管理"""


@category.command("create")
@click.option("--name", "-n", required=True, help="名称")
@click.option("--slug", help="slug（默认由名称生成）")
@click.option("--description", "-d", help="描述")
@click.option("--parent-id", help="父分类ID")
@click.option("--order", "-o", default=0, type=int, help="排序值")
def category_create(
    name: str, slug: str | None, description: str | None, parent_id: str | None, order: int
):
    """创建分类"""
    _output(
        _execute(
            "category.create",
            {
                "name": name,
                "slug": slug,
                "description": description,
                "parent_id": parent_id,
                "order": order,
            },
        )
    )


@category.command("update")
@click.argument("category_id")
@click.option("--name", "-n", help="名称")
@click.option("--slug", help="slug")
@click.option("--description", "-d", help="描述")
@click.option("--parent-id", help="新的父分类ID")
@click.option("--root", "detach_parent", is_flag=True, help="移动为根分类")
@click.option("--order", "-o", type=int, help="排序值")
def category_update(
    category_id: str,
    name: str | None,
    slug: str | None,
    description: str | None,
    parent_id: str | None,
    detach_parent: bool,
    order: int | None,
):
    """修改分类（只修改提供的字段）"""
    _output(
        _execute(
            "category.update",
            {
                "category_id": category_id,
                "name": name,
                "slug": slug,
                "description": description,
                "parent_id": parent_id,
                "detach_parent": detach_parent,
                "order": order,
            },
        )
    )


@category.command("delete")
@click.argument("category_id")
@click.option("--yes", "-y", is_flag=True, help="不确认直接删除")
def category_delete(category_id: str, yes: bool):
    """删除分类（仍有子分类时拒绝）"""
    if not yes and not click.confirm(f"确定删除分类 {category_id}?"):
        return
    _output(_execute("category.delete", {"category_id": category_id}))


@category.command("show")
@click.argument("category_id")
def category_show(category_id: str):
    """查看分类"""
    _output(_execute("category.get", {"category_id": category_id}))


@category.command("list")
@click.option("--parent-id", help="只列出该分类的子分类")
@click.option("--roots", "roots_only", is_flag=True, help="只列出根分类")
def category_list(parent_id: str | None, roots_only: bool):
    """列出分类"""
    _output(_execute("category.list", {"parent_id": parent_id, "roots_only": roots_only}))


@category.command("tree")
@click.option("--root-id", help="从该分类开始（默认全部根分类）")
@click.option("--depth", "max_depth", type=int, help="最大深度")
def category_tree(root_id: str | None, max_depth: int | None):
    """以树形展示分类"""
    _output(_execute("category.tree", {"root_id": root_id, "max_depth": max_depth}))


# ============== 其他 ==============


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="以 JSON 格式输出")
def config(output_json: bool):
    """显示当前配置"""
    try:
        settings = get_settings()
    except BlogCmsError as e:
        _fail(e)

    data_file = settings.storage.resolve_data_file()
    config_data = {
        "调试模式": settings.debug,
        "日志级别": settings.log_level,
        "语言": settings.locale,
        "数据文件": str(data_file) if data_file else "内存",
        "发布前SEO检查": settings.editorial.seo_checks,
        "slug冲突自动加序号": settings.editorial.auto_suffix_slugs,
        "分类树默认深度": settings.editorial.category_tree_max_depth,
    }

    if output_json or click.get_current_context().find_root().obj.get("json"):
        click.echo(json.dumps(config_data, ensure_ascii=False, indent=2))
        return

    table = Table(title="当前配置")
    table.add_column("配置项", style="cyan")
    table.add_column("值", style="green")

    for key, value in config_data.items():
        table.add_row(key, str(value))

    console.print(table)


@cli.command()
def gateways():
    """列出已注册的网关"""
    try:
        names = sorted(get_container().gateways)
    except BlogCmsError as e:
        _fail(e)
    for name in names:
        console.print(f"  • {name}")


# ============== 展示 ==============


def _status(value: str) -> str:
    style = STATUS_STYLES.get(value, "white")
    return f"[{style}]{ArticleStatus(value).label}[/{style}]"


def _display_article(article: ArticleResponse) -> None:
    lines = [
        f"[bold]ID:[/bold] {article.id}",
        f"[bold]Slug:[/bold] {article.slug}",
        f"[bold]状态:[/bold] {_status(article.status)}",
        f"[bold]作者:[/bold] {article.author_id}",
        f"[bold]字数:[/bold] {article.word_count}",
        f"[bold]创建:[/bold] {article.created_at}",
        f"[bold]更新:[/bold] {article.updated_at}",
    ]
    if article.published_at:
        lines.append(f"[bold]发布:[/bold] {article.published_at}")
    if article.reviewer_id:
        lines.append(f"[bold]审核人:[/bold] {article.reviewer_id} ({article.reviewed_at})")
    if article.review_reason:
        lines.append(f"[bold]审核意见:[/bold] {article.review_reason}")

    console.print(Panel("\n".join(lines), title=article.title, border_style="blue"))
    if article.excerpt:
        console.print(Panel(article.excerpt, title="摘要", border_style="dim"))


def _display_article_list(result: ArticleListResponse) -> None:
    table = Table(title=f"文章（第 {result.page}/{max(result.pages, 1)} 页，共 {result.total} 篇）")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("标题", style="bold")
    table.add_column("状态")
    table.add_column("创建时间", style="cyan")

    for item in result.items:
        table.add_row(item.id, item.title, _status(item.status), item.created_at)

    console.print(table)


def _display_author(author: AuthorResponse) -> None:
    text = f"[bold]ID:[/bold] {author.id}\n[bold]邮箱:[/bold] {author.email}"
    if author.bio:
        text += f"\n[bold]简介:[/bold] {author.bio}"
    console.print(Panel(text, title=author.name, border_style="blue"))


def _display_author_list(result: AuthorListResponse) -> None:
    table = Table(title=f"作者（共 {result.total} 位）")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("姓名", style="bold")
    table.add_column("邮箱", style="cyan")

    for item in result.items:
        table.add_row(item.id, item.name, item.email)

    console.print(table)


def _display_category(category: CategoryResponse) -> None:
    text = f"[bold]ID:[/bold] {category.id}\n[bold]Slug:[/bold] {category.slug}\n[bold]排序:[/bold] {category.order}"
    if category.parent_id:
        text += f"\n[bold]父分类:[/bold] {category.parent_id}"
    if category.description:
        text += f"\n[bold]描述:[/bold] {category.description}"
    console.print(Panel(text, title=category.name, border_style="blue"))


def _display_category_list(result: CategoryListResponse) -> None:
    table = Table(title="分类")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("名称", style="bold")
    table.add_column("Slug", style="cyan")
    table.add_column("排序", justify="right")

    for item in result.items:
        table.add_row(item.id, item.name, item.slug, str(item.order))

    console.print(table)


def _display_category_tree(result: CategoryTreeResponse) -> None:
    tree = Tree(f"[bold]分类树[/bold]（最大深度 {result.max_depth}）")

    def add(branch: Tree, node: dict[str, Any]) -> None:
        child = branch.add(f"{node['name']} [dim]({node['slug']})[/dim]")
        for sub in node.get("children", []):
            add(child, sub)

    for node in result.nodes:
        add(tree, node)
    console.print(tree)


def _display_comment(comment: EditorialCommentResponse) -> None:
    text = comment.comment
    if comment.selected_text is not None:
        text = f"[dim]「{comment.selected_text}」({comment.position_start}-{comment.position_end})[/dim]\n{text}"
    console.print(Panel(text, title=f"{comment.reviewer_id} · {comment.created_at}", border_style="yellow"))


def run_cli():
    """运行CLI"""
    cli(obj={})


if __name__ == "__main__":
    run_cli()
