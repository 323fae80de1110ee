"""博客内容管理 - 主入口点

    python -m blog_cms <command> [args]
    blog-cms <command> [args]
"""

from .presentation.cli import run_cli


def main() -> None:
    """主入口函数"""
    run_cli()


if __name__ == "__main__":
    main()
