"""CLI 命令行入口模块"""


def provider_main():
    """懒加载 provider CLI 入口，避免 -m 执行时重复导入告警。"""
    from cli.provider import main

    return main()


__all__ = ["provider_main"]
