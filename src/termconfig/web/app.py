"""FastAPI 应用初始化"""

import asyncio
import logging

import uvicorn

from termconfig import config
from termconfig.adapters.base import HostAdapter
from termconfig.builder import TerminalConfig
from termconfig.runtime import StatusRuntime
from termconfig.web.server import PreviewServer

logger = logging.getLogger(__name__)


def create_app(host: HostAdapter, terminal_config: TerminalConfig) -> PreviewServer:
    """创建预览应用"""
    return PreviewServer(host, terminal_config)


async def start_server(
    host: HostAdapter,
    terminal_config: TerminalConfig,
    port: int | None = None,
) -> None:
    """启动预览服务器，同时运行状态栏刷新循环"""
    server = create_app(host, terminal_config)
    runtime = StatusRuntime(host)
    await runtime.start()

    uvicorn_config = uvicorn.Config(
        server.app,
        host=config.PREVIEW_HOST,
        port=port or config.PREVIEW_PORT,
        log_level="info",
    )
    uvicorn_server = uvicorn.Server(uvicorn_config)

    logger.info(f"termconfig preview at http://{config.PREVIEW_HOST}:{uvicorn_config.port}")

    try:
        await uvicorn_server.serve()
    finally:
        await runtime.stop()


def main(host: HostAdapter, terminal_config: TerminalConfig, port: int | None = None) -> None:
    """入口函数"""
    try:
        asyncio.run(start_server(host, terminal_config, port))
    except KeyboardInterrupt:
        print("\nServer stopped")
