"termconfig Preview Server - 预览状态栏和配置"

import logging
from pathlib import Path

from fastapi import FastAPI, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from termconfig.adapters.base import HostAdapter
from termconfig.builder import TerminalConfig
from termconfig.events import UPDATE_STATUS
from termconfig.status.renderer import render_plain, render_svg, to_format_items

logger = logging.getLogger(__name__)


class PreviewServer:
    """状态栏预览服务器

    - GET /api/status: 当前状态栏（纯文本 + format items）
    - GET /api/config: host 配置字典
    - GET /status.svg: SVG 预览
    - WS  /ws: 每次 update-status 推送最新状态
    """

    def __init__(self, host: HostAdapter, terminal_config: TerminalConfig):
        self.app = FastAPI(title="termconfig")
        self.host = host
        self.terminal_config = terminal_config
        self.clients: list[WebSocket] = []

        templates_dir = Path(__file__).parent.parent / "templates"
        self.templates = Jinja2Templates(directory=str(templates_dir))

        self._setup_routes()

        # 注册更新回调
        host.events.on(UPDATE_STATUS, self._on_status_update)

    async def _on_status_update(self, text: str) -> None:
        await self.broadcast({"type": UPDATE_STATUS, "text": text})

    async def _instructions(self):
        pane, window = await self.host.snapshots()
        return self.host.compose(pane, window)

    def _setup_routes(self):
        @self.app.get("/", response_class=HTMLResponse)
        async def index(request: Request):
            return self.templates.TemplateResponse(request, "index.html")

        @self.app.get("/api/status")
        async def status():
            instructions = await self._instructions()
            return {
                "host": self.host.name,
                "text": render_plain(instructions),
                "items": to_format_items(instructions),
            }

        @self.app.get("/api/config")
        async def terminal_config():
            return self.terminal_config.to_host_dict()

        @self.app.get("/status.svg")
        async def status_svg():
            instructions = await self._instructions()
            return Response(content=render_svg(instructions), media_type="image/svg+xml")

        @self.app.websocket("/ws")
        async def websocket_endpoint(websocket: WebSocket):
            await websocket.accept()
            self.clients.append(websocket)
            try:
                if self.host.last_status is not None:
                    await websocket.send_json({"type": UPDATE_STATUS, "text": self.host.last_status})
                while True:
                    await websocket.receive_text()
            except WebSocketDisconnect:
                logger.debug("Websocket client disconnected")
            finally:
                if websocket in self.clients:
                    self.clients.remove(websocket)

    async def broadcast(self, data: dict):
        """广播消息给所有客户端"""
        for client in list(self.clients):
            try:
                await client.send_json(data)
            except Exception as e:
                logger.debug(f"Dropping websocket client: {e}")
                if client in self.clients:
                    self.clients.remove(client)
