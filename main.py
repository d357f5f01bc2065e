"""
Main entry point for the de-stress site backend.
Provides command-line interface and server bootstrap.
"""

import asyncio
import argparse
import sys
from typing import Optional

import uvicorn

from utils import main_logger, config_manager, initialize_logging
from api.app import app as api_app


class DestressServer:
    """API服务主类"""

    def __init__(self):
        self.config = config_manager

    async def start_api_server(self, host: Optional[str] = None, port: Optional[int] = None):
        """启动API服务器"""
        api_config = self.config.get_api_config()

        # 命令行参数优先于配置文件
        final_host = host if host is not None else api_config.host
        final_port = port if port is not None else api_config.port

        main_logger.info(f"API running at {final_host}:{final_port}")

        config = uvicorn.Config(
            api_app,
            host=final_host,
            port=final_port,
            log_level=api_config.log_level
        )
        server = uvicorn.Server(config)

        try:
            await server.serve()
        except (Exception, SystemExit) as e:
            # uvicorn 在绑定失败时会自行记录并调用 sys.exit(1)
            main_logger.error(f"[Main] API server error: {e!r}")
            raise


def create_parser() -> argparse.ArgumentParser:
    """创建命令行解析器"""
    parser = argparse.ArgumentParser(
        description="De-stress site backend: rotating quotes and analytics tracking",
    )
    parser.add_argument('--host', default=None, help='监听地址 (默认读取配置, 0.0.0.0)')
    parser.add_argument('--port', type=int, default=None, help='监听端口 (默认读取配置, 8080)')
    return parser


async def main(argv=None):
    """主函数"""
    parser = create_parser()
    args = parser.parse_args(argv)

    initialize_logging()

    server = DestressServer()
    try:
        await server.start_api_server(host=args.host, port=args.port)
    except KeyboardInterrupt:
        main_logger.info("[Main] Received keyboard interrupt")
    except (Exception, SystemExit):
        sys.exit(1)


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
