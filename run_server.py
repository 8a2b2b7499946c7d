#!/usr/bin/env python3
"""
Timetable API 服务器启动脚本

使用方式:
    python run_server.py
    python run_server.py --port 9000 --db-url sqlite+aiosqlite:///data/dev.db
    python run_server.py --reload  # 开发模式
"""

import os
import sys
import argparse
from pathlib import Path

# 将 src 目录添加到 Python 路径（未 pip install 时直接运行）
SRC_DIR = Path(__file__).parent / "src"
sys.path.insert(0, str(SRC_DIR))

import uvicorn
from dotenv import load_dotenv

# .env 必须在导入 api.config 之前加载
load_dotenv()


def parse_args(argv=None) -> argparse.Namespace:
    from api.config import config

    parser = argparse.ArgumentParser(description="Timetable API Server")
    parser.add_argument("--host", type=str, default=config.HOST,
                        help=f"Host to bind to (default: {config.HOST})")
    parser.add_argument("--port", type=int, default=config.PORT,
                        help=f"Port to bind to (default: {config.PORT})")
    parser.add_argument("--db-url", type=str, default=None,
                        help="Override TIMETABLE_DATABASE_URL")
    parser.add_argument("--reload", action="store_true",
                        help="Enable auto-reload for development")
    parser.add_argument("--workers", type=int, default=1,
                        help="Number of worker processes (default: 1)")
    parser.add_argument("--log-level", type=str, default="info",
                        choices=["debug", "info", "warning", "error", "critical"],
                        help="Uvicorn log level (default: info)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    # 子进程（reload / workers）通过环境变量拿到覆盖后的配置
    if args.db_url:
        os.environ["TIMETABLE_DATABASE_URL"] = args.db_url
    if args.log_level == "debug":
        os.environ["TIMETABLE_DEBUG"] = "true"

    display_host = "localhost" if args.host == "0.0.0.0" else args.host
    docs_url = f"http://{display_host}:{args.port}/docs"
    db_url = os.environ.get("TIMETABLE_DATABASE_URL", "(config default)")

    print(f"""
╔══════════════════════════════════════════════════════════════╗
║                     Timetable API Server                     ║
╠══════════════════════════════════════════════════════════════╣
║  Host: {args.host:<53} ║
║  Port: {args.port:<53} ║
║  Workers: {args.workers:<50} ║
║  Reload: {str(args.reload):<51} ║
║  Database: {db_url[:49]:<49} ║
╠══════════════════════════════════════════════════════════════╣
║  Swagger UI: {docs_url:<47} ║
╚══════════════════════════════════════════════════════════════╝
""")

    uvicorn_kwargs = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }

    if args.reload:
        uvicorn_kwargs["reload"] = True
        uvicorn_kwargs["reload_dirs"] = [str(SRC_DIR)]
    else:
        uvicorn_kwargs["workers"] = args.workers

    uvicorn.run("api.main:app", **uvicorn_kwargs)


if __name__ == "__main__":
    main()
