"""CLI 配置"""

import json
from dataclasses import dataclass, asdict
from pathlib import Path

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 10

# 状态文件（保存默认 URL 和调用方标识）
STATE_FILE = Path.home() / ".timetable_cli_state"


@dataclass
class CLIState:
    """CLI 状态"""
    base_url: str = DEFAULT_BASE_URL
    caller: str | None = None

    def save(self):
        """保存状态到文件"""
        STATE_FILE.write_text(json.dumps(asdict(self)))

    @classmethod
    def load(cls) -> "CLIState":
        """从文件加载状态，文件损坏时使用默认值"""
        if STATE_FILE.exists():
            try:
                return cls(**json.loads(STATE_FILE.read_text()))
            except (ValueError, TypeError):
                pass
        return cls()

    def clear(self):
        """恢复默认值"""
        self.base_url = DEFAULT_BASE_URL
        self.caller = None
        self.save()
