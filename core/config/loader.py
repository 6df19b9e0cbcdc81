import configparser
import logging
import os
from pathlib import Path

DEFAULTS = {
    "LOGGING": {
        "LEVEL": "INFO",
    },
    "CRAFTING": {
        "DEFAULT_NAMESPACE": "minecraft",
        "EMPTY_TOKENS": ".,-,_,air",
    },
}


class ConfigLoader:
    def __init__(self, config_path=None):
        # 项目根目录 (core/config/*)
        self.project_root = Path(__file__).resolve().parents[2]
        self.config_path = Path(config_path) if config_path else self.project_root / "conf" / "settings.ini"

        self.config = configparser.ConfigParser()
        self.config.read_dict(DEFAULTS)
        # 配置文件缺失时使用内置默认值
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

    def get(self, section, key, fallback=None):
        """获取配置值并自动展开用户路径 (~)"""
        val = self.config.get(section, key, fallback=fallback)
        if val and "~" in val:
            return os.path.expanduser(val)
        return val

    def get_list(self, section, key, fallback=None):
        val = self.get(section, key)
        if val is None:
            return list(fallback or [])
        return [p.strip() for p in val.split(",") if p.strip()]

    def log_level(self):
        name = str(self.get("LOGGING", "LEVEL") or "INFO").strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO


# 单例模式：直接导出的实例
crafting_config = ConfigLoader()

# === 测试代码 ===
if __name__ == "__main__":
    print(f"Project Root: {crafting_config.project_root}")
    print(f"Log level: {crafting_config.get('LOGGING', 'LEVEL')}")
    print(f"Empty tokens: {crafting_config.get_list('CRAFTING', 'EMPTY_TOKENS')}")
