import logging
import os
from datetime import datetime

import yaml

from bunpitsu.modules.analyzer.service.analyzer_service import build_analyzer_handle
from bunpitsu.modules.bunsetu.components.splitters import build_splitter

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yml")

DEFAULT_CONFIG = {
    "analyzer": "janome",
    "ginza_model": "ja_ginza",
    "splitter": "bunsetsu",
    "warm_up": True,
    "log_dir": "./logs",
    "log_level": "INFO",
}

ENV_OVERRIDES = {
    "BUNPITSU_ANALYZER": "analyzer",
    "BUNPITSU_SPLITTER": "splitter",
}


def load_config(path=None):
    path = path or os.environ.get("BUNPITSU_CONFIG", CONFIG_PATH)
    config = dict(DEFAULT_CONFIG)

    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        config.update(loaded)
    else:
        logger.warning(f"[Startup] Config file not found, using defaults: {path}")

    for env_name, key in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            config[key] = value

    return config


def setup_logging(config):
    logging.getLogger("bunpitsu").setLevel(config.get("log_level", "INFO"))

    if logging.getLogger().handlers:
        # ルートロガーは設定済み (二度目の起動やテスト実行時)
        logger.info("[Startup] Root logger already configured, keeping its handlers")
        return None

    log_dir = config.get("log_dir", "./logs")
    os.makedirs(log_dir, exist_ok=True)

    log_filename = os.path.join(log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")

    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_filename, encoding='utf-8'),
            logging.StreamHandler()
        ]
    )

    logger.info(f"[Startup] ログファイルを作成: {log_filename}")
    return log_filename


def setup_segmentation(config):
    analyzer = build_analyzer_handle(config)
    splitter = build_splitter(config.get("splitter", "bunsetsu"), analyzer)
    logger.info(f"[Startup] Splitter '{splitter.name}' with analyzer '{analyzer.name}'")
    return analyzer, splitter


def warm_up(analyzer):
    try:
        analyzer.get()
    except Exception as e:
        # 解析器は初回リクエストで再度初期化を試みる
        logger.error(f"[Startup] Failed to load analyzer '{analyzer.name}': {e}")
        return False
    return True
