# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

import logging
import sys
from typing import Optional

from hkdf_core.config import HkdfConfig, load_config


def setup_logging(config: Optional[HkdfConfig] = None) -> None:
    cfg = config or load_config()
    logging.basicConfig(
        level=cfg.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
