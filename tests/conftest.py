from pathlib import Path
import sys

# Make hyper_wire importable without installing the project
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from typing import Dict

import pytest

from hyper_wire.types import AssetInfo


@pytest.fixture
def asset_meta() -> Dict[str, AssetInfo]:
    return {
        "BTC": AssetInfo(asset_id=0, sz_decimals=5),
        "ETH": AssetInfo(asset_id=1, sz_decimals=4),
    }
