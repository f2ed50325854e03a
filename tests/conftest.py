from typing import Any, Dict

import pytest

BASE_URL = "https://example.com/uicons"


def sample_index() -> Dict[str, Any]:
    return {
        "device": ["0.webp", "1.webp"],
        "gym": [
            "0.webp",
            "1.webp",
            "1_t4_ex.webp",
            "2.webp",
            "2_t3.webp",
            "2_t3_b.webp",
            "3_t6_ar.webp",
            "3_t6_p2.webp",
        ],
        "invasion": ["0.webp", "4.webp", "44.webp", "44_u.webp"],
        "misc": ["0.webp", "500.webp", "1500.webp"],
        "nest": ["0.webp", "12.webp"],
        "pokemon": [
            "0.webp",
            "1.webp",
            "4.webp",
            "4_f896.webp",
            "6_e1.webp",
            "6_e1_s.webp",
            "9_e1.webp",
            "25_c5_g2.webp",
            "25_g2.webp",
            "849_f2_b1.webp",
        ],
        "pokestop": ["0.webp", "0_i.webp", "0_q.webp", "501.webp", "504_i_ar.webp", "0_i8.webp", "0_p3.webp"],
        "raid": {"egg": ["0.webp", "1.webp", "12.webp", "12_h.webp", "5_ex.webp"]},
        "reward": {
            "item": ["0.webp", "1.webp", "1_a10.webp", "2.webp"],
            "stardust": ["0.webp", "500.webp", "1000.webp"],
            "experience": ["0.webp", "100.webp"],
            "mega_resource": ["0.webp", "3.webp", "6_a25.webp"],
            "xl_candy": ["0.webp", "98.webp"],
        },
        "spawnpoint": ["0.webp", "1.webp"],
        "station": ["0.webp", "1.webp"],
        "team": ["0.webp", "1.webp", "2.webp", "3.webp"],
        "type": ["0.webp", "1.webp", "7.webp", "9.webp"],
        "weather": ["0.webp", "1_n.webp", "2.webp", "3_d.webp", "3_l2_d.webp", "7_l1.webp"],
    }


@pytest.fixture()
def index_document() -> Dict[str, Any]:
    return sample_index()
