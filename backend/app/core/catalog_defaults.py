"""Starter filament library, inserted once when the catalog is empty.

Each brand lists its material types, each type its colors. Color rows are
``(name, code, hex, options)``; options may set ``has_spool`` (default True),
``is_transparent``, ``is_metallic``, ``gradient_kind`` and ``additional``
(extra hex colors for gradients).

A type that lists a color only once gets its reel-less twin added by the
seeder; a type that lists both variants itself is taken as-is.
"""

SPOOL_SUFFIX = " (含料盘)"
NO_SPOOL_SUFFIX = " (无料盘)"

# Accent colors used as gradient stops
RED = "#FF3B30"
ORANGE = "#FF9500"
YELLOW = "#FFCC00"
GREEN = "#34C759"
BLUE = "#007AFF"
PURPLE = "#AF52DE"
BLACK = "#000000"
GOLD = "#FFD600"
SILVER = "#D9D9D9"
COPPER = "#CC8033"

METALLIC = {"is_metallic": True}
TRANSPARENT = {"is_transparent": True}


def _silk(kind: str, *stops: str, metallic: bool = False) -> dict:
    options = {"gradient_kind": kind, "additional": list(stops)}
    if metallic:
        options["is_metallic"] = True
    return options


DEFAULT_LIBRARY: list[dict] = [
    {
        "name": "拓竹 Bambu Lab",
        "material_types": [
            {
                "name": "PLA Lite",
                "properties": "Nozzle 190-230°C, bed 35-45°C",
                "colors": [
                    ("黑色", "16100", "#000000", {}),
                    ("黑色", "16100", "#000000", {"has_spool": False}),
                    ("天蓝色", "16600", "#87CEEB", {}),
                    ("天蓝色", "16600", "#87CEEB", {"has_spool": False}),
                    ("黄色", "16400", "#FFD60A", {}),
                    ("黄色", "16400", "#FFD60A", {"has_spool": False}),
                    ("白色", "16103", "#FFFFFF", {}),
                    ("白色", "16103", "#FFFFFF", {"has_spool": False}),
                    ("红色", "16200", "#E8251F", {}),
                    ("红色", "16200", "#E8251F", {"has_spool": False}),
                    ("灰色", "16101", "#8E8E93", {}),
                    ("灰色", "16101", "#8E8E93", {"has_spool": False}),
                    ("渐变红蓝", "16700", "#E8251F", _silk("horizontal", BLUE)),
                    ("彩虹色", "16800", RED, _silk("rainbow", RED, ORANGE, YELLOW, GREEN, BLUE, PURPLE)),
                ],
            },
        ],
    },
    {
        "name": "天瑞 Tinmorry",
        "material_types": [
            {
                "name": "PETG-ECO",
                "properties": "Nozzle 230-250°C, bed 70-80°C",
                "colors": [
                    ("亮丽黄", None, "#FFE135", {}),
                    ("咖啡色", None, "#996633", {}),
                    ("透明", None, "#E6E6E6", TRANSPARENT),
                    ("荧光绿", None, "#66FF66", {}),
                    ("荧光黄", None, "#DFFF4F", {}),
                    ("红色", None, "#E8251F", {}),
                    ("绿色", None, "#34C759", {}),
                    ("灰色", None, "#8E8E93", {}),
                    ("杏色", None, "#F7CE9B", {}),
                    ("黑色", None, "#000000", {}),
                    ("冷白", None, "#F5F7FA", {}),
                    ("奶白色", None, "#FFF8E7", {}),
                    ("米宝白", None, "#F3EFE0", {}),
                    ("肤色", None, "#F1C27D", {}),
                    ("淡灰色", None, "#C7C7CC", {}),
                    ("夜光绿", None, "#B6F2A4", {}),
                    ("橙色", None, "#FF9500", {}),
                    ("樱花粉", None, "#FFB7C5", {}),
                    ("粉色", None, "#FF8FB1", {}),
                    ("长春花蓝", None, "#6667AB", {}),
                    ("薄荷绿", None, "#98E5C4", {}),
                    ("卡特黄", None, "#FEDD00", {}),
                    ("天空蓝", None, "#0080FF", {}),
                    ("橄榄绿", None, "#708238", {}),
                    ("透明蓝", None, "#B3CCFF", TRANSPARENT),
                    ("透明绿", None, "#B3FFCC", TRANSPARENT),
                    ("透明红", None, "#FFB3B3", TRANSPARENT),
                    ("荧光玫红", None, "#FF2D87", {}),
                    ("荧光紫红", None, "#E936A7", {}),
                    ("克莱因蓝", None, "#002FA7", {}),
                    ("金属紫", None, "#7B4F9E", METALLIC),
                    ("金属香槟金", None, "#D4B483", METALLIC),
                    ("金属午夜绿", None, "#1F4D3A", METALLIC),
                    ("金属银", None, "#CCCCCC", METALLIC),
                    ("金属太空灰", None, "#4A4A4F", METALLIC),
                    ("金属铜", None, "#B3804D", METALLIC),
                    ("金属绿", None, "#3A8C5A", METALLIC),
                    ("金属珠光蓝", None, "#4F86C6", METALLIC),
                    ("金属玫瑰金", None, "#E0A899", METALLIC),
                    ("petg碳纤维黑色", None, "#1C1C1E", {}),
                    ("PETG碳纤维大理石灰", None, "#7D7D80", {}),
                    ("PETG碳纤维咖啡色", None, "#5C4033", {}),
                    ("高速Petg薰衣草紫", None, "#B57EDC", {}),
                    ("高速Petg桃红", None, "#FF6F91", {}),
                    ("高速Petg黑色", None, "#000000", {}),
                    ("高速Petg浅蓝", None, "#8FC7FF", {}),
                    ("高速Petg冷白", None, "#F5F7FA", {}),
                    ("Petg大理石花岗岩", None, "#8A8580", {}),
                    ("大理石魔幻棕", None, "#8B5A3C", {}),
                    ("大理石浅灰", None, "#BDBDBD", {}),
                    ("大理石白", None, "#EDEDED", {}),
                    ("petg大理石魔幻紫", None, "#8E5BA8", {}),
                    ("petg大理石魔幻蓝", None, "#4A6FA5", {}),
                    ("Petg大理石魔幻绿", None, "#4F9A6A", {}),
                    ("双色渐变黑红", None, BLACK, _silk("vertical", RED)),
                    ("三色渐变", None, "#E8251F", _silk("multiColor", PURPLE, BLUE)),
                ],
            },
        ],
    },
    {
        "name": "易生 eSUN",
        "material_types": [
            {
                "name": "PLA仿丝绸",
                "properties": "Nozzle 190-220°C, bed 45-60°C",
                "colors": [
                    ("双色丝绸 金银色", None, GOLD, _silk("horizontal", SILVER, metallic=True)),
                    ("双色丝绸 红蓝色", None, RED, _silk("horizontal", BLUE)),
                    ("双色丝绸 蓝绿色", None, BLUE, _silk("horizontal", GREEN)),
                    ("双色丝绸 红金色", None, RED, _silk("horizontal", GOLD, metallic=True)),
                    ("双色丝绸 黑金色", None, BLACK, _silk("horizontal", GOLD, metallic=True)),
                    ("双色丝绸 黑红色", None, BLACK, _silk("horizontal", RED)),
                    ("双色丝绸 黑绿色", None, BLACK, _silk("horizontal", GREEN)),
                    ("双色丝绸 紫金色", None, PURPLE, _silk("horizontal", GOLD, metallic=True)),
                    ("双色丝绸 红绿色", None, RED, _silk("horizontal", GREEN)),
                    ("双色丝绸 蓝银色", None, BLUE, _silk("horizontal", SILVER, metallic=True)),
                    ("双色丝绸 黑紫色", None, BLACK, _silk("horizontal", PURPLE)),
                    ("三色丝绸 金红绿", None, GOLD, _silk("multiColor", RED, GREEN, metallic=True)),
                    ("三色丝绸 铜紫绿", None, COPPER, _silk("multiColor", PURPLE, GREEN, metallic=True)),
                    ("三色丝绸 金绿黑", None, GOLD, _silk("multiColor", GREEN, BLACK, metallic=True)),
                    ("三色丝绸 蓝橙绿", None, BLUE, _silk("multiColor", ORANGE, GREEN)),
                    ("三色丝绸 金银铜", None, GOLD, _silk("multiColor", SILVER, COPPER, metallic=True)),
                    ("三色丝绸 红黄蓝", None, RED, _silk("multiColor", YELLOW, BLUE)),
                    ("三色丝绸 红金紫", None, RED, _silk("multiColor", GOLD, PURPLE, metallic=True)),
                    ("三色丝绸 黑红金", None, BLACK, _silk("multiColor", RED, GOLD, metallic=True)),
                    ("三色丝绸 红绿蓝", None, RED, _silk("multiColor", GREEN, BLUE)),
                    ("三色丝绸 蓝红紫", None, BLUE, _silk("multiColor", RED, PURPLE)),
                    ("三色丝绸 金绿紫", None, GOLD, _silk("multiColor", GREEN, PURPLE, metallic=True)),
                    ("三色丝绸 金蓝紫", None, GOLD, _silk("multiColor", BLUE, PURPLE, metallic=True)),
                ],
            },
        ],
    },
]

# Legacy closed set of material types, used to seed the type picker
DEFAULT_FILAMENT_TYPES: list[str] = [
    "PLA",
    "ABS",
    "PETG",
    "TPU",
    "PC",
    "ASA",
    "PVA",
    "HIPS",
    "尼龙",
    "其他",
]

# Demo inventory for first launch: (brand, material type, color name, weight g)
SAMPLE_INVENTORY: list[tuple[str, str, str, float]] = [
    ("Bambu Lab", "PLA", "黑色", 1000),
    ("天瑞 Tianrui", "PETG", "蓝色", 1000),
    ("易生 eSUN", "TPU", "透明", 500),
]
