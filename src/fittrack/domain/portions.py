"""Portion categories and their measurement units."""

from enum import Enum


class PortionCategory(Enum):
    """Food classification into a restricted set of sensible units."""

    PORTION_GRAM = "porsiyon_gram"
    PLATE_GRAM = "tabak_gram"
    COUNT_GRAM = "adet_gram"
    BOWL_GRAM = "kase_gram"
    CUP_GRAM = "bardak_gram"
    SPOON_GRAM = "kasik_gram"
    SLICE_GRAM = "dilim_gram"
    GRAM_ONLY = "sadece_gram"


UNIT_LABELS: dict[str, str] = {
    "porsiyon": "Porsiyon",
    "gram": "Gram (g)",
    "adet": "Adet",
    "dilim": "Dilim",
    "kase": "Kase",
    "bardak": "Bardak",
    "tabak": "Tabak",
    "kaşık": "Kaşık",
}

# First unit is the preselected one.
CATEGORY_UNITS: dict[PortionCategory, tuple[str, ...]] = {
    PortionCategory.PORTION_GRAM: ("porsiyon", "gram"),
    PortionCategory.PLATE_GRAM: ("tabak", "porsiyon", "gram"),
    PortionCategory.COUNT_GRAM: ("adet", "gram"),
    PortionCategory.BOWL_GRAM: ("kase", "bardak", "gram"),
    PortionCategory.CUP_GRAM: ("bardak", "gram"),
    PortionCategory.SPOON_GRAM: ("kaşık", "gram"),
    PortionCategory.SLICE_GRAM: ("dilim", "adet", "gram"),
    PortionCategory.GRAM_ONLY: ("gram",),
}

# Scanned in order; the first category with a substring hit wins.
CATEGORY_KEYWORDS: tuple[tuple[PortionCategory, tuple[str, ...]], ...] = (
    (
        PortionCategory.PORTION_GRAM,
        (
            "et ", "köfte", "kofte", "biftek", "steak", "kuşbaşı", "kusbasi",
            "pirzola", "ciğer", "ciger", "sucuk", "sote",
            "tavuk", "chicken", "nugget",
            "balık", "balik", "somon", "salmon", "ton balığı", "tuna", "karides",
            "shrimp", "hamsi", "levrek", "çupra", "midye",
            "kebap", "kebab", "döner", "doner", "iskender", "tantuni", "kokoreç",
            "kokorec", "beyti", "adana", "urfa", "dürüm", "durum",
            "musakka", "türlü", "turlu", "bamya", "enginar", "çılbır", "cilbir",
            "menemen", "omlet",
            "karnıyarık", "karniyarik", "imam bayıldı", "fasulye", "nohut",
            "dolma", "sarma",
            "çiğ köfte", "künefe", "kunefe", "mantı", "manti", "sahanda",
        ),
    ),
    (
        PortionCategory.PLATE_GRAM,
        (
            "pilav", "pirinç", "pirinc", "bulgur", "rice",
            "makarna", "spagetti", "pasta", "noodle", "erişte", "eriste",
            "salata", "salad", "sezar", "caesar", "çoban",
            "yulaf", "oat", "granola",
        ),
    ),
    (
        PortionCategory.COUNT_GRAM,
        (
            "muz", "banana", "elma", "apple", "portakal", "orange", "karpuz",
            "watermelon", "çilek", "cilek", "üzüm", "uzum", "avokado",
            "ceviz", "walnut", "badem", "almond", "fındık", "findik", "fıstık",
            "fistik", "kestane",
            "yumurta", "egg",
            "baklava", "tulumba", "kurabiye", "cookie", "lokum", "çikolata",
            "cikolata", "dondurma",
            "simit", "poğaça", "pogaca", "açma", "acma", "bazlama", "gözleme",
            "gozleme", "lahmacun",
            "hamburger", "burger", "tost", "toast", "zeytin",
            "cips", "chips", "kraker", "cracker",
            "sigara böreği",
        ),
    ),
    (
        PortionCategory.BOWL_GRAM,
        (
            "çorba", "corba", "soup", "mercimek", "ezogelin", "tarhana", "yayla",
            "işkembe", "iskembe",
            "sütlaç", "sutlac", "kazandibi", "aşure", "asure", "cacık", "cacik",
            "yoğurt", "yogurt",
        ),
    ),
    (
        PortionCategory.CUP_GRAM,
        (
            "ayran", "süt", "sut", "milk", "çay", "cay", "tea", "kahve", "coffee",
            "kola", "cola", "meyve suyu", "juice", "smoothie", "protein shake",
            "protein tozu", "whey", "şalgam",
        ),
    ),
    (
        PortionCategory.SPOON_GRAM,
        (
            "bal", "honey", "tereyağı", "butter", "reçel", "jam", "humus",
            "hummus", "ezme",
        ),
    ),
    (
        PortionCategory.SLICE_GRAM,
        (
            "pizza", "pide", "börek", "borek", "ekmek", "bread", "kek", "cake",
            "revani", "helva",
            "peynir", "cheese", "kaşar", "kasar", "güllaç", "gullac",
            "kabak tatlısı",
            "patates kızartması", "french fries",
        ),
    ),
)
