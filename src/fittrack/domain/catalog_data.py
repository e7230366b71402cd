"""Built-in Turkish food catalog.

Values are per default portion (kcal, protein g, carbs g, fat g) as given in
each entry name. Aliases are unique across the catalog after normalization.
"""

from fittrack.domain.nutrition import FoodCatalogEntry, MacroProfile


def _food(
    keys: tuple[str, ...],
    name: str,
    macros: tuple[float, float, float, float],
    per100g: tuple[float, float, float, float] | None = None,
) -> FoodCatalogEntry:
    calories, protein, carbs, fat = macros
    return FoodCatalogEntry(
        keys=keys,
        name=name,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        per100g=MacroProfile(*per100g) if per100g else None,
    )


FOOD_CATALOG: tuple[FoodCatalogEntry, ...] = (
    # Et & tavuk
    _food(
        ("tavuk göğsü", "chicken breast"),
        "Haşlanmış Tavuk Göğsü (200g)",
        (330, 62, 0, 7),
        per100g=(165, 31, 0, 3.6),
    ),
    _food(
        ("tavuk but", "chicken thigh"),
        "Tavuk But (150g)",
        (285, 38, 0, 14),
        per100g=(190, 25, 0, 9.5),
    ),
    _food(("tavuk kanat", "chicken wing"), "Tavuk Kanat (100g)", (203, 18, 0, 14)),
    _food(("köfte", "meatball"), "Izgara Köfte (4 adet)", (340, 28, 5, 23)),
    _food(("et sote", "sote", "beef stew"), "Et Sote (1 porsiyon)", (350, 30, 10, 21)),
    _food(("döner", "kebab döner"), "Döner (1 porsiyon)", (450, 28, 35, 22)),
    _food(("adana kebap", "adana"), "Adana Kebap (1 porsiyon)", (400, 25, 5, 32)),
    _food(("urfa kebap", "urfa"), "Urfa Kebap (1 porsiyon)", (380, 24, 5, 30)),
    _food(("iskender", "iskender kebap"), "İskender Kebap", (650, 35, 40, 38)),
    _food(("lahmacun",), "Lahmacun (1 adet)", (210, 10, 25, 8)),
    _food(("pide", "kaşarlı pide"), "Kaşarlı Pide (1 dilim)", (280, 12, 30, 13)),
    _food(("kuşbaşı", "kuşbaşı et"), "Kuşbaşı Et (1 porsiyon)", (300, 32, 3, 18)),
    _food(
        ("biftek", "steak"),
        "Biftek (200g)",
        (370, 50, 0, 18),
        per100g=(185, 25, 0, 9),
    ),
    _food(("sucuk", "sucuklu yumurta"), "Sucuk (4 dilim)", (200, 10, 1, 17)),
    _food(
        ("balık", "levrek", "çupra", "hamsi", "fish"),
        "Izgara Balık (200g)",
        (220, 40, 0, 6),
        per100g=(110, 20, 0, 3),
    ),
    # Pilav & makarna
    _food(
        ("pilav", "pirinç pilavı", "rice"),
        "Pirinç Pilavı (1 porsiyon)",
        (210, 4, 44, 2),
    ),
    _food(
        ("bulgur pilavı", "bulgur"),
        "Bulgur Pilavı (1 porsiyon)",
        (185, 6, 38, 2),
    ),
    _food(("makarna", "spagetti", "pasta"), "Makarna (1 porsiyon)", (280, 10, 50, 5)),
    _food(("noodle", "erişte"), "Erişte (1 porsiyon)", (260, 8, 45, 5)),
    _food(("mantı",), "Mantı (1 porsiyon)", (350, 15, 42, 14)),
    # Çorbalar
    _food(
        ("mercimek çorbası", "mercimek", "lentil soup"),
        "Mercimek Çorbası (1 kase)",
        (150, 9, 22, 3),
    ),
    _food(("ezogelin çorbası", "ezogelin"), "Ezogelin Çorbası (1 kase)", (140, 7, 22, 3)),
    _food(("domates çorbası",), "Domates Çorbası (1 kase)", (120, 3, 18, 4)),
    _food(
        ("tavuk çorbası", "tavuk suyu", "chicken soup"),
        "Tavuk Çorbası (1 kase)",
        (130, 10, 12, 5),
    ),
    _food(("işkembe",), "İşkembe Çorbası (1 kase)", (180, 14, 8, 10)),
    _food(("yayla çorbası", "yayla"), "Yayla Çorbası (1 kase)", (130, 5, 14, 6)),
    _food(("tarhana", "tarhana çorbası"), "Tarhana Çorbası (1 kase)", (135, 5, 20, 4)),
    # Sebze yemekleri
    _food(
        ("kuru fasulye", "fasulye", "white beans"),
        "Kuru Fasulye (1 porsiyon)",
        (200, 12, 30, 4),
    ),
    _food(
        ("nohut", "chickpea", "nohut yemeği"),
        "Nohut Yemeği (1 porsiyon)",
        (210, 11, 32, 5),
    ),
    _food(("karnıyarık",), "Karnıyarık (2 adet)", (380, 15, 20, 28)),
    _food(("imam bayıldı", "imambayıldı"), "İmam Bayıldı (2 adet)", (280, 5, 18, 22)),
    _food(("dolma", "yaprak sarma", "sarma"), "Yaprak Sarma (6 adet)", (250, 6, 30, 12)),
    _food(("menemen",), "Menemen (1 porsiyon)", (220, 12, 10, 16)),
    _food(("patlıcan musakka", "musakka"), "Musakka (1 porsiyon)", (320, 14, 18, 22)),
    _food(("türlü",), "Türlü (1 porsiyon)", (180, 6, 20, 9)),
    _food(
        ("zeytinyağlı fasulye", "taze fasulye"),
        "Zeytinyağlı Fasulye (1 porsiyon)",
        (150, 4, 15, 9),
    ),
    _food(("bamya",), "Bamya Yemeği (1 porsiyon)", (170, 6, 14, 10)),
    # Börek & hamur işi
    _food(("börek", "su böreği"), "Su Böreği (1 dilim)", (300, 12, 28, 16)),
    _food(("sigara böreği",), "Sigara Böreği (3 adet)", (270, 10, 24, 15)),
    _food(("gözleme",), "Gözleme (1 adet)", (350, 12, 40, 16)),
    _food(("simit",), "Simit (1 adet)", (280, 9, 48, 6)),
    _food(("poğaça", "peynirli poğaça"), "Poğaça (1 adet)", (250, 6, 30, 12)),
    _food(("açma",), "Açma (1 adet)", (260, 5, 32, 13)),
    _food(
        ("ekmek", "bread"),
        "Ekmek (1 dilim)",
        (75, 3, 14, 1),
        per100g=(265, 9, 49, 3.2),
    ),
    _food(("pita", "pide ekmek", "bazlama"), "Bazlama (1 adet)", (220, 6, 40, 4)),
    _food(("pizza",), "Pizza (1 dilim)", (270, 11, 30, 12)),
    _food(("tost", "toast", "kaşarlı tost"), "Kaşarlı Tost", (310, 14, 28, 16)),
    _food(("hamburger", "burger"), "Hamburger", (500, 25, 40, 26)),
    # Kahvaltılık
    _food(("yumurta", "haşlanmış yumurta", "egg"), "Yumurta (1 adet)", (78, 6, 1, 5)),
    _food(("omlet", "omelette"), "Omlet (2 yumurta)", (220, 14, 2, 17)),
    _food(
        ("sahanda yumurta", "yumurta sahanda"),
        "Sahanda Yumurta (2 adet)",
        (240, 13, 2, 20),
    ),
    _food(
        ("peynir", "beyaz peynir", "cheese"),
        "Beyaz Peynir (50g)",
        (130, 9, 1, 10),
        per100g=(260, 18, 2, 20),
    ),
    _food(
        ("kaşar", "kaşar peynir"),
        "Kaşar Peyniri (30g)",
        (110, 7, 0, 9),
        per100g=(367, 23, 0, 30),
    ),
    _food(("zeytin", "olive"), "Zeytin (10 adet)", (60, 0, 2, 6)),
    _food(("bal", "honey"), "Bal (1 yemek kaşığı)", (65, 0, 17, 0)),
    _food(
        ("tereyağı", "butter"),
        "Tereyağı (10g)",
        (72, 0, 0, 8),
        per100g=(717, 0.9, 0.1, 81),
    ),
    _food(("reçel", "jam"), "Reçel (1 yemek kaşığı)", (50, 0, 13, 0)),
    # Tatlılar
    _food(("baklava",), "Baklava (1 dilim)", (250, 5, 30, 13)),
    _food(("künefe",), "Künefe (1 porsiyon)", (450, 10, 52, 23)),
    _food(("sütlaç", "rice pudding"), "Sütlaç (1 kase)", (250, 7, 40, 7)),
    _food(("kazandibi",), "Kazandibi (1 porsiyon)", (220, 6, 35, 6)),
    _food(("revani",), "Revani (1 dilim)", (280, 4, 45, 10)),
    _food(("tulumba",), "Tulumba (5 adet)", (300, 3, 40, 15)),
    _food(("dondurma", "ice cream"), "Dondurma (1 top)", (130, 2, 16, 7)),
    _food(
        ("çikolata", "chocolate"),
        "Çikolata (30g)",
        (160, 2, 17, 9),
        per100g=(535, 7.7, 57, 30),
    ),
    _food(("kek", "cake"), "Kek (1 dilim)", (280, 4, 38, 13)),
    _food(("kurabiye", "cookie", "bisküvi"), "Kurabiye (3 adet)", (210, 3, 28, 10)),
    _food(("lokum",), "Lokum (3 adet)", (150, 1, 35, 1)),
    _food(("helva", "tahin helvası"), "Tahin Helvası (50g)", (260, 5, 30, 14)),
    # İçecekler
    _food(("ayran",), "Ayran (1 bardak)", (60, 3, 4, 3)),
    _food(("süt", "milk"), "Süt (1 bardak, 200ml)", (120, 6, 10, 6)),
    _food(("çay", "tea"), "Çay (şekersiz)", (2, 0, 0, 0)),
    _food(("türk kahvesi", "kahve", "coffee"), "Türk Kahvesi (şekersiz)", (5, 0, 1, 0)),
    _food(("kola", "cola", "coca cola"), "Kola (330ml)", (140, 0, 35, 0)),
    _food(("meyve suyu", "portakal suyu", "juice"), "Meyve Suyu (200ml)", (90, 1, 22, 0)),
    _food(
        ("protein shake", "protein tozu", "whey"),
        "Protein Shake (1 scoop)",
        (120, 24, 3, 1),
    ),
    _food(("smoothie",), "Meyve Smoothie (300ml)", (180, 4, 38, 2)),
    # Meyve
    _food(("muz", "banana"), "Muz (1 adet)", (105, 1, 27, 0)),
    _food(("elma", "apple"), "Elma (1 adet)", (95, 1, 25, 0)),
    _food(("portakal", "orange"), "Portakal (1 adet)", (62, 1, 15, 0)),
    _food(("üzüm", "grape"), "Üzüm (1 kase)", (100, 1, 27, 0)),
    _food(("karpuz", "watermelon"), "Karpuz (1 dilim)", (85, 2, 21, 0)),
    _food(("çilek", "strawberry"), "Çilek (1 kase)", (50, 1, 12, 0)),
    # Kuruyemiş & atıştırmalık
    _food(
        ("ceviz", "walnut"),
        "Ceviz (30g)",
        (200, 5, 4, 19),
        per100g=(654, 15, 14, 65),
    ),
    _food(
        ("badem", "almond"),
        "Badem (30g)",
        (170, 6, 6, 15),
        per100g=(579, 21, 22, 50),
    ),
    _food(
        ("fındık", "hazelnut"),
        "Fındık (30g)",
        (180, 4, 5, 17),
        per100g=(628, 15, 17, 61),
    ),
    _food(
        ("fıstık", "yer fıstığı", "peanut"),
        "Yer Fıstığı (30g)",
        (170, 7, 5, 14),
        per100g=(567, 26, 16, 49),
    ),
    _food(("cips", "chips"), "Cips (1 paket, 50g)", (260, 3, 25, 17)),
    _food(("kraker", "cracker"), "Kraker (50g)", (220, 4, 32, 9)),
    # Salata
    _food(
        ("salata", "mevsim salata", "salad", "yeşil salata"),
        "Mevsim Salata",
        (80, 3, 10, 4),
    ),
    _food(("çoban salatası", "çoban salata"), "Çoban Salatası", (90, 2, 8, 6)),
    _food(("sezar salata", "caesar"), "Sezar Salata", (250, 12, 12, 18)),
    # Fast food
    _food(("dürüm", "wrap", "tavuk dürüm"), "Tavuk Dürüm", (420, 22, 38, 20)),
    _food(("nugget", "chicken nugget"), "Chicken Nugget (6 adet)", (280, 14, 18, 17)),
    _food(
        ("patates kızartması", "french fries", "patates"),
        "Patates Kızartması (orta)",
        (340, 4, 44, 17),
    ),
    # Ek yemekler
    _food(
        ("kestane", "chestnut"),
        "Kestane (100g)",
        (213, 3, 45, 2),
        per100g=(213, 3, 45, 2),
    ),
    _food(("çılbır",), "Çılbır (1 porsiyon)", (280, 14, 5, 23)),
    _food(
        ("enginar", "zeytinyağlı enginar"),
        "Zeytinyağlı Enginar (1 porsiyon)",
        (180, 5, 18, 10),
    ),
    _food(("midye", "midye dolma", "midye tava"), "Midye Dolma (10 adet)", (250, 12, 28, 10)),
    _food(("kokoreç",), "Kokoreç (yarım porsiyon)", (350, 20, 25, 18)),
    _food(("tantuni",), "Tantuni (1 dürüm)", (380, 22, 30, 18)),
    _food(("çiğ köfte",), "Çiğ Köfte (1 porsiyon)", (250, 8, 40, 6)),
    _food(("hamsili pilav",), "Hamsili Pilav (1 porsiyon)", (320, 18, 38, 10)),
    _food(("içli köfte",), "İçli Köfte (3 adet)", (360, 15, 35, 18)),
    _food(("beyti", "beyti kebap"), "Beyti Kebap (1 porsiyon)", (550, 32, 30, 34)),
    _food(("kuzu pirzola", "pirzola"), "Kuzu Pirzola (2 adet)", (380, 32, 0, 28)),
    _food(("ciğer", "arnavut ciğeri"), "Arnavut Ciğeri (1 porsiyon)", (300, 25, 15, 16)),
    _food(
        ("yoğurt",),
        "Yoğurt (1 kase, 200g)",
        (120, 6, 8, 7),
        per100g=(60, 3, 4, 3.5),
    ),
    _food(("cacık",), "Cacık (1 kase)", (80, 4, 6, 4)),
    _food(
        ("humus", "hummus"),
        "Humus (100g)",
        (170, 8, 14, 10),
        per100g=(170, 8, 14, 10),
    ),
    _food(("acılı ezme", "ezme"), "Acılı Ezme (100g)", (100, 2, 8, 7)),
    _food(
        ("kaşık helvası", "un helvası"),
        "Un Helvası (1 porsiyon)",
        (350, 5, 42, 18),
    ),
    _food(("aşure",), "Aşure (1 kase)", (240, 5, 48, 3)),
    _food(("güllaç",), "Güllaç (1 porsiyon)", (200, 6, 35, 4)),
    _food(("kabak tatlısı",), "Kabak Tatlısı (1 porsiyon)", (230, 2, 50, 3)),
    _food(
        ("yulaf", "yulaf ezmesi", "oat", "oatmeal"),
        "Yulaf Ezmesi (50g)",
        (190, 7, 34, 3),
        per100g=(380, 13, 68, 7),
    ),
    _food(("granola",), "Granola (50g)", (230, 5, 32, 10)),
    _food(("avokado", "avocado"), "Avokado (yarım)", (160, 2, 9, 15)),
    _food(
        ("ton balığı", "tuna"),
        "Ton Balığı (konserve, 100g)",
        (130, 28, 0, 2),
        per100g=(130, 28, 0, 2),
    ),
    _food(
        ("somon", "salmon"),
        "Izgara Somon (150g)",
        (310, 34, 0, 19),
        per100g=(206, 22, 0, 12.5),
    ),
    _food(
        ("karides", "shrimp"),
        "Karides (100g)",
        (100, 20, 1, 1),
        per100g=(100, 20, 1, 1),
    ),
)
