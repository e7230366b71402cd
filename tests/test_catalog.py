"""Tests for catalog lookup and scaling."""

from collections import Counter

from fittrack.domain.catalog_data import FOOD_CATALOG
from fittrack.domain.nutrition import FoodCatalogEntry
from fittrack.services.catalog import KnowledgeBase, format_amount, score_alias


def test_score_alias_tiers() -> None:
    assert score_alias("elma", "elma") == 100
    assert score_alias("tavuk gogsu haslama", "tavuk gogsu") == 80
    assert score_alias("tav", "tavuk") == 60
    assert score_alias("ekmek arasi", "arasi sicak") == 25


def test_every_alias_resolves_to_its_own_entry() -> None:
    knowledge_base = KnowledgeBase()

    for entry in FOOD_CATALOG:
        for key in entry.keys:
            match = knowledge_base.lookup(key)
            assert match is not None, key
            assert match.entry is entry, key
            assert match.score == 100


def test_aliases_are_unique_after_normalization() -> None:
    counts = Counter(KnowledgeBase().aliases())

    assert [alias for alias, count in counts.items() if count > 1] == []


def test_lookup_below_threshold_returns_none() -> None:
    entry = FoodCatalogEntry(
        keys=("arasi sicak",), name="Sıcak (1 adet)", calories=1, protein=0, carbs=0, fat=0
    )
    knowledge_base = KnowledgeBase(entries=(entry,))

    assert knowledge_base.lookup("ekmek arasi") is None
    assert knowledge_base.lookup("zxqv jkwp") is None


def test_lookup_prefers_first_entry_on_ties() -> None:
    first = FoodCatalogEntry(("pilav",), "A (1 tabak)", 1, 0, 0, 0)
    second = FoodCatalogEntry(("pilav",), "B (1 tabak)", 2, 0, 0, 0)

    match = KnowledgeBase(entries=(first, second)).lookup("pilav")

    assert match is not None
    assert match.entry is first


def test_resolve_scales_by_count() -> None:
    estimate = KnowledgeBase().resolve("3 tane elma")

    assert estimate is not None
    assert estimate.name == "3x Elma (1 adet)"
    assert estimate.calories == 285
    assert estimate.protein == 3
    assert estimate.carbs == 75
    assert estimate.fat == 0


def test_resolve_gram_amount_uses_per_100g_values() -> None:
    knowledge_base = KnowledgeBase()

    hundred = knowledge_base.resolve("100g tavuk göğsü")
    two_hundred = knowledge_base.resolve("200g tavuk göğsü")
    half_kilo = knowledge_base.resolve("0,5 kg tavuk göğsü")

    assert hundred is not None and two_hundred is not None and half_kilo is not None
    assert (hundred.calories, hundred.protein, hundred.fat) == (165, 31, 3.6)
    assert (two_hundred.calories, two_hundred.protein, two_hundred.fat) == (330, 62, 7.2)
    assert half_kilo.calories == 825
    assert two_hundred.name == "Haşlanmış Tavuk Göğsü (200g)"


def test_resolve_rounds_half_up() -> None:
    estimate = KnowledgeBase().resolve("150 gr tavuk göğsü")

    assert estimate is not None
    assert estimate.calories == 248
    assert estimate.protein == 46.5
    assert estimate.fat == 5.4


def test_resolve_grams_without_per_100g_uses_nominal_portion() -> None:
    entry = FoodCatalogEntry(("kumpir",), "Kumpir", 400, 10, 60, 14)
    estimate = KnowledgeBase(entries=(entry,)).resolve("100g kumpir")

    assert estimate is not None
    assert estimate.calories == 200
    assert estimate.carbs == 30
    assert estimate.name == "Kumpir (100g)"


def test_resolve_zero_grams_falls_back_to_default_portion() -> None:
    estimate = KnowledgeBase().resolve("0g elma")

    assert estimate is not None
    assert estimate.name == "Elma (1 adet)"
    assert estimate.calories == 95


def test_resolve_word_boundary_keeps_count() -> None:
    estimate = KnowledgeBase().resolve("2 gözleme")

    assert estimate is not None
    assert estimate.name == "2x Gözleme (1 adet)"
    assert estimate.calories == 700


def test_resolve_miss_returns_none() -> None:
    assert KnowledgeBase().resolve("zxqv jkwp") is None


def test_format_amount() -> None:
    assert format_amount(2.0) == "2"
    assert format_amount(1.5) == "1.5"
