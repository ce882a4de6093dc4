import threading
import time

import pytest
from conftest import make_recipe

from vitaspoon_core.domains.recipes.catalog import LOCAL_RECIPES
from vitaspoon_core.domains.recipes.corpus import (
    CacheState,
    RecipeCorpus,
    convert_csv_row,
    default_loader,
    load_csv_recipes,
    merge_recipes,
)


def test_convert_csv_row_quick_recipe():
    recipe = convert_csv_row(
        {
            "id": "r1",
            "name": "Pan con tomate",
            "ingredients": "2 rebanadas pan, 1 unidad tomate, sal",
            "instructions": "Tostar el pan. Frotar el tomate",
            "minutes": "10",
        }
    )

    assert recipe.id == "r1"
    assert recipe.prep_time == "Rápido"
    assert recipe.difficulty_level == "Fácil"
    assert recipe.cuisine_type == "Internacional"
    assert recipe.diet_type == "Regular"
    assert recipe.source == "csv_database"
    assert [(i.name, i.quantity, i.unit) for i in recipe.ingredients] == [
        ("pan", "2", "rebanadas"),
        ("tomate", "1", "unidad"),
        ("sal", "", ""),
    ]
    assert recipe.instructions == ("Tostar el pan.", "Frotar el tomate.")


@pytest.mark.parametrize(
    "minutes, prep_time, difficulty",
    [("30", "Medio", "Medio"), ("60", "Largo", "Difícil"), ("", "Medio", "Medio")],
)
def test_convert_csv_row_time_buckets(minutes, prep_time, difficulty):
    recipe = convert_csv_row({"name": "X", "minutes": minutes})

    assert recipe.prep_time == prep_time
    assert recipe.difficulty_level == difficulty


def test_convert_csv_row_missing_fields_get_placeholders():
    recipe = convert_csv_row({"name": ""})

    assert recipe.title == "Receta sin nombre"
    assert recipe.ingredients[0].name == "Ingredientes no especificados"
    assert recipe.instructions == ("Instrucciones no disponibles.",)
    assert recipe.id


def test_load_csv_recipes_missing_file_returns_empty(tmp_path):
    assert load_csv_recipes(tmp_path / "nada.csv") == []


def test_load_csv_recipes_reads_rows(tmp_path):
    path = tmp_path / "recipes.csv"
    path.write_text(
        "id,name,ingredients,instructions,minutes,cuisine,diet\n"
        '1,Sopa,"agua, sal",Hervir el agua,20,Cena,Vegana\n'
        '2,Tarta,"harina, azúcar",Hornear,50,Postre,\n',
        encoding="utf-8",
    )

    recipes = load_csv_recipes(path)

    assert [r.title for r in recipes] == ["Sopa", "Tarta"]
    assert recipes[0].cuisine_type == "Cena"
    assert recipes[1].prep_time == "Largo"


def test_merge_deduplicates_by_title_external_wins():
    external = [make_recipe("Tortilla de Papas", ["papa"], cuisine_type="Desayuno")]
    curated = [make_recipe("tortilla de papas", ["huevo"]), make_recipe("Sopa", ["agua"])]

    merged = merge_recipes(external, curated)

    assert [r.title for r in merged] == ["Tortilla de Papas", "Sopa"]
    assert merged[0].cuisine_type == "Desayuno"


def test_default_loader_without_csv_is_the_catalog(tmp_path):
    recipes = default_loader(tmp_path / "nada.csv")()

    assert recipes == LOCAL_RECIPES


def test_corpus_loads_once_and_caches():
    calls = []

    def loader():
        calls.append(1)
        return [make_recipe("A", ["x"])]

    corpus = RecipeCorpus(loader)
    assert corpus.state is CacheState.EMPTY

    first = corpus.get_all_recipes()
    second = corpus.get_all_recipes()

    assert first is second
    assert isinstance(first, tuple)
    assert len(calls) == 1
    assert corpus.state is CacheState.READY


def test_concurrent_callers_share_the_inflight_load():
    release = threading.Event()
    calls = []

    def slow_loader():
        calls.append(1)
        release.wait(timeout=5)
        return [make_recipe("A", ["x"])]

    corpus = RecipeCorpus(slow_loader)
    results = []
    threads = [threading.Thread(target=lambda: results.append(corpus.get_all_recipes())) for _ in range(8)]
    for t in threads:
        t.start()

    deadline = time.time() + 5
    while corpus.state is not CacheState.LOADING and time.time() < deadline:
        time.sleep(0.01)
    release.set()
    for t in threads:
        t.join(timeout=5)

    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_failed_load_resets_and_retries():
    attempts = []

    def flaky_loader():
        attempts.append(1)
        if len(attempts) == 1:
            raise OSError("disco no disponible")
        return [make_recipe("A", ["x"])]

    corpus = RecipeCorpus(flaky_loader)

    with pytest.raises(OSError):
        corpus.get_all_recipes()
    assert corpus.state is CacheState.EMPTY

    assert len(corpus.get_all_recipes()) == 1
    assert len(attempts) == 2


def test_invalidate_forces_reload():
    calls = []

    def loader():
        calls.append(1)
        return []

    corpus = RecipeCorpus(loader)
    corpus.get_all_recipes()
    corpus.invalidate()
    corpus.get_all_recipes()

    assert len(calls) == 2
