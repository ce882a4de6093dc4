import pytest
from conftest import make_recipe
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from vitaspoon_core.db import models  # noqa: F401
from vitaspoon_core.db.database import Base
from vitaspoon_core.db.helpers import (
    delete_saved_recipe,
    get_saved_recipe,
    list_saved_recipes,
    save_recipe,
)


@pytest.fixture
def session(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'test.sqlite'}", future=True)
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(bind=engine, future=True)
    with Session() as s:
        yield s
    engine.dispose()


def test_save_assigns_id_and_marks_saved(session):
    saved = save_recipe(session, make_recipe("Sopa de Calabaza", ["calabaza"], cuisine_type="Cena"))

    assert saved.id
    assert saved.is_saved is True

    loaded = get_saved_recipe(session, saved.id)
    assert loaded.title == "Sopa de Calabaza"
    assert loaded.is_saved is True
    assert loaded.ingredient_names() == ("calabaza",)
    assert loaded.instructions == ("Preparar.", "Servir.")


def test_saving_same_id_updates_row(session):
    saved = save_recipe(session, make_recipe("Sopa", ["agua"]))
    save_recipe(session, saved.evolve(title="Sopa Reforzada"))

    recipes = list_saved_recipes(session)

    assert [r.title for r in recipes] == ["Sopa Reforzada"]


def test_list_filters_by_cuisine(session):
    save_recipe(session, make_recipe("Tostadas", ["pan"], cuisine_type="Desayuno"))
    save_recipe(session, make_recipe("Guiso", ["papa"], cuisine_type="Cena"))

    assert {r.title for r in list_saved_recipes(session)} == {"Tostadas", "Guiso"}
    assert [r.title for r in list_saved_recipes(session, cuisine_type="Cena")] == ["Guiso"]


def test_delete(session):
    saved = save_recipe(session, make_recipe("Flan", ["huevo"], cuisine_type="Postre"))

    assert delete_saved_recipe(session, saved.id) is True
    assert get_saved_recipe(session, saved.id) is None
    assert delete_saved_recipe(session, saved.id) is False
