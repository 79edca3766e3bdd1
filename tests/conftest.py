"""
Pytest configuration and fixtures for cookview tests.
"""

import pytest

from cookview.config import get_settings

_ENV_VARS = (
    "COOKVIEW_ENV",
    "COOKVIEW_API_ROOT",
    "COOKVIEW_ORIGIN",
    "LOG_LEVEL",
    "REQUEST_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from the caller's environment and the settings cache."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _component(name, qty="some", qty_val=None, unit=""):
    return {"name": name, "qty": qty, "qtyVal": qty_val, "unit": unit}


@pytest.fixture
def fries_payload():
    """Recipe payload as served by recipes/byName?name=sides/french_fries."""
    deep_fryer = _component("deep fryer")
    potatoes = _component("potatoes", "3", 3.0)
    water = _component("water", "2", 2.0, "cups")
    fry_timer = _component("", "7", 7.0, "mins")
    pink_salt = _component("pink salt")
    ketchup = _component("ketchup")
    mayonnaise = _component("mayonnaise", "equal parts")

    return {
        "name": "sides/french_fries",
        "metadata": {"tag": "source", "body": "Grandma's notebook"},
        "ingredients": [potatoes, water, pink_salt, ketchup, mayonnaise],
        "cookware": [deep_fryer],
        "timers": [fry_timer],
        "steps": [
            [
                {"tag": "text", "data": "Preheat "},
                {"tag": "cookware", "data": deep_fryer},
                {"tag": "text", "data": " to 190°C."},
            ],
            [
                {"tag": "text", "data": "Slice "},
                {"tag": "ingredient", "data": potatoes},
                {"tag": "text", "data": ' into 1/4" strips.'},
            ],
            [
                {"tag": "text", "data": "Optionally, blanch in boiling "},
                {"tag": "ingredient", "data": water},
                {"tag": "text", "data": "."},
            ],
            [
                {"tag": "text", "data": "Drop into deep fryer for "},
                {"tag": "timer", "data": fry_timer},
                {"tag": "text", "data": "."},
            ],
            [
                {"tag": "text", "data": "Remove from fryer and sprinkle "},
                {"tag": "ingredient", "data": pink_salt},
            ],
            [
                {"tag": "text", "data": "Enjoy with "},
                {"tag": "ingredient", "data": ketchup},
                {"tag": "text", "data": ", or mix in "},
                {"tag": "ingredient", "data": mayonnaise},
                {"tag": "text", "data": " for fancy sauce."},
            ],
        ],
    }


@pytest.fixture
def fries_recipe(fries_payload):
    """The fries payload decoded with its title derived from the storage name."""
    from cookview.recipe import decode_recipe

    return decode_recipe(fries_payload, name=fries_payload["name"])
