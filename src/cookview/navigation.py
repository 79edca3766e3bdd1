"""
Navigation state for recipe views.

Views select the active screen with this; the recipe model never reads it.
"""

from enum import Enum


class View(Enum):
    """Screen currently shown by a view shell."""

    RECIPE_LIST = "recipe_list"
    RECIPE_VIEW = "recipe_view"
    SETTINGS = "settings"
