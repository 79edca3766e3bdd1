"""Recipe title derivation from storage names and file paths."""

from pathlib import PurePath


def strip_recipe_name(name: str) -> str:
    """
    Derive a display title from a recipe storage name.

    Keeps the last path segment and replaces the first underscore with a
    space. Only the first underscore is replaced:

        "breakfast/eggs_benedict" -> "eggs benedict"
        "multi_word_name" -> "multi word_name"
    """
    return name.rsplit("/", 1)[-1].replace("_", " ", 1)


def filepath_to_name(path: str | PurePath) -> str:
    """
    Derive a display title from a local file path.

    Drops the directory and extension, and turns every underscore and dash
    into a space: "recipes/pan-fried_tofu.json" -> "pan fried tofu".
    """
    stem = PurePath(path).stem
    return stem.replace("_", " ").replace("-", " ")
