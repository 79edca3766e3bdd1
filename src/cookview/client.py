"""
HTTP client for the recipe server API.

Endpoints (relative to the API root, e.g. http://localhost:6969/api/0):
    GET    recipes/names?count=0          All recipe storage names
    GET    recipes/byName?name=<name>     Parsed recipe as JSON
    GET    recipes/byName?name=&raw=true  Raw .cook source
    POST   recipes/parse                  Parse a .cook body without storing it
    DELETE recipes/byName?name=<name>     Delete a recipe
"""

import logging
from types import TracebackType

import httpx

from cookview.errors import InvalidPayloadError, RecipeApiError, RecipeNotFoundError
from cookview.recipe import Recipe, decode_recipe

logger = logging.getLogger(__name__)


class RecipeClient:
    """
    Synchronous client for one recipe server.

    The API root is passed in by the caller (see Settings.api_url) so the
    client carries no environment state of its own.
    """

    def __init__(
        self,
        api_root: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not api_root.startswith(("http://", "https://")):
            raise ValueError(f"API root must be an absolute http(s) URL, got '{api_root}'")

        self.api_root = api_root.rstrip("/")
        self._client = httpx.Client(
            base_url=self.api_root + "/",
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    def __enter__(self) -> "RecipeClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        logger.debug("%s %s/%s %s", method, self.api_root, path, kwargs.get("params") or "")
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise RecipeApiError(f"Could not reach recipe server at {self.api_root}: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise RecipeNotFoundError(
                response.text.strip() or "Recipe not found",
                status_code=response.status_code,
            )
        if response.is_error:
            logger.warning(f"{method} {path} returned {response.status_code}")
            raise RecipeApiError(
                f"{method} {path} returned {response.status_code}: {response.text.strip()}",
                status_code=response.status_code,
            )
        return response

    def list_recipe_names(self) -> list[str]:
        """Return the storage name of every recipe, e.g. "breakfast/eggs_benedict"."""
        response = self._request("GET", "recipes/names", params={"count": 0})
        try:
            names = response.json()
        except ValueError as e:
            raise InvalidPayloadError(f"Recipe name list is not valid JSON: {e}") from e

        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise InvalidPayloadError("Recipe name list must be a JSON array of strings")
        return names

    def get_recipe(self, name: str) -> Recipe:
        """Fetch and decode a recipe; its title is derived from the storage name."""
        response = self._request("GET", "recipes/byName", params={"name": name})
        return decode_recipe(response.content, name=name)

    def get_recipe_source(self, name: str) -> str:
        """Fetch the unparsed .cook source of a recipe."""
        response = self._request("GET", "recipes/byName", params={"name": name, "raw": "true"})
        return response.text

    def parse_recipe(self, text: str, name: str | None = None) -> Recipe:
        """Have the server parse cooklang text and decode the result."""
        response = self._request(
            "POST",
            "recipes/parse",
            content=text.encode("utf-8"),
            headers={"Content-Type": "text/plain; charset=utf-8"},
        )
        return decode_recipe(response.content, name=name)

    def delete_recipe(self, name: str) -> None:
        self._request("DELETE", "recipes/byName", params={"name": name})
        logger.info(f"Deleted recipe {name}")
