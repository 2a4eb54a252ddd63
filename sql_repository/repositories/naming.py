"""
Default table names for repositories.

``UserRepository`` reads from ``users``, ``BlogPostRepository`` from
``blog_posts``: the ``Repository`` suffix is dropped, the rest is converted
to snake_case and its last word pluralized.

The last word is always treated as singular, so an already plural class
name is pluralized again (``UsersRepository`` reads from ``userses``).
Such repositories should set ``table_name`` explicitly.
"""

import re

from sql_repository.exceptions import RepositoryError

REPOSITORY_SUFFIX = "Repository"

_IRREGULAR = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
}

_UNCOUNTABLE = {"data", "information", "news", "series", "equipment"}


def snake_case(name: str) -> str:
    """Convert a CamelCase name to snake_case (``HTTPLog`` -> ``http_log``)."""
    name = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name).lower()


def pluralize(word: str) -> str:
    """Pluralize a single lowercase English word."""
    if word in _UNCOUNTABLE:
        return word
    if word in _IRREGULAR:
        return _IRREGULAR[word]
    if re.search(r"[^aeiou]y$", word):
        return word[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", word):
        return word + "es"
    return word + "s"


def default_table_name(class_name: str) -> str:
    """
    Infer the table name for a repository class.

    Args:
        class_name: Name of the repository class

    Returns:
        str: The inferred table name

    Raises:
        RepositoryError: If nothing is left once the suffix is removed
    """
    base = class_name
    if base.endswith(REPOSITORY_SUFFIX):
        base = base[:-len(REPOSITORY_SUFFIX)]

    if not base:
        raise RepositoryError(
            f"Cannot infer a table name from class '{class_name}'; set table_name explicitly"
        )

    words = snake_case(base).split("_")
    words[-1] = pluralize(words[-1])
    return "_".join(words)
