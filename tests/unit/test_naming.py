"""
Unit tests for default table-name inference.
"""

import pytest

from sql_repository.exceptions import RepositoryError
from sql_repository.repositories.base import Repository
from sql_repository.repositories.naming import default_table_name, pluralize, snake_case


@pytest.mark.parametrize("class_name, expected", [
    ("UserRepository", "users"),
    ("BlogPostRepository", "blog_posts"),
    ("CategoryRepository", "categories"),
    ("AddressRepository", "addresses"),
    ("BoxRepository", "boxes"),
    ("BranchRepository", "branches"),
    ("KeyRepository", "keys"),
    ("PersonRepository", "people"),
    ("ChildRepository", "children"),
    ("SensorDataRepository", "sensor_data"),
    ("HTTPLogRepository", "http_logs"),
    ("Invoice", "invoices"),
])
def test_default_table_name(class_name, expected):
    assert default_table_name(class_name) == expected


def test_default_table_name_requires_a_base_name():
    with pytest.raises(RepositoryError):
        default_table_name("Repository")


def test_snake_case():
    assert snake_case("OrderLineItem") == "order_line_item"
    assert snake_case("order") == "order"


def test_pluralize_leaves_uncountables():
    assert pluralize("news") == "news"
    assert pluralize("equipment") == "equipment"


def test_repository_infers_table_from_subclass_name():
    """Test that subclasses get their table from the class name."""

    class OrderItemRepository(Repository):
        connection_name = "unused"

    assert OrderItemRepository().get_table_name() == "order_items"


def test_explicit_table_name_wins():
    class OrderItemRepository(Repository):
        table_name = "line_items"
        connection_name = "unused"

    assert OrderItemRepository().get_table_name() == "line_items"
    assert OrderItemRepository("archived_items").get_table_name() == "archived_items"


def test_bare_repository_needs_a_table_name():
    with pytest.raises(RepositoryError):
        Repository(connection_name="unused")

    assert Repository("users", "unused").get_table_name() == "users"


def test_plural_class_names_are_pluralized_again():
    """Test that the last word is always treated as singular."""
    assert default_table_name("UsersRepository") == "userses"

    class UsersRepository(Repository):
        table_name = "users"
        connection_name = "unused"

    assert UsersRepository().get_table_name() == "users"
