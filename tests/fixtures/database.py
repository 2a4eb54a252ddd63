"""
Schema, seed rows and repositories shared by the tests.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, MetaData, String, Table

from sql_repository.repositories.base import Repository

TEST_CONNECTION = "testing"

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(50), nullable=False),
    Column("email", String(100)),
    Column("age", Integer),
    Column("active", Boolean, default=True),
)

profiles = Table(
    "profiles",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("bio", String(200)),
)

posts = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("title", String(100)),
    Column("views", Integer, default=0),
)

USERS = [
    {"id": 1, "name": "Ada", "email": "ada@example.com", "age": 36, "active": True},
    {"id": 2, "name": "Grace", "email": "grace@example.com", "age": 45, "active": True},
    {"id": 3, "name": "Alan", "email": "alan@example.com", "age": 41, "active": False},
    {"id": 4, "name": "Linus", "email": None, "age": 28, "active": True},
    {"id": 5, "name": "Barbara", "email": "barbara@example.com", "age": 50, "active": False},
]

PROFILES = [
    {"id": 1, "user_id": 1, "bio": "Mathematician"},
    {"id": 2, "user_id": 2, "bio": "Admiral"},
    {"id": 3, "user_id": 3, "bio": "Cryptanalyst"},
]

POSTS = [
    {"id": 1, "user_id": 1, "title": "Notes", "views": 120},
    {"id": 2, "user_id": 1, "title": "Engine", "views": 80},
    {"id": 3, "user_id": 2, "title": "COBOL", "views": 200},
    {"id": 4, "user_id": 4, "title": "Kernel", "views": 500},
]


def seed(engine) -> None:
    """Create the test tables and insert the seed rows."""
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(users.insert(), USERS)
        conn.execute(profiles.insert(), PROFILES)
        conn.execute(posts.insert(), POSTS)


class UserRepository(Repository):
    connection_name = TEST_CONNECTION


class PostRepository(Repository):
    connection_name = TEST_CONNECTION


class ProfiledUserRepository(Repository):
    table_name = "users"
    connection_name = TEST_CONNECTION
    joins = [("profiles", "users.id", "profiles.user_id")]


class SidewaysJoinRepository(Repository):
    table_name = "users"
    connection_name = TEST_CONNECTION
    joins = [("profiles", "users.id", "profiles.user_id", "sideways")]


class CommentedUserRepository(Repository):
    table_name = "users"
    connection_name = TEST_CONNECTION
    joins = [("comments", "users.id", "comments.user_id")]
