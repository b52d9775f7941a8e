"""Conversion of GitLit wire payloads into typed models.

The server speaks snake_case (with a Mongo style ``_id``). camelCase spellings
are accepted too so that either form decodes to the same model.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from gitlit.exceptions import SerializationError
from gitlit.types.branches import Branch, BranchesResponse, CommitInfo
from gitlit.types.contents import BlobContent, ContentResponse, TreeContent, TreeEntry
from gitlit.types.repos import OkResponse, Repository

T = TypeVar("T")

_MISSING = object()


def _get(data: dict[str, Any], snake: str, camel: str, default: Any = _MISSING) -> Any:
    """Get value from dict, trying snake_case first then camelCase."""
    if snake in data:
        return data[snake]
    if camel in data:
        return data[camel]
    if default is _MISSING:
        raise KeyError(snake)
    return default


def _expect(value: Any, kind: type | tuple[type, ...], name: str) -> Any:
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise TypeError(f"field {name!r} has unexpected type {type(value).__name__}")
    return value


def _expect_object(data: Any) -> dict[str, Any]:
    return _expect(data, dict, "<root>")


def _expect_list(data: Any) -> list[Any]:
    return _expect(data, list, "<root>")


def _optional_str(value: Any, name: str) -> str | None:
    return _expect(value, str, name) if value is not None else None


def parse_repository(data: Any) -> Repository:
    data = _expect_object(data)
    return Repository(
        id=_expect(_get(data, "_id", "id"), str, "_id"),
        user=_expect(data["user"], str, "user"),
        name=_expect(data["name"], str, "name"),
        description=_optional_str(data.get("description"), "description") or "",
        is_private=_expect(_get(data, "is_private", "isPrivate"), bool, "is_private"),
        created_at=_expect(_get(data, "created_at", "createdAt"), str, "created_at"),
        updated_at=_expect(_get(data, "updated_at", "updatedAt"), str, "updated_at"),
        forked_from=_optional_str(_get(data, "forked_from", "forkedFrom", None), "forked_from"),
    )


def parse_repositories(data: Any) -> list[Repository]:
    return [parse_repository(item) for item in _expect_list(data)]


def parse_ok(data: Any) -> OkResponse:
    data = _expect_object(data)
    return OkResponse(ok=_expect(data["ok"], bool, "ok"))


def parse_branch(data: Any) -> Branch:
    data = _expect_object(data)
    return Branch(
        name=_expect(data["name"], str, "name"),
        oid=_expect(data["oid"], str, "oid"),
        is_head=_expect(_get(data, "is_head", "isHead"), bool, "is_head"),
        upstream=_optional_str(data.get("upstream"), "upstream"),
    )


def parse_branches(data: Any) -> BranchesResponse:
    data = _expect_object(data)
    branches = _expect(data["branches"], list, "branches")
    return BranchesResponse(branches=[parse_branch(item) for item in branches])


def parse_message(data: Any) -> str:
    data = _expect_object(data)
    return _expect(data["message"], str, "message")


def parse_commit(data: Any) -> CommitInfo:
    data = _expect_object(data)
    return CommitInfo(
        hash=_expect(data["hash"], str, "hash"),
        name=_expect(data["name"], str, "name"),
        email=_expect(data["email"], str, "email"),
        timestamp_secs=_expect(
            _get(data, "timestamp_secs", "timestampSecs"), int, "timestamp_secs"
        ),
        subject=_expect(data["subject"], str, "subject"),
    )


def parse_commits(data: Any) -> list[CommitInfo]:
    return [parse_commit(item) for item in _expect_list(data)]


def parse_tree_entry(data: Any) -> TreeEntry:
    data = _expect_object(data)
    size = data.get("size")
    return TreeEntry(
        mode=_expect(data["mode"], str, "mode"),
        kind=data["kind"],
        oid=_expect(data["oid"], str, "oid"),
        path=_expect(data["path"], str, "path"),
        size=_expect(size, int, "size") if size is not None else None,
    )


def parse_content(data: Any) -> ContentResponse:
    """Decode a tagged content payload into its tree or blob variant."""
    data = _expect_object(data)
    kind = data.get("kind")
    if kind == TreeContent.kind:
        entries = _expect(data["entries"], list, "entries")
        return TreeContent(entries=[parse_tree_entry(item) for item in entries])
    if kind == BlobContent.kind:
        return BlobContent(
            content_base64=_expect(
                _get(data, "content_base64", "contentBase64"), str, "content_base64"
            )
        )
    raise ValueError(f"unknown content kind: {kind!r}")


def parse_token(data: Any) -> str:
    data = _expect_object(data)
    return _expect(data["token"], str, "token")


def decode(parser: Callable[[Any], T], data: Any) -> T:
    """
    Run a parser over decoded JSON, mapping shape mismatches to SerializationError.

    Args:
        parser: One of the ``parse_*`` functions
        data: Decoded JSON value

    Returns:
        The parsed model

    Raises:
        SerializationError: If the payload does not have the expected shape
    """
    try:
        return parser(data)
    except KeyError as e:
        raise SerializationError(f"missing field {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e
