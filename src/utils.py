"""Shared qualified-name helpers."""

from __future__ import annotations

QUALNAME_SEPARATOR = "::"


def split_qualname(qualname: str) -> list[str]:
    """Split a qualified name into its path segments.

    Examples:
        >>> split_qualname("demo::io::Reader")
        ['demo', 'io', 'Reader']
        >>> split_qualname("demo")
        ['demo']
    """
    return qualname.split(QUALNAME_SEPARATOR)


def parent_qualname(qualname: str) -> str:
    """Return the qualified name with its last segment stripped.

    A single-segment name has no parent and yields the empty string.

    Examples:
        >>> parent_qualname("demo::Foo::x")
        'demo::Foo'
        >>> parent_qualname("demo")
        ''
    """
    head, sep, _ = qualname.rpartition(QUALNAME_SEPARATOR)
    return head if sep else ""


def qualname_to_path(qualname: str) -> str:
    """Convert a qualified name to a slash-separated URL path.

    Examples:
        >>> qualname_to_path("demo::io")
        'demo/io'
    """
    return qualname.replace(QUALNAME_SEPARATOR, "/")
