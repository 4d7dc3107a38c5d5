from __future__ import annotations

from pathlib import Path

import pytest

from autoroute_backend.routing import ScanError, scan_routes

SOURCE = "router = None\n"


def _segments(root: Path) -> list[tuple[str, ...]]:
    return [entry.relative_segments for entry in scan_routes(root)]


def test_scan_yields_entries_in_lexicographic_depth_first_order(write_tree) -> None:
    root = write_tree(
        {
            "user/user_router1.py": SOURCE,
            "user/index.py": SOURCE,
            "index.py": SOURCE,
            "product/order.py": SOURCE,
        }
    )

    assert _segments(root) == [
        ("index.py",),
        ("product",),
        ("product", "order.py"),
        ("user",),
        ("user", "index.py"),
        ("user", "user_router1.py"),
    ]


def test_scan_applies_naming_filter_at_every_depth(write_tree) -> None:
    root = write_tree(
        {
            "_draft.py": SOURCE,
            "@tmp.py": SOURCE,
            "user/_draft.py": SOURCE,
            "user/@tmp.py": SOURCE,
            "user/user.controller.py": SOURCE,
            "user/user.dto.py": SOURCE,
            "user/notes.md": "notes",
            "user/me.py": SOURCE,
            "_shared/_helpers.py": SOURCE,
            "__pycache__/index.cpython-312.pyc": "compiled",
        }
    )

    assert _segments(root) == [("user",), ("user", "me.py")]


def test_scan_walks_into_prefixed_directories(write_tree) -> None:
    root = write_tree(
        {
            "_shared/helpers.py": SOURCE,
            "_shared/_private.py": SOURCE,
            "@types/user.dto.py": SOURCE,
            "@types/nested/index.py": SOURCE,
        }
    )

    assert _segments(root) == [
        ("@types",),
        ("@types", "nested"),
        ("@types", "nested", "index.py"),
        ("_shared",),
        ("_shared", "helpers.py"),
    ]


def test_directories_without_included_descendants_are_skipped(write_tree) -> None:
    root = write_tree(
        {
            "empty/readme.md": "nothing to mount",
            "empty/deeper/user.service.py": SOURCE,
            "index.py": SOURCE,
        }
    )

    entries = list(scan_routes(root))

    assert [entry.relative_segments for entry in entries] == [("index.py",)]


def test_entries_carry_absolute_paths_and_kind(write_tree) -> None:
    root = write_tree({"user/index.py": SOURCE})

    directory, module = scan_routes(root)

    assert directory.is_directory
    assert directory.absolute_path == (root / "user").resolve()
    assert not module.is_directory
    assert module.absolute_path == (root / "user" / "index.py").resolve()
    assert module.absolute_path.is_absolute()


def test_each_scan_reflects_the_filesystem_at_invocation(write_tree) -> None:
    root = write_tree({"index.py": SOURCE})
    assert _segments(root) == [("index.py",)]

    (root / "health.py").write_text(SOURCE, encoding="utf-8")

    assert _segments(root) == [("health.py",), ("index.py",)]


def test_missing_root_raises_scan_error(tmp_path: Path) -> None:
    missing = tmp_path / "nope"

    with pytest.raises(ScanError) as exc_info:
        scan_routes(missing)

    assert exc_info.value.path == missing.resolve()


def test_unreadable_subdirectory_raises_scan_error(
    write_tree, monkeypatch: pytest.MonkeyPatch
) -> None:
    root = write_tree({"index.py": SOURCE, "locked/index.py": SOURCE})
    locked = (root / "locked").resolve()
    original_iterdir = Path.iterdir

    def guarded_iterdir(self: Path):
        if self == locked:
            raise PermissionError(13, "Permission denied", str(self))
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", guarded_iterdir)

    with pytest.raises(ScanError) as exc_info:
        list(scan_routes(root))

    assert exc_info.value.path == locked
    assert "locked" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, PermissionError)
