# tests/unit/test_parser.py
import pytest
from conventional_review.errors import MalformedDiff
from conventional_review.models.diff import ChangeKind
from conventional_review.models.review import Side
from conventional_review.review.parser import is_excluded, normalize_diff


SAMPLE_DIFF = """diff --git a/src/main.py b/src/main.py
index 3b18e51..a9c1f2d 100644
--- a/src/main.py
+++ b/src/main.py
@@ -11,3 +11,4 @@ def hello():
     print("hello")
-    return None
+    print("world")
+    return True
 
@@ -30,2 +31,3 @@ def goodbye():
     pass
+    # done
 
diff --git a/package.json b/package.json
index 1111111..2222222 100644
--- a/package.json
+++ b/package.json
@@ -1,3 +1,3 @@
 {
-  "version": "1.0.0"
+  "version": "1.0.1"
 }
diff --git a/old.py b/old.py
deleted file mode 100644
index 3333333..0000000
--- a/old.py
+++ /dev/null
@@ -1,2 +0,0 @@
-x = 1
-y = 2
diff --git a/dist/index.js b/dist/index.js
index 4444444..5555555 100644
--- a/dist/index.js
+++ b/dist/index.js
@@ -1 +1 @@
-var a = 1;
+var a = 2;
"""


@pytest.mark.unit
def test_normalize_keeps_all_files_in_order():
    files = normalize_diff(SAMPLE_DIFF)

    assert [f.path for f in files] == ["src/main.py", "package.json", "dist/index.js"]


@pytest.mark.unit
def test_normalize_excludes_deleted_file_without_patterns():
    files = normalize_diff(SAMPLE_DIFF, [])

    assert "old.py" not in [f.path for f in files]


@pytest.mark.unit
def test_normalize_applies_exclude_patterns():
    files = normalize_diff(SAMPLE_DIFF, ["dist/**", "**/*.json"])

    assert [f.path for f in files] == ["src/main.py"]


@pytest.mark.unit
def test_normalize_preserves_chunks_and_line_numbers():
    main = normalize_diff(SAMPLE_DIFF)[0]

    assert len(main.chunks) == 2
    first = main.chunks[0].changes
    assert [(c.kind, c.line_number) for c in first] == [
        (ChangeKind.CONTEXT, 11),
        (ChangeKind.DELETION, 12),
        (ChangeKind.ADDITION, 12),
        (ChangeKind.ADDITION, 13),
        (ChangeKind.CONTEXT, 14),
    ]
    assert first[2].content == '    print("world")'
    assert main.chunks[1].changes[1].line_number == 32


@pytest.mark.unit
def test_change_side_follows_kind():
    main = normalize_diff(SAMPLE_DIFF)[0]

    assert main.has_line(12, Side.LEFT)
    assert main.has_line(13, Side.RIGHT)
    assert not main.has_line(13, Side.LEFT)
    assert not main.has_line(99, Side.RIGHT)


@pytest.mark.unit
def test_normalize_new_file():
    diff = """--- /dev/null
+++ b/new_file.py
@@ -0,0 +1,2 @@
+def new_func():
+    pass
"""
    files = normalize_diff(diff)

    assert len(files) == 1
    assert files[0].path == "new_file.py"
    assert [c.line_number for c in files[0].changes] == [1, 2]


@pytest.mark.unit
def test_normalize_ignores_no_newline_marker():
    diff = """--- a/a.txt
+++ b/a.txt
@@ -1 +1 @@
-old
+new
\\ No newline at end of file
"""
    files = normalize_diff(diff)

    assert [c.content for c in files[0].changes] == ["old", "new"]


@pytest.mark.unit
def test_normalize_blank_diff():
    assert normalize_diff("") == []
    assert normalize_diff("\n  \n") == []


@pytest.mark.unit
def test_normalize_rejects_text_without_files():
    with pytest.raises(MalformedDiff):
        normalize_diff("this is not a diff at all\n")


@pytest.mark.unit
def test_normalize_rejects_truncated_hunk():
    diff = """--- a/a.txt
+++ b/a.txt
@@ -1,3 +1,3 @@
-a
"""

    with pytest.raises(MalformedDiff, match="shorter"):
        normalize_diff(diff)


@pytest.mark.unit
def test_normalize_keeps_rename_only_file():
    diff = "diff --git a/x.py b/y.py\nsimilarity index 100%\nrename from x.py\nrename to y.py\n"

    files = normalize_diff(diff)

    assert [f.path for f in files] == ["y.py"]
    assert files[0].chunks == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "path, patterns, expected",
    [
        ("dist/index.js", ["dist/**"], True),
        ("dist/a/b.js", ["dist/**"], True),
        ("package.json", ["**/*.json"], True),
        ("config/app.json", ["**/*.json"], True),
        ("src/main.py", ["dist/**", "**/*.json"], False),
        ("src/main.py", [], False),
    ],
)
def test_is_excluded(path, patterns, expected):
    assert is_excluded(path, patterns) is expected
