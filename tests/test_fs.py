from pathlib import Path

from wtc.utils.fs import iter_files, output_name, read_text_file


def _tree(root: Path) -> None:
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / "b.md").write_text("b", encoding="utf-8")
    (root / "c.png").write_bytes(b"\x89PNG")
    (root / "sub").mkdir()
    (root / "sub" / "d.txt").write_text("d", encoding="utf-8")


def test_iter_files_recursive(tmp_path):
    _tree(tmp_path)
    names = [p.name for p in iter_files(str(tmp_path))]
    assert names == ["a.txt", "b.md", "d.txt"]


def test_iter_files_flat(tmp_path):
    _tree(tmp_path)
    names = [p.name for p in iter_files(str(tmp_path), recursive=False)]
    assert names == ["a.txt", "b.md"]


def test_iter_files_single_file_and_missing(tmp_path):
    fp = tmp_path / "post.weibo"
    fp.write_text("x", encoding="utf-8")
    assert iter_files(str(fp)) == [fp]
    assert iter_files(str(tmp_path / "nope")) == []


def test_read_text_file_replaces_bad_bytes(tmp_path):
    fp = tmp_path / "bad.txt"
    fp.write_bytes("微博".encode("utf-8") + b"\xff")
    assert read_text_file(fp).startswith("微博")


def test_output_name():
    assert output_name(Path("dir/post.txt")) == "post_txt.json"
