"""Tests for the render CLI."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

import pytest

from cli.render_cli import main

if TYPE_CHECKING:
    from pathlib import Path


class TestInit:
    def test_init_writes_index_toml(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        content = tmp_path / "site"
        main(
            [
                "--dir",
                str(content),
                "init",
                "--title",
                "New Blog",
                "--author",
                "A. Person",
                "--summary",
                "writes things",
                "--github",
                "aperson",
            ]
        )

        data = tomllib.loads((content / "index.toml").read_text())
        assert data["site"]["title"] == "New Blog"
        assert data["site"]["author"] == {"name": "A. Person", "summary": "writes things"}
        assert data["site"]["social"] == {"github": "aperson"}
        assert "Wrote" in capsys.readouterr().out

    def test_init_refuses_to_overwrite(
        self, tmp_content_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--dir", str(tmp_content_dir), "init", "--title", "T", "--author", "A"])
        assert exc_info.value.code == 1
        assert "already exists" in capsys.readouterr().out

    def test_init_force_overwrites(self, tmp_content_dir: Path) -> None:
        main(["--dir", str(tmp_content_dir), "init", "--title", "T", "--author", "A", "--force"])
        data = tomllib.loads((tmp_content_dir / "index.toml").read_text())
        assert data["site"]["title"] == "T"


class TestRender:
    def test_page_to_stdout(
        self, tmp_content_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["--dir", str(tmp_content_dir), "page"])
        out = capsys.readouterr().out
        assert '<div class="global-wrapper" data-is-root-path="true">' in out
        assert "A. Person" in out

    def test_page_with_prefix(
        self, tmp_content_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["--dir", str(tmp_content_dir), "--prefix", "/blog", "page", "--path", "/blog"])
        out = capsys.readouterr().out
        assert 'data-is-root-path="false"' in out
        assert 'href="/blog/"' in out
        assert 'src="/blog/assets/profile-pic.jpg"' in out

    def test_page_to_file(self, tmp_content_dir: Path, tmp_path: Path) -> None:
        output = tmp_path / "index.html"
        main(["--dir", str(tmp_content_dir), "page", "--output", str(output)])
        assert "global-wrapper" in output.read_text()

    def test_bio_text_only(
        self, tmp_content_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["--dir", str(tmp_content_dir), "--no-avatar", "bio"])
        out = capsys.readouterr().out
        assert "<img" not in out
        assert "https://twitter.com/aperson" in out

    def test_bio_empty_handle_policy(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "index.toml").write_text('[site.author]\nname = "A"\n')
        main(["--dir", str(tmp_path), "--policy", "empty_handle", "bio"])
        out = capsys.readouterr().out
        assert 'href="https://twitter.com/"' in out
        assert 'href="https://github.com/"' in out

    def test_missing_author_exits_with_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "index.toml").write_text('[site]\ntitle = "T"\n')
        with pytest.raises(SystemExit) as exc_info:
            main(["--dir", str(tmp_path), "bio"])
        assert exc_info.value.code == 1
        assert "site.author" in capsys.readouterr().out

    def test_invalid_prefix_exits_with_error(
        self, tmp_content_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--dir", str(tmp_content_dir), "--prefix", "blog/", "page"])
        assert exc_info.value.code == 1
        assert "PATH_PREFIX" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        main([])
        assert "usage" in capsys.readouterr().out
