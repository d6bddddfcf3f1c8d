"""Tests for the inkwell CLI."""

import pytest
from typer.testing import CliRunner

from inkwell.cli.main import app
from inkwell.config import config_path, load_config

runner = CliRunner()

HELLO = "title: Hello\ndate: 2025-06-04\nauthor: Jane"


@pytest.fixture(autouse=True)
def _serial(site_root):
    config_path(site_root).parent.mkdir(parents=True, exist_ok=True)
    config_path(site_root).write_text("build:\n  workers: 1\n", encoding="utf-8")


def test_build_writes_pages(site_root, write_article):
    write_article("hello.md", HELLO)

    result = runner.invoke(app, ["build", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "Built 1 page(s)" in result.output
    assert (site_root / "dist" / "blog" / "hello" / "index.html").exists()


def test_build_reports_excluded_documents(site_root, write_article):
    write_article("hello.md", HELLO)
    write_article("anon.md", "title: Anonymous\ndate: 2025-06-04")

    result = runner.invoke(app, ["build", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "anon.md" in result.output
    assert "author" in result.output


def test_build_drafts_flag(site_root, write_article):
    write_article("wip.md", HELLO + "\ndraft: true")

    production = runner.invoke(app, ["build", str(site_root)])
    assert production.exit_code == 0, production.output
    assert not (site_root / "dist" / "blog" / "wip").exists()

    preview = runner.invoke(app, ["build", str(site_root), "--drafts"])
    assert preview.exit_code == 0, preview.output
    assert (site_root / "dist" / "blog" / "wip" / "index.html").exists()


def test_build_output_option(site_root, write_article, tmp_path):
    write_article("hello.md", HELLO)
    out = tmp_path / "elsewhere"

    result = runner.invoke(app, ["build", str(site_root), "--output", str(out)])

    assert result.exit_code == 0, result.output
    assert (out / "blog" / "hello" / "index.html").exists()


def test_build_refuses_site_root_as_output(site_root, write_article):
    article = write_article("hello.md", HELLO)

    result = runner.invoke(app, ["build", str(site_root), "--output", str(site_root)])

    assert result.exit_code == 1
    assert "Configuration error" in result.output
    assert article.exists()


def test_duplicate_slugs_exit_with_error(site_root, write_article):
    write_article("a/intro.md", HELLO)
    write_article("b/intro.md", HELLO)

    result = runner.invoke(app, ["build", str(site_root)])

    assert result.exit_code == 1
    assert "Duplicate slug" in result.output
    assert "a/intro.md" in result.output
    assert not (site_root / "dist").exists()


def test_missing_content_dir_exits_with_error(tmp_path):
    result = runner.invoke(app, ["build", str(tmp_path / "empty-site")])

    assert result.exit_code == 1
    assert "Cannot read content" in result.output


def test_check_fails_on_rejected_documents(site_root, write_article):
    write_article("hello.md", HELLO)
    write_article("undated.md", "title: Undated\nauthor: Jane")

    result = runner.invoke(app, ["check", str(site_root)])

    assert result.exit_code == 1
    assert "undated.md" in result.output
    assert "date" in result.output


def test_check_passes_on_clean_content(site_root, write_article):
    write_article("hello.md", HELLO)

    result = runner.invoke(app, ["check", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "hello" in result.output


def test_routes_lists_paths(site_root, write_article):
    write_article("hello.md", HELLO)

    result = runner.invoke(app, ["routes", str(site_root)])

    assert result.exit_code == 0, result.output
    assert "/blog/hello" in result.output


def test_init_writes_default_config(tmp_path):
    new_site = tmp_path / "new-site"
    result = runner.invoke(app, ["init", str(new_site)])

    assert result.exit_code == 0, result.output
    assert load_config(new_site).build.route_prefix == "blog"

    again = runner.invoke(app, ["init", str(new_site)])
    assert again.exit_code == 1
