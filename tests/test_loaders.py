"""Test the partial loaders."""

import pytest

from mustache_js import (
    ChoiceLoader,
    DictLoader,
    FileSystemLoader,
    FunctionLoader,
    TemplateNotFoundError,
)


class TestFileSystemLoader:
    """Load <name>.mustache files from search paths."""

    def test_load(self, tmp_path):
        (tmp_path / "user.mustache").write_text("<b>{{name}}</b>")
        source, filename = FileSystemLoader(tmp_path).get_source("user")
        assert source == "<b>{{name}}</b>"
        assert filename == str(tmp_path / "user.mustache")

    def test_first_path_wins(self, tmp_path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "p.mustache").write_text("first")
        (second / "p.mustache").write_text("second")
        (second / "q.mustache").write_text("only second")

        loader = FileSystemLoader([str(first), second])
        assert loader.get_source("p")[0] == "first"
        assert loader.get_source("q")[0] == "only second"

    def test_nested_name(self, tmp_path):
        (tmp_path / "cards").mkdir()
        (tmp_path / "cards" / "user.mustache").write_text("card")
        assert FileSystemLoader(tmp_path).get_source("cards/user")[0] == "card"

    def test_custom_extension(self, tmp_path):
        (tmp_path / "row.html").write_text("<tr></tr>")
        loader = FileSystemLoader(tmp_path, extension=".html")
        assert loader.get_source("row")[0] == "<tr></tr>"

    def test_not_found_lists_search_paths(self, tmp_path):
        with pytest.raises(TemplateNotFoundError, match="Template 'missing' not found in") as exc_info:
            FileSystemLoader(tmp_path).get_source("missing")
        assert str(tmp_path) in str(exc_info.value)

    def test_directory_is_not_a_partial(self, tmp_path):
        (tmp_path / "dir.mustache").mkdir()
        with pytest.raises(TemplateNotFoundError):
            FileSystemLoader(tmp_path).get_source("dir")


class TestDictLoader:
    """In-memory partials."""

    def test_load(self):
        assert DictLoader({"user": "{{name}}"}).get_source("user") == ("{{name}}", None)

    def test_suggests_close_match(self):
        with pytest.raises(TemplateNotFoundError, match="Did you mean 'user'"):
            DictLoader({"user": "", "footer": ""}).get_source("usr")

    def test_lists_available(self):
        with pytest.raises(TemplateNotFoundError, match="Available: footer, header"):
            DictLoader({"header": "", "footer": ""}).get_source("sidebar")

    def test_empty_mapping(self):
        with pytest.raises(TemplateNotFoundError, match=r"^Template 'x' not found$"):
            DictLoader({}).get_source("x")

    def test_long_listing_is_truncated(self):
        mapping = {f"p{index:02d}": "" for index in range(12)}
        with pytest.raises(TemplateNotFoundError, match=r"p09 \.\.\. \(12 total\)$"):
            DictLoader(mapping).get_source("zzz")

    def test_miss_does_not_chain_key_error(self):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            DictLoader({}).get_source("x")
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__


class TestChoiceLoader:
    """Fall through loaders in order."""

    def test_first_match_wins(self):
        loader = ChoiceLoader(
            [
                DictLoader({"header": "custom"}),
                DictLoader({"header": "default", "footer": "footer"}),
            ]
        )
        assert loader.get_source("header")[0] == "custom"
        assert loader.get_source("footer")[0] == "footer"

    def test_none_match(self):
        loader = ChoiceLoader([DictLoader({}), DictLoader({})])
        with pytest.raises(TemplateNotFoundError, match="not found in any of 2 loaders"):
            loader.get_source("x")

    def test_other_errors_propagate(self):
        def broken(name):
            raise OSError("disk on fire")

        loader = ChoiceLoader([FunctionLoader(broken), DictLoader({"x": "x"})])
        with pytest.raises(OSError, match="disk on fire"):
            loader.get_source("x")

    def test_last_miss_is_chained(self):
        """The final loader's error explains why the lookup failed."""
        loader = ChoiceLoader([DictLoader({}), DictLoader({"user": ""})])
        with pytest.raises(TemplateNotFoundError) as exc_info:
            loader.get_source("usr")
        assert "Did you mean 'user'" in str(exc_info.value.__cause__)

    def test_no_loaders(self):
        with pytest.raises(TemplateNotFoundError, match="not found in any of 0 loaders") as exc_info:
            ChoiceLoader([]).get_source("x")
        assert exc_info.value.__cause__ is None


class TestFunctionLoader:
    """Callables as loaders."""

    def test_string_result(self):
        loader = FunctionLoader(lambda name: f"partial {name}")
        assert loader.get_source("x") == ("partial x", "<function>")

    def test_tuple_result(self):
        loader = FunctionLoader(lambda name: ("src", f"db://{name}"))
        assert loader.get_source("x") == ("src", "db://x")

    def test_none_result(self):
        with pytest.raises(TemplateNotFoundError, match="Template 'x' not found"):
            FunctionLoader(lambda name: None).get_source("x")
