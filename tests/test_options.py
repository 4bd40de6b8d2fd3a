#
# partialdump - Options Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from partialdump import formatters as fmt
from partialdump.options import DumpOptions
from partialdump.shapes import Shape


# Tests ----------------------------------------------------------------------------------------------------------------

def _upper(dumper, depth, value):
    return str(value).upper()


class TestDefaults:
    def test_values(self):
        opts = DumpOptions()
        assert opts.max_length is None
        assert opts.max_elements == 6
        assert opts.max_depth == 2
        assert opts.stringify is False
        assert opts.pairs is True
        assert opts.numeric_strings is False
        assert opts.escape_quotes is True

    def test_every_shape_has_formatter(self):
        """The default registry covers every shape."""
        assert set(DumpOptions().formatters) == set(Shape)

    def test_instances_do_not_share_registry(self):
        a, b = DumpOptions(), DumpOptions()
        a.add_formatter(Shape.NUMBER, _upper)
        assert b.get_formatter(Shape.NUMBER) is fmt.format_number


class TestLimits:
    def test_presence_flags(self):
        opts = DumpOptions(max_length=0, max_elements=0)
        assert opts.has_max_length
        assert opts.has_max_elements

    def test_clear(self):
        opts = DumpOptions(max_length=20).clear_max_length().clear_max_elements()
        assert not opts.has_max_length
        assert not opts.has_max_elements
        assert opts.max_elements is None


class TestPresets:
    @pytest.mark.parametrize(
        "preset, expected",
        [
            pytest.param(DumpOptions.compact, dict(max_length=80, max_elements=3, max_depth=1), id="compact"),
            pytest.param(DumpOptions.debug, dict(max_elements=20, max_depth=4, stringify=True), id="debug"),
            pytest.param(DumpOptions.logging, dict(max_length=256), id="logging"),
        ],
    )
    def test_presets(self, preset, expected):
        """Presets differ from the defaults only in the listed fields."""
        assert preset() == DumpOptions().merge(**expected)


class TestMerge:
    def test_replaces_fields(self):
        opts = DumpOptions().merge(max_depth=5, pairs=False)
        assert opts.max_depth == 5
        assert opts.pairs is False

    def test_leaves_original_alone(self):
        base = DumpOptions()
        merged = base.merge(max_depth=5)
        merged.add_formatter(Shape.STRING, _upper)
        assert base.max_depth == 2
        assert base.get_formatter(Shape.STRING) is fmt.format_string

    def test_unknown_field(self):
        with pytest.raises(TypeError):
            DumpOptions().merge(max_width=10)


class TestFormatterRegistry:
    def test_add_chainable(self):
        opts = DumpOptions().add_formatter(Shape.NUMBER, _upper).add_formatter(Shape.STRING, _upper)
        assert opts.get_formatter(Shape.NUMBER) is _upper
        assert opts.get_formatter(Shape.STRING) is _upper

    def test_remove_restores_default(self):
        opts = DumpOptions().add_formatter(Shape.MAPPING, _upper).remove_formatter(Shape.MAPPING)
        assert opts.get_formatter(Shape.MAPPING) is fmt.format_mapping

    def test_get_missing_falls_back(self):
        opts = DumpOptions(formatters={})
        assert opts.get_formatter(Shape.ABSENT) is fmt.format_undef

    @pytest.mark.parametrize(
        "shape, formatter",
        [
            pytest.param("number", _upper, id="plain_str_shape"),
            pytest.param(Shape.NUMBER, "not callable", id="not_callable"),
        ],
    )
    def test_add_invalid(self, shape, formatter):
        with pytest.raises(TypeError):
            DumpOptions().add_formatter(shape, formatter)

    def test_remove_invalid(self):
        with pytest.raises(TypeError):
            DumpOptions().remove_formatter(42)
