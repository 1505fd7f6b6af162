"""Tests for the ArtPath instruction store, its cached values and its public interface."""

from __future__ import annotations

import copy

import pytest

from artpath.common import InstructionKind, ParseError
from artpath.geom import ArtBox
from artpath.instruction import PathInstruction
from artpath.path import ArtPath
from artpath.svgpath import ArtSvgPath, parse


class TestConstruction:
    """Tests for creating paths."""

    def test_empty_path(self):
        """An empty path has no instructions, an empty string and the zero box."""
        path = ArtPath()
        assert len(path) == 0
        assert path.to_svg() == ""
        assert str(path) == ""
        assert path.to_vml() == ""
        assert path.measure().to_dict() == {
            "left": 0.0,
            "top": 0.0,
            "right": 0.0,
            "bottom": 0.0,
            "width": 0.0,
            "height": 0.0,
        }

    def test_from_string(self):
        """A path string is parsed into instructions."""
        path = ArtPath("M0 0 L10 10 Z")
        assert [i.kind for i in path.instructions] == [
            InstructionKind.MOVE_TO,
            InstructionKind.LINE_TO,
            InstructionKind.CLOSE_PATH,
        ]

    def test_from_invalid_string(self):
        """Invalid path strings raise ParseError."""
        with pytest.raises(ParseError):
            ArtPath("L 10 10 20")

    def test_from_instructions(self):
        """A path can be built from instructions."""
        path = ArtPath([PathInstruction.create("M", 1, 2), PathInstruction.create("l", 3, 4)])
        assert path.to_svg() == "M1 2 l3 4"

    def test_instructions_are_a_snapshot(self):
        """The exposed instructions cannot change the path."""
        path = ArtPath("M0 0")
        instructions = path.instructions
        path.line(1, 1)
        assert len(instructions) == 1
        assert len(path.instructions) == 2


class TestMutation:
    """Tests for the drawing helpers."""

    def test_helpers_append_relative_instructions(self):
        """Each helper appends exactly one lowercase instruction."""
        path = ArtPath().move(1, 2).line(3, 4).bezier(1, 2, 3, 4, 5, 6).arc(10, 0).counter_arc(0, 10).close()
        assert [i.command for i in path.instructions] == ["m", "l", "c", "a", "a", "z"]
        assert all(i.relative for i in path.instructions)

    def test_helpers_return_path(self):
        """Helpers can be chained."""
        path = ArtPath()
        assert path.move(0, 0) is path
        assert path.reset() is path

    def test_arc_radii_default_to_end_point(self):
        """Without radii the arc spans a quarter ellipse to (x, y)."""
        path = ArtPath().arc(10, -5)
        assert path.instructions[0].values == (10.0, 5.0, 0.0, 0.0, 1.0, 10.0, -5.0)

    def test_arc_ry_defaults_to_rx(self):
        """Given only rx, the arc is circular."""
        path = ArtPath().arc(10, 0, -7)
        assert path.instructions[0].values == (7.0, 7.0, 0.0, 0.0, 1.0, 10.0, 0.0)

    def test_arc_explicit_radii_and_large(self):
        """Explicit radii and the large flag are kept."""
        path = ArtPath().arc(10, 0, 6, 8, True)
        assert path.instructions[0].values == (6.0, 8.0, 0.0, 1.0, 1.0, 10.0, 0.0)

    def test_counter_arc_sweep(self):
        """counter_arc uses sweep flag 0."""
        path = ArtPath().counter_arc(10, 0, 5)
        assert path.instructions[0].values == (5.0, 5.0, 0.0, 0.0, 0.0, 10.0, 0.0)

    def test_reset(self):
        """reset removes all instructions."""
        path = ArtPath("M0 0 L10 10")
        path.reset()
        assert len(path) == 0
        assert path.measure() == ArtBox()

    def test_push_validates(self):
        """push rejects unknown commands and wrong arity."""
        with pytest.raises(ValueError):
            ArtPath().push("x", 1, 2)
        with pytest.raises(ValueError):
            ArtPath().push("l", 1)

    def test_failed_push_keeps_cache(self):
        """A rejected push does not change the path."""
        path = ArtPath("M0 0 L5 5")
        box = path.measure()
        with pytest.raises(ValueError):
            path.push("l", 1)
        assert path.measure() is box


class TestCaching:
    """Tests for memoization and invalidation."""

    def test_measure_idempotent(self):
        """measure twice without change returns the same box."""
        path = ArtPath("M0 0 a10 10 0 0 1 20 0")
        first = path.measure()
        assert path.measure() is first

    def test_to_vml_idempotent(self):
        """to_vml twice without change returns the same string."""
        path = ArtPath("M0 0 L10 10")
        first = path.to_vml(100)
        assert path.to_vml(100) is first

    def test_to_svg_idempotent(self):
        """to_svg twice without change returns the same string."""
        path = ArtPath("M0 0 L10 10")
        assert path.to_svg() is path.to_svg()

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda p: p.move(50, 50),
            lambda p: p.line(50, 50),
            lambda p: p.bezier(0, 0, 0, 0, 50, 50),
            lambda p: p.arc(50, 50),
            lambda p: p.counter_arc(50, 50),
            lambda p: p.close().line(50, 50),
            lambda p: p.push("L", 60, 60),
        ],
    )
    def test_mutation_invalidates(self, mutate):
        """After a mutation all derived values reflect the new sequence."""
        path = ArtPath("M0 0 L10 10")
        box, svg, vml = path.measure(), path.to_svg(), path.to_vml()
        mutate(path)
        assert path.measure() != box
        assert path.to_svg() != svg
        assert path.to_vml() != vml

    def test_reset_invalidates(self):
        """After a reset the derived values are those of the empty path."""
        path = ArtPath("M0 0 L10 10")
        path.measure()
        path.to_svg()
        path.reset()
        assert path.measure() == ArtBox()
        assert path.to_svg() == ""
        assert path.to_vml() == ""

    def test_vml_precision_change(self):
        """Asking for another precision computes the re-encoding again."""
        path = ArtPath("M0 0 L1.5 2")
        assert path.to_vml(100) == "m0,0l150,200"
        assert path.to_vml() == "m0,0l1.5,2"
        assert path.to_vml(10) == "m0,0l15,20"

    def test_measure_independent_of_precision(self):
        """The box is in unscaled units whatever precision is passed."""
        path = ArtPath("M0 0 L1.5 2")
        assert path.measure(100).extent == (0.0, 0.0, 1.5, 2.0)
        assert path.to_vml(100) == "m0,0l150,200"


class TestCopy:
    """Tests for copying paths."""

    def test_copy_constructor(self):
        """Copying takes over instructions and cached values."""
        path = ArtPath("M0 0 L10 10")
        box = path.measure()
        duplicate = ArtPath(path)
        assert duplicate == path
        assert duplicate.measure() is box

    def test_copy_is_independent(self):
        """Mutating a copy leaves the original unchanged."""
        path = ArtPath("M0 0 L10 10")
        path.measure()
        duplicate = copy.copy(path)
        duplicate.line(100, 100)
        assert len(path) == 2
        assert path.measure().extent == (0.0, 0.0, 10.0, 10.0)
        assert duplicate.measure().extent == (0.0, 0.0, 110.0, 110.0)
        assert path.copy() == path


class TestProperties:
    """Properties of paths built with the drawing helpers."""

    @pytest.mark.parametrize(
        "points",
        [
            [(0, 0), (10, 0), (10, 10)],
            [(0.1, -3.75), (1e-7, 123456789.123), (-0.5, 0.25)],
            [(1.0 / 3.0, 2.0 / 3.0), (-1e300, 1e-300)],
        ],
    )
    def test_round_trip(self, points):
        """Parsing the path string of a move/line/close path gives an equal sequence."""
        path = ArtPath()
        first, *rest = points
        path.move(*first)
        for point in rest:
            path.line(*point)
        path.close().move(5, 5).line(1, 1)
        assert parse(path.to_svg()).instructions == path.instructions
        assert ArtSvgPath.parse_instructions(str(path)) == list(path.instructions)

    def test_smooth_curve_reflection(self):
        """S after a cubic curve synthesizes (2cx-lx, 2cy-ly)."""
        path = ArtPath("M0 0 C3 4 7 9 12 15 S30 30 40 40")
        assert "c17,21,30,30,40,40" in path.to_vml()

    def test_close_semantics(self):
        """After close the current point is back at the subpath start."""
        path = ArtPath().move(0, 0).line(10, 0).line(10, 10).close().line(5, 5)
        assert path.to_vml().endswith("xm0,0l5,5")
        box = path.measure()
        assert box.extent == (0.0, 0.0, 20.0, 10.0)

    def test_absolute_close_semantics(self):
        """The trailing line after close ends at (5, 5) inside the closed square's box."""
        box = ArtPath("M0 0 L10 0 L10 10 Z l5 5").measure()
        assert box.extent == (0.0, 0.0, 10.0, 10.0)


class TestMeasurePaths:
    """Tests for measuring several paths together."""

    def test_union(self):
        """The common box encloses all paths."""
        box = ArtPath.measure_paths([ArtPath("M0 0 L10 10"), None, ArtPath("M-5 20 L0 30")])
        assert box.extent == (-5.0, 0.0, 10.0, 30.0)

    def test_no_paths(self):
        """Nothing to measure gives the zero box."""
        assert ArtPath.measure_paths([]) == ArtBox()


class TestSerialization:
    """Tests for to_dict/from_dict."""

    def test_to_dict_without_box(self):
        """An unmeasured path has no box in its dictionary."""
        assert ArtPath("M0 0 L1 1").to_dict() == {"path": "M0 0 L1 1", "bounding_box": None}

    def test_dict_round_trip(self):
        """from_dict restores instructions and box."""
        path = ArtPath("M0 0 a10 10 0 0 1 20 0")
        path.measure()
        restored = ArtPath.from_dict(path.to_dict())
        assert restored == path
        assert restored.measure() == path.measure()

    def test_repr(self):
        """repr shows the path string."""
        assert repr(ArtPath("M0 0")) == "ArtPath('M0 0')"
