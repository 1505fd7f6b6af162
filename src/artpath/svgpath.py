"""Handling path strings: parsing into instructions and direct re-serialization"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, ClassVar, Iterable, List, Optional, Tuple

from artpath.common import PATH_CMDS, ParseError, command_info
from artpath.instruction import PathInstruction

if TYPE_CHECKING:
    from artpath.path import ArtPath

logger = logging.getLogger(__name__)


class ArtSvgPath:
    """
    This class provides a collection of static methods to convert between
    path strings and instruction sequences.
    A path string is a sequence of command letters, each followed by its numbers.
    Commands (command : number of values : command-character):
        MoveTo:           2: Mm
        LineTo:           2: Ll   1: Hh(x)   1:Vv(y)
        CubicBezier:      6: Cc   4: Ss
        QuadraticBezier:  4: Qq   2: Tt
        ArcCurve:         7: Aa
        ClosePath:        0: Zz
    """

    # Command letters:
    SVG_CMDS: ClassVar[str] = PATH_CMDS
    # Definition of a number:
    SVG_ARGS: ClassVar[str] = r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
    # Definition of an arc flag (a single digit, may be glued to the next number):
    SVG_FLAG: ClassVar[str] = r"[01]"

    _SEPARATOR_RE: ClassVar[re.Pattern] = re.compile(r"[\s,]*")
    _NUMBER_RE: ClassVar[re.Pattern] = re.compile(SVG_ARGS)
    _FLAG_RE: ClassVar[re.Pattern] = re.compile(SVG_FLAG)

    # Positions of the large-arc and sweep flags inside the values of an arc
    ARC_FLAG_SLOTS: ClassVar[Tuple[int, ...]] = (3, 4)

    @staticmethod
    def tokenize(path_string: str) -> List[Tuple[str, List[float]]]:
        """
        Split the given _path_string_ into command letters with their runs of numbers.

        Numbers may follow each other without separator as long as the boundary
        is unambiguous, e.g. ".5.5" or "10-5". The large-arc and sweep flags of
        arc commands are read as a single digit each, so "1110" gives 1, 1, 10.

        Args:
            path_string (str): a path string

        Returns:
            List[Tuple[str, List[float]]]: command letter and its numbers, in order

        Raises:
            ParseError: if an unknown character appears or numbers precede any command
        """
        runs: List[Tuple[str, List[float]]] = []
        pos = ArtSvgPath._SEPARATOR_RE.match(path_string, 0).end()
        while pos < len(path_string):
            char = path_string[pos]
            if char.isalpha() and char not in "eE":
                if char not in ArtSvgPath.SVG_CMDS:
                    raise ParseError(f"Unknown path command '{char}' at position {pos}", char)
                runs.append((char, []))
                pos += 1
            else:
                command = runs[-1][0] if runs else None
                values = runs[-1][1] if runs else []
                pattern = ArtSvgPath._NUMBER_RE
                if command in ("A", "a"):
                    if len(values) % 7 in ArtSvgPath.ARC_FLAG_SLOTS:
                        pattern = ArtSvgPath._FLAG_RE
                match = pattern.match(path_string, pos)
                if match is None:
                    raise ParseError(
                        f"Unexpected character '{char}' at position {pos} after command '{command}'",
                        command,
                        values,
                    )
                if command is None:
                    raise ParseError(
                        f"Number '{match.group()}' at position {pos} is not preceded by a command",
                        None,
                        (float(match.group()),),
                    )
                values.append(float(match.group()))
                pos = match.end()
            pos = ArtSvgPath._SEPARATOR_RE.match(path_string, pos).end()
        return runs

    @staticmethod
    def parse_instructions(path_string: str) -> List[PathInstruction]:
        """
        Parse the given _path_string_ into a list of instructions.

        A run of numbers longer than the command's arity is split into repeated
        instructions of the same command, e.g. "L 10 10 20 20" gives two LineTo.
        Additional coordinate pairs after a MoveTo are LineTo instructions
        with the same coordinate mode.

        Args:
            path_string (str): a path string

        Returns:
            List[PathInstruction]: the instructions in drawing order

        Raises:
            ParseError: if a run of numbers does not fit the arity of its command
        """
        instructions: List[PathInstruction] = []
        for command, values in ArtSvgPath.tokenize(path_string):
            arity = command_info(command).arity
            if arity == 0:
                if values:
                    raise ParseError(
                        f"Command '{command}' takes no values, got {ArtSvgPath._format_run(values)}",
                        command,
                        values,
                    )
                instructions.append(PathInstruction(command))
                continue

            if not values or len(values) % arity:
                raise ParseError(
                    f"Command '{command}' takes a multiple of {arity} values, "
                    f"got {len(values)}: {ArtSvgPath._format_run(values)}",
                    command,
                    values,
                )

            for i in range(0, len(values), arity):
                batch_command = command
                if i and command in "Mm":
                    batch_command = "L" if command == "M" else "l"
                instructions.append(PathInstruction(batch_command, tuple(values[i : i + arity])))

        logger.debug("Parsed %d instructions from path string of length %d", len(instructions), len(path_string))
        return instructions

    @staticmethod
    def encode(instructions: Iterable[PathInstruction]) -> str:
        """
        Serialize the given _instructions_ without any geometric evaluation.
        Each instruction keeps its command letter and its values unchanged,
        so parsing the result gives back an equal sequence.

        Args:
            instructions (Iterable[PathInstruction]): instructions to serialize

        Returns:
            str: the path string, empty if there are no instructions
        """
        return " ".join(str(instruction) for instruction in instructions)

    @staticmethod
    def _format_run(values: Iterable[float]) -> str:
        return "[" + ", ".join(f"{value:g}" for value in values) + "]"


def parse(path_string: Optional[str] = None) -> ArtPath:
    """Create a new ArtPath from the given _path_string_ (an empty path if None)."""
    from artpath.path import ArtPath  # pylint: disable=import-outside-toplevel

    return ArtPath(path_string)
