"""Drawing instructions: one command letter with its fixed-arity payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from artpath.common import CommandInfo, InstructionKind, command_info


###############################################################################
# PathInstruction
###############################################################################


@dataclass(frozen=True)
class PathInstruction:
    """A single typed drawing instruction.

    The command letter keeps the coordinate mode: uppercase letters carry
    absolute coordinates, lowercase letters carry distances from the current point.
    Relative values are never resolved here; this happens while evaluating a path.

    Attributes:
        command: Path command letter, e.g. "M" or "c"
        values: Numeric payload, exactly as many values as the command's arity
    """

    command: str
    values: Tuple[float, ...] = ()

    def __post_init__(self):
        info = command_info(self.command)
        values = tuple(float(value) for value in self.values)
        if len(values) != info.arity:
            raise ValueError(
                f"Command '{self.command}' takes {info.arity} values, got {len(values)}: {list(values)}"
            )
        object.__setattr__(self, "values", values)

    @classmethod
    def create(cls, command: str, *values: Union[int, float]) -> PathInstruction:
        """Create an instruction from a command letter and its values given as arguments."""
        return cls(command, tuple(values))

    @property
    def info(self) -> CommandInfo:
        """The metadata of this instruction's command."""
        return command_info(self.command)

    @property
    def kind(self) -> InstructionKind:
        """The instruction kind."""
        return self.info.kind

    @property
    def relative(self) -> bool:
        """True if the values are distances from the current point."""
        return self.command.islower()

    def __str__(self) -> str:
        if not self.values:
            return self.command
        return self.command + " ".join(format_number(value) for value in self.values)


def format_number(value: float) -> str:
    """Format a number so that parsing the text gives back the same float.

    Integral values are written without fraction, e.g. 10.0 -> "10".
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)

