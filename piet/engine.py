"""
Piet execution engine.

The machine keeps three registers (position, direction pointer, codel
chooser) and an operand stack. Each step searches for the next block
transition, sliding through white and bouncing off black, then the
transition's opcode is executed.
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import BinaryIO, List, NamedTuple, Optional, TextIO, Tuple

from .classify import BLACK, WHITE
from .colors import Arity, Opcode, compare
from .errors import InvalidCharacterError, PietZeroDivisionError
from .geometry import Direction, Rotation
from .grid import Coord
from .program import ColorBlock, Program
from .streams import read_number_line, read_utf8_char

logger = logging.getLogger(__name__)

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


class Registers(NamedTuple):
    pc: Coord = (0, 0)
    dp: Direction = Direction.RIGHT
    cc: Rotation = Rotation.COUNTERCLOCKWISE


@dataclass
class Halt:
    """Terminal state of a finished run."""
    steps: int
    stack: List[int] = field(default_factory=list)


def trunc_divmod(y: int, x: int) -> Tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder (sign of y)."""
    if x == 0:
        raise PietZeroDivisionError(f"Division by zero ({y} / 0)")
    q = abs(y) // abs(x)
    if (y < 0) != (x < 0):
        q = -q
    return q, y - x * q


class Machine:
    def __init__(self, program: Program,
                 stdin: Optional[BinaryIO] = None,
                 stdout: Optional[TextIO] = None):
        self.program = program
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout
        self.regs = Registers()
        self.stack: List[int] = []

    def current_block(self) -> Optional[ColorBlock]:
        """Block under the cursor, looked up fresh from the grid."""
        return self.program.block_at(self.regs.pc)

    # Main loop

    def run(self) -> Halt:
        """Execute until no further instruction can be reached."""
        steps = 0
        while True:
            instruction = self.step()
            if instruction is None:
                break
            opcode, operand = instruction
            self.execute(opcode, operand)
            steps += 1

        logger.info("Program halted after %d instructions (stack depth %d)",
                    steps, len(self.stack))
        return Halt(steps, list(self.stack))

    def step(self) -> Optional[Tuple[Opcode, int]]:
        """
        Search for the next instruction.

        Returns the (opcode, operand) of the next block transition, or None
        when a register state repeats during this search, meaning the
        program is stuck and halts.
        """
        seen = set()
        toggled_cc = False
        size = self.program.size()

        while True:
            block = self.current_block()
            if block is not None:
                # Move to the exit corner of the current block
                self.regs = self.regs._replace(pc=block.find_edge(self.regs.dp, self.regs.cc))

            if self.regs in seen:
                logger.debug("Stuck at %s", self.regs)
                return None
            seen.add(self.regs)

            target = self.regs.dp.step(self.regs.pc, size)
            codel = BLACK if target is None else self.program.grid[target]

            if codel == WHITE:
                self.regs = self.regs._replace(pc=target)
                toggled_cc = False

            elif codel == BLACK:
                if not toggled_cc:
                    self.regs = self.regs._replace(cc=self.regs.cc.flip())
                    toggled_cc = True
                else:
                    self.regs = self.regs._replace(dp=self.regs.dp.turn(Rotation.CLOCKWISE))
                    toggled_cc = False

            else:
                opcode, operand = Opcode.NOP, 0

                # Only a direct block-to-block move carries an instruction
                if block is not None:
                    opcode = compare(block.color, self.program.blocks[codel].color)
                    operand = block.area

                self.regs = self.regs._replace(pc=target)
                return opcode, operand

    # Instructions

    def execute(self, opcode: Opcode, operand: int) -> None:
        """Apply one instruction to the stack and registers."""
        logger.debug("%-10s operand=%-4d pc=%s dp=%s cc=%s stack=%s",
                     opcode.mnemonic, operand, self.regs.pc, self.regs.dp.name,
                     self.regs.cc.name, self.stack)

        if opcode is Opcode.NOP:
            return

        if opcode is Opcode.PUSH:
            self.stack.append(operand)

        elif opcode is Opcode.IN_NUMBER:
            self.stack.append(read_number_line(self.stdin))

        elif opcode is Opcode.IN_CHAR:
            self.stack.append(ord(read_utf8_char(self.stdin)))

        elif opcode.arity is Arity.UNARY:
            if not self.stack:
                return
            self._unary(opcode, self.stack.pop())

        elif opcode.arity is Arity.BINARY:
            if not self.stack:
                return
            x = self.stack.pop()
            if not self.stack:
                self.stack.append(x)
                return
            y = self.stack.pop()
            self._binary(opcode, x, y)

    def _unary(self, opcode: Opcode, value: int) -> None:
        if opcode is Opcode.POP:
            pass

        elif opcode is Opcode.NOT:
            self.stack.append(1 if value == 0 else 0)

        elif opcode is Opcode.POINTER:
            rotation = Rotation.CLOCKWISE if value >= 0 else Rotation.COUNTERCLOCKWISE
            self.regs = self.regs._replace(dp=self.regs.dp.turn(rotation, abs(value)))

        elif opcode is Opcode.SWITCH:
            if abs(value) % 2:
                self.regs = self.regs._replace(cc=self.regs.cc.flip())

        elif opcode is Opcode.DUPLICATE:
            self.stack.extend((value, value))

        elif opcode is Opcode.OUT_NUMBER:
            self.stdout.write(f"{value} ")

        elif opcode is Opcode.OUT_CHAR:
            if not 0 <= value <= MAX_CODE_POINT or value in SURROGATES:
                raise InvalidCharacterError(f"Not a valid character code point: {value}")
            self.stdout.write(chr(value))
            self.stdout.flush()

    def _binary(self, opcode: Opcode, x: int, y: int) -> None:
        """x was on top of the stack, y just below it."""
        if opcode is Opcode.ROLL:
            self._roll(x, y)
            return

        if opcode is Opcode.ADD:
            result = y + x
        elif opcode is Opcode.SUBTRACT:
            result = y - x
        elif opcode is Opcode.MULTIPLY:
            result = y * x
        elif opcode is Opcode.DIVIDE:
            result = trunc_divmod(y, x)[0]
        elif opcode is Opcode.MOD:
            result = trunc_divmod(y, x)[1]
        elif opcode is Opcode.GREATER:
            result = 1 if y > x else 0
        else:
            raise ValueError(f"Not a binary opcode: {opcode}")

        self.stack.append(result)

    def _roll(self, amount: int, depth: int) -> None:
        """Rotate the top `depth` values; positive amounts bury the top value."""
        depth = max(0, min(depth, len(self.stack)))
        if depth == 0:
            return

        shift = abs(amount) % depth
        if shift == 0:
            return

        top = self.stack[-depth:]
        if amount > 0:
            top = top[-shift:] + top[:-shift]
        else:
            top = top[shift:] + top[:shift]
        self.stack[-depth:] = top


def run_program(program: Program,
                stdin: Optional[BinaryIO] = None,
                stdout: Optional[TextIO] = None) -> Halt:
    """Run a compiled program to completion."""
    return Machine(program, stdin, stdout).run()
