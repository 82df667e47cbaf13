import logging as lg
from dataclasses import dataclass
from typing import Callable

import intcode.common.ops as ops
from intcode.common.errors import IntcodeError
from intcode.common.settings import RunSettings
from intcode.runtime.memory import Memory


class DecodeError(IntcodeError):
    def __init__(self, opcode: int, position: int):
        self.opcode = opcode
        self.position = position
        super().__init__(f'Invalid op code {opcode} at {position}')


class StepLimitExceeded(IntcodeError):
    def __init__(self, steps: int):
        self.steps = steps
        super().__init__(f'Step limit of {steps} exceeded')


# - Instructions - #

@dataclass(frozen=True)
class Arithmetic:
    a: int      # Resolved operand
    b: int      # Resolved operand
    dest: int   # Destination address


@dataclass(frozen=True)
class Add(Arithmetic):
    pass


@dataclass(frozen=True)
class Mul(Arithmetic):
    pass


@dataclass(frozen=True)
class Halt:
    pass


Instruction = Add | Mul | Halt


# - Decoding - #

def decode_arithm(factory: Callable[[int, int, int], Arithmetic]):
    def decoder(memory: Memory, position: int) -> Arithmetic:
        p1 = memory.read(position + 1)
        p2 = memory.read(position + 2)
        p3 = memory.read(position + 3)
        return factory(memory.read(p1), memory.read(p2), p3)

    return decoder


def decode_halt(memory: Memory, position: int) -> Halt:
    return Halt()


DECODERS = {
    ops.ADD: decode_arithm(Add),
    ops.MUL: decode_arithm(Mul),
    ops.HLT: decode_halt
}


def decode(memory: Memory, position: int) -> Instruction:
    opcode = memory.read(position)
    decoder = DECODERS.get(opcode)

    if decoder is None:
        raise DecodeError(opcode, position)

    return decoder(memory, position)


# - Execution - #

def execute(memory: Memory, instruction: Instruction) -> Memory:
    match instruction:
        case Add(a, b, dest):
            return memory.write(dest, a + b)
        case Mul(a, b, dest):
            return memory.write(dest, a * b)
        case Halt():
            return memory

    raise UserWarning(f'Unsupported instruction {instruction}')


class CPU():
    ip: int         # Instruction pointer
    steps: int      # Executed instructions
    halted: bool

    def __init__(self, memory: Memory, settings: RunSettings | None = None):
        self.memory = memory
        self.settings = settings if settings is not None else RunSettings()

        self.ip = 0
        self.steps = 0
        self.halted = False

    def debug_dump(self, instruction: Instruction):
        lg.debug(f'IP:{self.ip} STEP:{self.steps} {instruction}')

    def check_budget(self):
        max_steps = self.settings.max_steps

        if max_steps is not None and self.steps >= max_steps:
            raise StepLimitExceeded(max_steps)

    def exec_next(self) -> Instruction:
        instruction = decode(self.memory, self.ip)
        self.debug_dump(instruction)

        if isinstance(instruction, Halt):
            self.halted = True
            return instruction

        self.check_budget()
        self.memory = execute(self.memory, instruction)
        self.ip += ops.STRIDE
        self.steps += 1
        return instruction

    def run(self) -> Memory:
        while not self.halted:
            self.exec_next()

        lg.debug(f'Halted at {self.ip} after {self.steps} steps')
        return self.memory
