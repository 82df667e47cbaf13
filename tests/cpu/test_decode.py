import pytest

import intcode.runtime.cpu as cpu
from intcode.runtime.memory import BoundsError

from unit_utils import words


def test_decode_add():
    memory = words(1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50)
    assert cpu.decode(memory, 0) == cpu.Add(30, 40, 3)


def test_decode_mul():
    memory = words(1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50)
    assert cpu.decode(memory, 4) == cpu.Mul(3, 50, 0)


def test_decode_halt():
    memory = words(1, 9, 10, 3, 2, 3, 11, 0, 99, 30, 40, 50)
    assert cpu.decode(memory, 8) == cpu.Halt()


def test_halt_reads_nothing_past_opcode():
    assert cpu.decode(words(99), 0) == cpu.Halt()


def test_add_and_mul_differ():
    assert cpu.Add(1, 1, 0) != cpu.Mul(1, 1, 0)


def test_decode_is_repeatable():
    memory = words(2, 3, 0, 3, 99)
    first = cpu.decode(memory, 0)
    second = cpu.decode(memory, 0)

    assert first == second
    assert memory == words(2, 3, 0, 3, 99)


def test_invalid_opcode():
    with pytest.raises(cpu.DecodeError) as e:
        cpu.decode(words(2, 0, 0, 0, 5), 4)

    assert e.value.opcode == 5
    assert e.value.position == 4
    assert '5' in str(e.value)


def test_operand_out_of_bounds():
    with pytest.raises(BoundsError) as e:
        cpu.decode(words(1, 9, 0, 0), 0)

    assert e.value.address == 9


def test_truncated_instruction():
    with pytest.raises(BoundsError):
        cpu.decode(words(1, 0), 0)
