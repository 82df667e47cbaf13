import sys
from pathlib import Path
import logging as lg
import traceback
from typing import Iterable

import click

from intcode.common.errors import IntcodeError
from intcode.common.settings import RunSettings
from intcode.loader.program import ParseError, load_program
from intcode.runtime.memory import Memory, BoundsError
import intcode.runtime.cpu as cpu
import intcode.runtime.emulator as emulator


DEFAULT_TARGET = 19690720
PARAM_RANGE = range(100)

EXIT_FOUND = emulator.EXIT_HALT
EXIT_NOT_FOUND = 6


class SearchFailed(IntcodeError):
    def __init__(self, target: int):
        self.target = target
        super().__init__(f"Couldn't find inputs with output {target}")


def answer(noun: int, verb: int) -> int:
    return 100 * noun + verb


def search(
    memory: Memory,
    target: int,
    nouns: Iterable[int] = PARAM_RANGE,
    verbs: Iterable[int] = PARAM_RANGE,
    settings: RunSettings | None = None
) -> tuple[int, int]:
    verbs = list(verbs)

    for noun in nouns:
        for verb in verbs:
            try:
                seeded = emulator.seed(memory, noun, verb)
                result = emulator.execute(seeded, settings)

            except (cpu.DecodeError, BoundsError, cpu.StepLimitExceeded) as e:
                lg.debug(f'noun={noun} verb={verb} failed: {e}')
                continue

            if result == target:
                lg.info(f'Found noun={noun} verb={verb}')
                return noun, verb

    raise SearchFailed(target)


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-t', '--target', type=int, default=DEFAULT_TARGET, show_default=True)
@click.option('--max-steps', type=click.IntRange(min=0), help='Abort a single run after this many instructions')
@click.argument('program_filename', type=Path)
def main(ctx: click.Context, program_filename: Path, target: int, **params):
    ctx.ensure_object(RunSettings)
    ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose else lg.INFO)
    lg.info(f'INTCODE SEARCH for {target}')

    try:
        memory = load_program(program_filename)
        noun, verb = search(memory, target, settings=ctx.obj)
        click.echo(answer(noun, verb))
        sys.exit(EXIT_FOUND)

    except ParseError as e:
        lg.error(f'Program rejected: {e}')
        sys.exit(emulator.EXIT_PARSE_ERROR)

    except SearchFailed as e:
        lg.error(str(e))
        sys.exit(EXIT_NOT_FOUND)

    except KeyboardInterrupt:
        lg.info('Search halted by the user')
        sys.exit(emulator.EXIT_KEYBOARD)

    except Exception as e:
        lg.error(f'Search halted on general error {e}')
        traceback.print_exc()
        sys.exit(emulator.EXIT_EXEC_ERROR)


if __name__ == '__main__':
    main()
