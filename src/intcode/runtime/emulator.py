import sys
from pathlib import Path
import logging as lg
import traceback

import click

import intcode.common.ops as ops
from intcode.common.settings import RunSettings
from intcode.loader.program import ParseError, parse_program, load_program
from intcode.runtime.memory import Memory, BoundsError
import intcode.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_PARSE_ERROR = 1
EXIT_DECODE_ERROR = 2
EXIT_BOUNDS_ERROR = 3
EXIT_STEP_LIMIT = 4
EXIT_KEYBOARD = 5
EXIT_EXEC_ERROR = 100


def seed(memory: Memory, noun: int | None, verb: int | None) -> Memory:
    if noun is not None:
        memory = memory.write(ops.NOUN_ADDR, noun)

    if verb is not None:
        memory = memory.write(ops.VERB_ADDR, verb)

    return memory


def execute(memory: Memory, settings: RunSettings | None = None) -> int:
    proc = cpu.CPU(memory, settings)
    final = proc.run()
    return final.read(ops.RESULT_ADDR)


def run(
    program_text: str,
    noun: int,
    verb: int,
    settings: RunSettings | None = None
) -> int:
    memory = parse_program(program_text)
    return execute(seed(memory, noun, verb), settings)


@click.command()
@click.pass_context
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--noun', type=int, help='Value seeded at address 1')
@click.option('--verb', type=int, help='Value seeded at address 2')
@click.option('--max-steps', type=click.IntRange(min=0), help='Abort after this many instructions')
@click.argument('program_filename', type=Path)
def main(
    ctx: click.Context,
    program_filename: Path,
    noun: int | None,
    verb: int | None,
    **params
):
    ctx.ensure_object(RunSettings)
    ctx.obj.update(**params)

    lg.basicConfig(level=lg.DEBUG if ctx.obj.verbose else lg.INFO)
    lg.info("INTCODE")

    try:
        memory = seed(load_program(program_filename), noun, verb)
        result = execute(memory, ctx.obj)
        lg.info('Execution halted gracefully')
        click.echo(result)
        sys.exit(EXIT_HALT)

    except ParseError as e:
        lg.error(f'Program rejected: {e}')
        sys.exit(EXIT_PARSE_ERROR)

    except cpu.DecodeError as e:
        lg.error(f'Execution halted on decode error: {e}')
        sys.exit(EXIT_DECODE_ERROR)

    except BoundsError as e:
        lg.error(f'Execution halted on memory fault: {e}')
        sys.exit(EXIT_BOUNDS_ERROR)

    except cpu.StepLimitExceeded as e:
        lg.error(f'Execution aborted: {e}')
        sys.exit(EXIT_STEP_LIMIT)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.error(f'Execution halted on general error {e}')
        traceback.print_exc()
        sys.exit(EXIT_EXEC_ERROR)


if __name__ == '__main__':
    main()
