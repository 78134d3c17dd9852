#!/usr/bin/env python

# SPDX-FileCopyrightText: 2025 Frederic Ruget <fred@atlant.is> (GitHub: @douzebis)
#
# SPDX-License-Identifier: MIT

from itertools import islice

import click
import yaml

from cob.auxiliaries import (
    NotANumberError,
    ValueOutOfRangeError,
    print_debug,
    warn,
)
from cob.constants import (
    DEFAULT_BASE_DEST,
    DEFAULT_BASE_SRC,
    MAX_BASE,
    MIN_BASE,
    PROGRAM_NAME,
    VERSION,
)
from cob.orchestrator import convert_argument, looks_like_option
from cob.parse_int import parse_base

VERSION_BANNER = (
    '%(prog)s %(version)s\n'
    'Copyright (C) 2025 Frederic Ruget\n'
    'License MIT <https://opensource.org/licenses/MIT>.\n'
    'This is free software. You are free to change and redistribute it.\n'
    'There is NO WARRANTY, to the extent permitted by law.'
)


# === Main CLI =================================================================


class IntegerCommand(click.Command):
    """Command whose INTEGER arguments may look like short options.

    Every token that is neither an option nor an option value is moved behind
    a `--` before click parses the command line, so that `-1B` reads as the
    numeral -1B rather than `-1` followed by `--base-src`.
    """

    def parse_args(self, ctx, args):
        return super().parse_args(ctx, self.split_integers(ctx, args))

    def split_integers(self, ctx, args: list[str]) -> list[str]:
        takes_value: dict[str, bool] = {}
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                for opt in param.opts + param.secondary_opts:
                    takes_value[opt] = not param.is_flag and not param.count

        options: list[str] = []
        integers: list[str] = []
        tokens = iter(args)
        for token in tokens:
            if token == '--':
                integers.extend(tokens)
                break
            if token.startswith('--'):
                options.append(token)
                if '=' not in token and takes_value.get(token):
                    options.extend(islice(tokens, 1))
            elif token.startswith('-') and f'-{token[1:2]}' in takes_value:
                options.append(token)
                # Clustered short options, the last one may take a value
                for pos in range(1, len(token)):
                    needs_value = takes_value.get(f'-{token[pos]}')
                    if needs_value is None:
                        break
                    if needs_value:
                        if pos == len(token) - 1:
                            options.extend(islice(tokens, 1))
                        break
            else:
                integers.append(token)

        return options + ['--'] + integers


@click.command(
    PROGRAM_NAME,
    cls=IntegerCommand,
    context_settings={'help_option_names': ['-h', '--help']},
    help=f'''
        Change of base. Convert INTEGER to another base. Bases must be
        between {MIN_BASE} and {MAX_BASE}.

        Digits run 0-9, then A-Z, then a-z, then the symbols !#$%&*=?@^,
        so letters are case-sensitive. A leading sign is allowed, and
        negative INTEGERs such as -42 or -1B need no '--'. Reading stops at
        the first character that is not a digit of the source base.

        \b
        Examples:
          {PROGRAM_NAME} -b2 64 32 13   Convert 64, 32 and 13 into binary
          {PROGRAM_NAME} 16             Convert 16 into base 16
          {PROGRAM_NAME} -B16 -b10 0xFF Convert hexadecimal FF into decimal
    ''',
)
@click.option(
    '-b', '--base-dest',
    type=str,
    callback=parse_base,
    default=str(DEFAULT_BASE_DEST),
    show_default=True,
    envvar='COB_BASE_DEST',
    metavar='N',
    help='Target base for conversion.',
)
@click.option(
    '-B', '--base-src',
    type=str,
    callback=parse_base,
    default=str(DEFAULT_BASE_SRC),
    show_default=True,
    envvar='COB_BASE_SRC',
    metavar='N',
    help='Base of the supplied integers.',
)
@click.option(
    '-n', '--no-format-string',
    is_flag=True,
    default=False,
    envvar='COB_NO_FORMAT_STRING',
    help='Hide the format specifier (0b, 0, 0x) for common bases.',
)
@click.option(
    '-y', '--yaml', 'as_yaml',
    is_flag=True,
    default=False,
    help='Print the conversions as a YAML document.',
)
@click.option(
    '--debug',
    is_flag=True,
    default=False,
    hidden=True,
    help='Enable debug instrumentation (hidden flag for troubleshooting)',
)
@click.version_option(
    VERSION, '-v', '--version',
    prog_name=PROGRAM_NAME,
    message=VERSION_BANNER,
)
@click.argument(
    'integers',
    nargs=-1,
    type=click.UNPROCESSED,
    metavar='[INTEGER]...',
)
@click.pass_context
def cli(
    ctx,
    base_dest: int,
    base_src: int,
    no_format_string: bool,
    as_yaml: bool,
    debug: bool,
    integers: tuple[str, ...],
) -> None:
    """Convert integers between bases."""

    if not integers:
        raise click.UsageError('expected arguments', ctx)

    # Dash-prefixed tokens that are not numerals of the source base
    for argument in integers:
        if looks_like_option(argument, base_src):
            raise click.NoSuchOption(argument, ctx=ctx)

    print_debug(debug, f'base_src={base_src} base_dest={base_dest}')

    status = 0
    records = []
    for argument in integers:
        try:
            conversion = convert_argument(
                argument,
                base_src=base_src,
                base_dest=base_dest,
                prefix=not no_format_string,
            )
        except NotANumberError as e:
            warn(f'{argument!r}: {e}', program_name=PROGRAM_NAME)
            status = 1
            continue
        except ValueOutOfRangeError:
            warn(f'{argument!r}: value out of range', program_name=PROGRAM_NAME)
            status = 1
            continue

        print_debug(debug, f'{argument!r} -> {conversion.value} -> {conversion.text!r}')
        if as_yaml:
            records.append(conversion.dict())
        else:
            print(conversion.text)

    if records:
        print(yaml.dump(records, indent=2, sort_keys=False), end='')

    if status:
        ctx.exit(status)


if __name__ == "__main__":
    cli()
