########## LICENCE ##########
# nmdrules
# Copyright (C) 2024 Genome Research Ltd
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#############################

import logging
import sys
from typing import Optional

import click

from . import __version__
from .annotation import ANNOTATION_DESCRIPTION, ANNOTATION_KEY
from .batch import annotate_file
from .codon_table import CodonTable, get_genetic_code_ids
from .codon_table_loader import load_codon_table_file
from .config import AnnotatorConfig, load_config
from .errors import InvalidConfig


existing_file = click.Path(exists=True, file_okay=True, dir_okay=False)
writable_file = click.Path(file_okay=True, dir_okay=False, writable=True)


def set_logger(ctx: click.Context, param: click.Parameter, value: str) -> None:
    logging.basicConfig(level=logging._nameToLevel[value.upper()])


def get_config(
    config_fp: Optional[str],
    genetic_code: Optional[int],
    clamp_penultimate_window: bool,
    debug: bool
) -> AnnotatorConfig:
    base = load_config(config_fp) if config_fp else AnnotatorConfig()

    # Command line options override the configuration file
    overrides = {
        k: v
        for k, v in [
            ('genetic_code', genetic_code),
            ('clamp_penultimate_window', clamp_penultimate_window or None),
            ('debug', debug or None)
        ]
        if v is not None
    }

    return AnnotatorConfig(**{**base.model_dump(), **overrides})


def load_codon_table(fp: Optional[str]) -> Optional[CodonTable]:
    if not fp:
        return None

    logging.debug("Loading codon table...")
    try:
        return load_codon_table_file(fp)
    except ValueError as ex:
        logging.critical(ex.args[0])
        logging.critical("Failed to load codon table!")
        sys.exit(1)


@click.group()
@click.version_option(__version__)
def main():
    pass


@main.command()
@click.argument('input_fp', type=existing_file, metavar='INPUT')
@click.argument('output_fp', type=writable_file, metavar='OUTPUT')
@click.option('-c', '--config', 'config_fp', type=existing_file, help="Configuration file path")
@click.option(
    '--genetic-code',
    type=click.Choice([str(i) for i in get_genetic_code_ids()]),
    help="Default NCBI genetic code table")
@click.option('--codon-table', 'codon_table_fp', type=existing_file, help="Codon table file path")
@click.option(
    '--clamp-penultimate-window',
    is_flag=True,
    help="Restrict the penultimate exon window to the exon")
@click.option('--debug', is_flag=True, help="Log intermediate values for each variant")
@click.option(
    '--log',
    default='WARNING',
    type=click.Choice(list(logging._nameToLevel.keys()), case_sensitive=False),
    callback=set_logger,
    expose_value=False,
    help="Logging level")
def annotate(
    input_fp: str,
    output_fp: str,
    config_fp: Optional[str],
    genetic_code: Optional[str],
    codon_table_fp: Optional[str],
    clamp_penultimate_window: bool,
    debug: bool
):
    """
    NMD escape prediction for protein-truncating variants

    \b
    INPUT is the TSV file of transcripts and variants
    OUTPUT is the annotation TSV file path
    """

    try:
        config = get_config(
            config_fp,
            int(genetic_code) if genetic_code else None,
            clamp_penultimate_window,
            debug)

    except InvalidConfig as ex:
        logging.critical("Invalid configuration%s!" % (' ' + ex.args[0] if ex.args else ''))
        sys.exit(1)

    codon_table = load_codon_table(codon_table_fp)

    try:
        annotate_file(input_fp, output_fp, config, codon_table=codon_table)

    except ValueError as ex:
        logging.critical(ex.args[0])
        sys.exit(1)

    except (PermissionError, FileNotFoundError) as ex:
        logging.critical(ex)
        sys.exit(1)


@main.command()
def describe():
    """Print the annotation field description"""

    click.echo(f"{ANNOTATION_KEY}\t{ANNOTATION_DESCRIPTION}")
