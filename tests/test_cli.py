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

from click.testing import CliRunner
import pandas as pd

from nmdrules.annotation import ANNOTATION_KEY
from nmdrules.batch import RECORD_FIELDS
from nmdrules.cli import get_config, main

from .utils import FS_ANNOTATION, FS_CDS, FS_EXONS, FS_HGVSP


def write_input(fp):
    fp.write_text('\n'.join([
        '\t'.join(RECORD_FIELDS),
        '\t'.join(['fs', FS_CDS, '', '', FS_EXONS, FS_HGVSP, '25', '24', 'T'])
    ]) + '\n')


def test_cli_annotate(tmp_path):
    input_fp = tmp_path / 'input.tsv'
    output_fp = tmp_path / 'output.tsv'
    write_input(input_fp)

    result = CliRunner().invoke(main, ['annotate', str(input_fp), str(output_fp)])
    assert result.exit_code == 0

    df = pd.read_csv(output_fp, sep='\t', keep_default_na=False)
    assert df.annotation.tolist() == [FS_ANNOTATION]


def test_cli_annotate_invalid_config(tmp_path):
    input_fp = tmp_path / 'input.tsv'
    config_fp = tmp_path / 'config.json'
    write_input(input_fp)
    config_fp.write_text('not a JSON')

    result = CliRunner().invoke(main, [
        'annotate', '--config', str(config_fp), str(input_fp), str(tmp_path / 'output.tsv')])
    assert result.exit_code == 1


def test_cli_annotate_invalid_input(tmp_path):
    input_fp = tmp_path / 'input.tsv'
    input_fp.write_text('a\tb\n')

    result = CliRunner().invoke(main, ['annotate', str(input_fp), str(tmp_path / 'output.tsv')])
    assert result.exit_code == 1


def test_cli_describe():
    result = CliRunner().invoke(main, ['describe'])
    assert result.exit_code == 0
    assert result.output.startswith(ANNOTATION_KEY)


def test_get_config_overrides(tmp_path):
    config_fp = tmp_path / 'config.json'
    config_fp.write_text('{"geneticCode": 2, "largeExonLength": 500}')

    config = get_config(str(config_fp), 11, True, False)
    assert config.genetic_code == 11
    assert config.large_exon_length == 500
    assert config.clamp_penultimate_window
    assert not config.debug
